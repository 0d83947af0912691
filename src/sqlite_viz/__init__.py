"""Render the structure of a SQLite database as a Graphviz graph."""
from sqlite_viz.dot_writer import render
from sqlite_viz.loader import load, load_path, open_database
from sqlite_viz.model import Column, ForeignKey, Schema, Table

__all__ = ["Column", "ForeignKey", "Schema", "Table", "load", "load_path", "open_database", "render"]
