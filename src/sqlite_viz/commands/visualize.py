"""SQLite catalog → Graphviz DOT."""
from __future__ import annotations
import logging
from pathlib import Path

from sqlite_viz.config import get_settings
from sqlite_viz.dot_writer import Palette, to_dot
from sqlite_viz.loader import load_path

logger = logging.getLogger(__name__)


def run_visualize(database: str | Path, palette: Palette | None = None) -> str:
    """
    Load the schema of ``database`` and return its DOT text.
    The connection is closed before rendering starts.
    """
    schema = load_path(database)
    if palette is None:
        cfg = get_settings()
        palette = Palette(primary=cfg.primary_color, nullable=cfg.nullable_color)
    logger.debug("rendering %d tables", len(schema))
    return to_dot(schema, palette)
