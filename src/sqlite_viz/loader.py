from __future__ import annotations
import logging
import sqlite3
from pathlib import Path
from typing import List

from sqlite_viz.errors import ErrorChain, wrap_err
from sqlite_viz.model import Column, ForeignKey, Schema, Table
from sqlite_viz.raw import (
    RawColumn,
    RawForeignKey,
    RawTable,
    fetch_rows,
    to_column,
    to_foreign_key,
)

logger = logging.getLogger(__name__)

# sqlite_sequence only tracks AUTOINCREMENT counters
TABLES_SQL = "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT IN ('sqlite_sequence')"
COLUMNS_SQL = "SELECT * FROM pragma_table_info(?)"
FOREIGN_KEYS_SQL = "SELECT * FROM pragma_foreign_key_list(?)"


def open_database(path: str | Path) -> sqlite3.Connection:
    """
    Open ``path`` read-only. Fails before any catalog query when the file
    is missing or is not a SQLite database.
    """
    p = Path(path)
    with wrap_err("failed to open database"):
        if not p.is_file():
            raise ErrorChain(f"database file `{p}` does not exist")
        conn = sqlite3.connect(f"{p.resolve().as_uri()}?mode=ro", uri=True)
        try:
            conn.execute("PRAGMA schema_version").fetchone()
        except sqlite3.Error:
            conn.close()
            raise
    logger.debug("opened %s read-only", p)
    return conn


def list_tables(conn: sqlite3.Connection) -> List[str]:
    logger.debug("listing tables")
    rows = fetch_rows(conn.execute(TABLES_SQL))
    return [RawTable.model_validate(r).name for r in rows]


def list_columns(conn: sqlite3.Connection, table: str) -> List[Column]:
    logger.debug("listing columns for %s", table)
    rows = fetch_rows(conn.execute(COLUMNS_SQL, (table,)))
    return [to_column(RawColumn.model_validate(r)) for r in rows]


def list_foreign_keys(conn: sqlite3.Connection, table: str) -> List[ForeignKey]:
    logger.debug("listing foreign keys for %s", table)
    rows = fetch_rows(conn.execute(FOREIGN_KEYS_SQL, (table,)))
    return [to_foreign_key(table, RawForeignKey.model_validate(r)) for r in rows]


def load(conn: sqlite3.Connection) -> Schema:
    """
    Read the catalog into a Schema. Queries run strictly one at a time:
    tables, then per table its columns followed by its keys.
    Raises ErrorChain naming the failing step and table.
    """
    with wrap_err("failed to get tables"):
        names = list_tables(conn)

    tables: List[Table] = []
    for name in names:
        with wrap_err(f"failed to get columns for `{name}`"):
            columns = list_columns(conn, name)
        with wrap_err(f"failed to get keys for `{name}`"):
            keys = list_foreign_keys(conn, name)
        tables.append(Table(name=name, columns=tuple(columns), foreign_keys=tuple(keys)))

    logger.info("loaded %d tables", len(tables))
    return Schema(tables=tuple(tables))


def load_path(path: str | Path) -> Schema:
    conn = open_database(path)
    try:
        return load(conn)
    finally:
        conn.close()
