"""Row decoders for the catalog queries and their mapping into the domain model.

The decoders know the pragma column names; nothing outside this module does.
"""
from __future__ import annotations
import sqlite3
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from sqlite_viz.model import Column, ForeignKey


class RawTable(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class RawColumn(BaseModel):
    """One row of ``pragma_table_info``."""
    model_config = ConfigDict(extra="ignore")

    name: str
    type: str = ""
    notnull: int = 0
    # 1-based position inside the primary key, 0 if not part of it
    pk: int = 0
    dflt_value: Optional[str] = None


class RawForeignKey(BaseModel):
    """One row of ``pragma_foreign_key_list``."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    table: str
    to: Optional[str] = None
    from_: str = Field(alias="from")


def fetch_rows(cursor: sqlite3.Cursor) -> List[Dict[str, Any]]:
    names = [d[0] for d in cursor.description or ()]
    return [dict(zip(names, row)) for row in cursor.fetchall()]


def to_column(raw: RawColumn) -> Column:
    return Column(
        name=raw.name,
        typ=raw.type,
        nullable=not raw.notnull,
        primary=raw.pk > 0,
        default=raw.dflt_value,
    )


def to_foreign_key(table: str, raw: RawForeignKey) -> ForeignKey:
    return ForeignKey(
        source_table=table,
        source_column=raw.from_,
        target_table=raw.table,
        target_column=raw.to,
    )
