from __future__ import annotations
import html
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sqlite_viz.model import Column, ForeignKey, Schema, Table

@dataclass(frozen=True)
class Palette:
    primary: str = "#2aa198"
    nullable: str = "#6c71c4"

DEFAULT_PALETTE = Palette()

TABLE_OPEN = "<table border='0' cellborder='1' cellspacing='0' cellpadding='5'>"

def quote_id(name: str) -> str:
    # \" is the only escape inside a quoted ID
    if name.endswith("\\"):
        # a trailing backslash would swallow the closing quote
        return f"<{html.escape(name, quote=False)}>"
    escaped = name.replace('"', '\\"')
    return f'"{escaped}"'

def label_text(text: str) -> str:
    return html.escape(text, quote=True)

def color_attr(c: Column, palette: Palette) -> str:
    # primary wins over nullable
    if c.primary:
        return f"bgcolor='{palette.primary}'"
    if c.nullable:
        return f"bgcolor='{palette.nullable}'"
    return ""

def column_row(c: Column, palette: Palette) -> str:
    name = label_text(c.name)
    return (
        f"<tr><td {color_attr(c, palette)} width='16'></td>"
        f"<td>{name}</td><td port='{name}'>{label_text(c.typ)}</td></tr>"
    )

def table_node(t: Table, palette: Palette) -> list[str]:
    lines = [
        f"{quote_id(t.name)} [shape=plaintext label=< {TABLE_OPEN}",
        f"<tr><td border='0'></td><td colspan='2'><b>{label_text(t.name)}</b></td></tr>",
    ]
    for c in t.columns:
        lines.append(column_row(c, palette))
    lines.append("</table> >]")
    return lines

def edge(fk: ForeignKey) -> str:
    # targets the whole table node; target_column is intentionally not used
    return f"{quote_id(fk.source_table)}:{quote_id(fk.source_column)} -> {quote_id(fk.target_table)}"

def to_dot(schema: Schema, palette: Optional[Palette] = None) -> str:
    palette = palette or DEFAULT_PALETTE
    lines: list[str] = ["digraph {", "rankdir=LR;"]

    for t in schema.tables:
        lines.extend(table_node(t, palette))
        for fk in t.foreign_keys:
            lines.append(edge(fk))

    lines.append("}")
    lines.append("")
    return "\n".join(lines)

def render(schema: Schema) -> str:
    return to_dot(schema)

def write_dot(schema: Schema, out_path: Path, palette: Optional[Palette] = None) -> Path:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(to_dot(schema, palette), encoding="utf-8")
    return out_path
