from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Optional, Tuple

@dataclass(frozen=True)
class Column:
    name: str
    typ: str
    nullable: bool = True
    primary: bool = False
    default: Optional[str] = None

@dataclass(frozen=True)
class ForeignKey:
    source_table: str
    source_column: str
    target_table: str
    # None when the reference implicitly targets the parent's primary key
    target_column: Optional[str] = None

@dataclass(frozen=True)
class Table:
    name: str
    columns: Tuple[Column, ...] = ()
    foreign_keys: Tuple[ForeignKey, ...] = ()

@dataclass(frozen=True)
class Schema:
    """Tables in catalog enumeration order."""
    tables: Tuple[Table, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[Table]:
        return iter(self.tables)

    def __len__(self) -> int:
        return len(self.tables)

    def table(self, name: str) -> Optional[Table]:
        for t in self.tables:
            if t.name == name:
                return t
        return None
