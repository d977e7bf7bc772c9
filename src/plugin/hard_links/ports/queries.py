"""Catalog query value objects.

Queries are predicate-filtered projections over a fixed set of logical
columns. Catalog adapters evaluate them against their own storage.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import TypeAlias

Row: TypeAlias = Sequence[str]


class Column(StrEnum):
    """Logical catalog columns the engine queries."""

    COLL_NAME = "COLL_NAME"
    DATA_NAME = "DATA_NAME"
    DATA_PATH = "DATA_PATH"
    RESC_ID = "RESC_ID"
    META_DATA_ATTR_NAME = "META_DATA_ATTR_NAME"
    META_DATA_ATTR_VALUE = "META_DATA_ATTR_VALUE"
    META_DATA_ATTR_UNITS = "META_DATA_ATTR_UNITS"

    @property
    def is_metadata(self) -> bool:
        return self.value.startswith("META_")

@dataclass(frozen=True)
class CatalogQuery:
    """A projection over catalog columns filtered by equality predicates.

    Attributes:
        columns: Columns to return, in row order
        conditions: (column, value) pairs that must all match
        count: When True the query returns a single row holding the
            number of matches instead of the matching rows

    Example:
        query = CatalogQuery.select(Column.DATA_PATH).where(
            COLL_NAME="/tempZone/home/rods",
            DATA_NAME="a.txt",
        )
    """

    columns: tuple[Column, ...]
    conditions: tuple[tuple[Column, str], ...] = ()
    count: bool = False

    @classmethod
    def select(cls, *columns: Column) -> CatalogQuery:
        if not columns:
            raise ValueError("A query must select at least one column")
        return cls(columns=tuple(columns))

    @classmethod
    def count_of(cls, column: Column) -> CatalogQuery:
        return cls(columns=(column,), count=True)

    def where(self, **conditions: str) -> CatalogQuery:
        """Return a copy with additional equality predicates."""
        added = tuple((Column(name), value) for name, value in conditions.items())
        return CatalogQuery(
            columns=self.columns,
            conditions=self.conditions + added,
            count=self.count,
        )

    @property
    def condition_map(self) -> Mapping[Column, str]:
        return dict(self.conditions)

    @property
    def touches_metadata(self) -> bool:
        """Whether evaluating the query requires joining metadata."""
        return any(c.is_metadata for c in self.columns) or any(
            c.is_metadata for c, _ in self.conditions
        )
