"""Catalog protocol (port) consumed by the hard-link engine.

The catalog owns query execution, physical-path registration and metadata
storage. Timeouts and retries of the underlying round-trips are the
adapter's concern; the engine issues each call once and synchronously.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from hard_links.domain.value_objects import LogicalPath, MetadataTag
from hard_links.ports.queries import CatalogQuery, Row


@runtime_checkable
class Catalog(Protocol):
    """Query and mutation primitives of the host catalog.

    Mutation primitives follow the host convention of returning an integer
    status where a negative value signals failure. ``set_metadata`` raises
    instead.
    """

    def submit(self, query: CatalogQuery) -> list[Row]:
        """Execute a query and return all rows.

        Args:
            query: The projection to evaluate

        Returns:
            Rows of string columns in the order of ``query.columns``;
            a count query returns exactly one row with the count

        Raises:
            CatalogError: If the query cannot be executed
        """
        ...

    def register_existing_payload(
        self, logical_path: LogicalPath, physical_path: str
    ) -> int:
        """Register a new data object pointing at an existing payload.

        No payload bytes are copied or moved.
        """
        ...

    def set_physical_path(self, logical_path: LogicalPath, physical_path: str) -> int:
        """Update the recorded physical path of a data object."""
        ...

    def force_unregister(self, logical_path: LogicalPath) -> int:
        """Remove a data object's catalog record and metadata.

        The payload at the recorded physical path is left untouched.
        """
        ...

    def set_metadata(self, logical_path: LogicalPath, tag: MetadataTag) -> None:
        """Attach ``tag`` to a data object, replacing any value of the same attribute.

        Raises:
            CatalogError: If the metadata cannot be written
        """
        ...
