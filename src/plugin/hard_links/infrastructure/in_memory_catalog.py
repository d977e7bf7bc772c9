"""In-memory implementation of the Catalog protocol.

Models the subset of a catalog the hard-link engine relies on: data object
records, their metadata, and the payloads they point at. It is used by the
test suite and for running the engine without a server. A production
deployment provides an adapter over the server's own query and mutation
APIs instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from hard_links.domain.value_objects import (
    HARD_LINK_ATTRIBUTE,
    GroupId,
    LogicalPath,
    Member,
    MetadataTag,
)
from hard_links.ports.exceptions import CatalogError
from hard_links.ports.queries import CatalogQuery, Column, Row

# Status codes returned by the mutation primitives
CAT_NO_ROWS_FOUND = -808000
CATALOG_ALREADY_HAS_ITEM_BY_THAT_NAME = -809000
UNIX_FILE_STAT_ERR = -512000

MutationName = Literal[
    "register_existing_payload",
    "set_physical_path",
    "force_unregister",
    "set_metadata",
]


@dataclass
class DataObjectRecord:
    """Catalog record of one data object."""

    logical_path: LogicalPath
    physical_path: str
    resource_id: str


class InMemoryCatalog:
    """In-memory catalog of data objects, metadata and payloads.

    Records are kept in insertion order, so queries return rows in a
    stable order.

    Thread-safety: This implementation is NOT thread-safe.
    """

    def __init__(self, default_resource_id: str = "10014") -> None:
        """Initialize an empty catalog."""
        self._default_resource_id = default_resource_id
        self._records: dict[LogicalPath, DataObjectRecord] = {}
        self._metadata: dict[LogicalPath, list[MetadataTag]] = {}
        self._payloads: set[str] = set()
        self._failures: dict[tuple[MutationName, LogicalPath], int] = {}
        self.submitted: list[CatalogQuery] = []

    # Host-side operations

    def put_data_object(
        self,
        logical_path: LogicalPath,
        physical_path: str,
        resource_id: str | None = None,
    ) -> None:
        """Create a data object and its payload, as an upload would."""
        self._payloads.add(physical_path)
        self._records[logical_path] = DataObjectRecord(
            logical_path=logical_path,
            physical_path=physical_path,
            resource_id=resource_id or self._default_resource_id,
        )
        self._metadata.setdefault(logical_path, [])

    def move_payload(self, logical_path: LogicalPath, physical_path: str) -> None:
        """Move a data object's payload, as a rename on the server would."""
        record = self._require(logical_path)
        self._payloads.discard(record.physical_path)
        self._payloads.add(physical_path)
        record.physical_path = physical_path

    def unlink(self, logical_path: LogicalPath) -> int:
        """Default deletion: remove the record and destroy its payload."""
        record = self._records.pop(logical_path, None)
        if record is None:
            return CAT_NO_ROWS_FOUND
        self._metadata.pop(logical_path, None)
        self._payloads.discard(record.physical_path)
        return 0

    def inject_failure(
        self,
        operation: MutationName,
        logical_path: LogicalPath,
        status: int = -1,
    ) -> None:
        """Make the next calls of ``operation`` on ``logical_path`` fail."""
        self._failures[(operation, logical_path)] = status

    # Inspection

    def exists(self, logical_path: LogicalPath) -> bool:
        return logical_path in self._records

    def payload_exists(self, physical_path: str) -> bool:
        return physical_path in self._payloads

    def metadata_of(self, logical_path: LogicalPath) -> list[MetadataTag]:
        return list(self._metadata.get(logical_path, []))

    def get_member(
        self,
        logical_path: LogicalPath,
        attribute: str = HARD_LINK_ATTRIBUTE,
    ) -> Member | None:
        """Return the data object as a group member view, or None."""
        record = self._records.get(logical_path)
        if record is None:
            return None

        group_id = next(
            (
                GroupId(value=tag.value)
                for tag in self._metadata.get(logical_path, [])
                if tag.attribute == attribute
            ),
            None,
        )
        return Member(
            logical_path=logical_path,
            physical_path=record.physical_path,
            resource_scope=record.resource_id,
            group_id=group_id,
        )

    # Catalog protocol

    def submit(self, query: CatalogQuery) -> list[Row]:
        """Evaluate a query against the stored records."""
        self.submitted.append(query)
        conditions = query.condition_map

        matches = [
            row
            for row in self._rows(with_metadata=query.touches_metadata)
            if all(row.get(column) == value for column, value in conditions.items())
        ]

        if query.count:
            return [[str(len(matches))]]

        return [[row[column] for column in query.columns] for row in matches]

    def register_existing_payload(
        self, logical_path: LogicalPath, physical_path: str
    ) -> int:
        if status := self._failures.get(("register_existing_payload", logical_path)):
            return status
        if logical_path in self._records:
            return CATALOG_ALREADY_HAS_ITEM_BY_THAT_NAME
        if physical_path not in self._payloads:
            return UNIX_FILE_STAT_ERR

        self._records[logical_path] = DataObjectRecord(
            logical_path=logical_path,
            physical_path=physical_path,
            resource_id=self._default_resource_id,
        )
        self._metadata.setdefault(logical_path, [])
        return 0

    def set_physical_path(self, logical_path: LogicalPath, physical_path: str) -> int:
        if status := self._failures.get(("set_physical_path", logical_path)):
            return status
        record = self._records.get(logical_path)
        if record is None:
            return CAT_NO_ROWS_FOUND

        record.physical_path = physical_path
        return 0

    def force_unregister(self, logical_path: LogicalPath) -> int:
        if status := self._failures.get(("force_unregister", logical_path)):
            return status
        if self._records.pop(logical_path, None) is None:
            return CAT_NO_ROWS_FOUND

        self._metadata.pop(logical_path, None)
        return 0

    def set_metadata(self, logical_path: LogicalPath, tag: MetadataTag) -> None:
        if status := self._failures.get(("set_metadata", logical_path)):
            raise CatalogError(
                f"Could not set metadata on [{logical_path}]", status=status
            )
        if logical_path not in self._records:
            raise CatalogError(
                f"Data object does not exist [{logical_path}]",
                status=CAT_NO_ROWS_FOUND,
            )

        tags = [t for t in self._metadata[logical_path] if t.attribute != tag.attribute]
        tags.append(tag)
        self._metadata[logical_path] = tags

    def _require(self, logical_path: LogicalPath) -> DataObjectRecord:
        record = self._records.get(logical_path)
        if record is None:
            raise CatalogError(
                f"Data object does not exist [{logical_path}]",
                status=CAT_NO_ROWS_FOUND,
            )
        return record

    def _rows(self, with_metadata: bool) -> list[dict[Column, str]]:
        rows: list[dict[Column, str]] = []
        for path, record in self._records.items():
            base = {
                Column.COLL_NAME: path.collection,
                Column.DATA_NAME: path.data_name,
                Column.DATA_PATH: record.physical_path,
                Column.RESC_ID: record.resource_id,
            }
            if not with_metadata:
                rows.append(base)
                continue

            for tag in self._metadata.get(path, []):
                rows.append(
                    {
                        **base,
                        Column.META_DATA_ATTR_NAME: tag.attribute,
                        Column.META_DATA_ATTR_VALUE: tag.value,
                        Column.META_DATA_ATTR_UNITS: tag.unit,
                    }
                )
        return rows
