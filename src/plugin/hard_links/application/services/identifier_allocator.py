"""Allocation of catalog-unique group identifiers."""

from __future__ import annotations

import uuid
from collections.abc import Callable

from hard_links.application.observability import (
    DefaultIdentifierAllocatorProbe,
    IdentifierAllocatorProbe,
)
from hard_links.domain.value_objects import HARD_LINK_ATTRIBUTE, GroupId
from hard_links.ports.catalog import Catalog
from hard_links.ports.queries import CatalogQuery, Column


class IdentifierAllocator:
    """Generates group identifiers not used by any existing group.

    Candidates are random UUIDs; each one is checked against the catalog
    and regenerated on collision. There is no retry limit: the candidate
    space makes a second iteration exceptionally rare.
    """

    def __init__(
        self,
        catalog: Catalog,
        attribute: str = HARD_LINK_ATTRIBUTE,
        uuid_factory: Callable[[], uuid.UUID] = uuid.uuid4,
        probe: IdentifierAllocatorProbe | None = None,
    ):
        self._catalog = catalog
        self._attribute = attribute
        self._uuid_factory = uuid_factory
        self._probe = probe or DefaultIdentifierAllocatorProbe()

    def allocate(self) -> GroupId:
        """Return an identifier no data object is currently tagged with."""
        attempts = 0
        while True:
            attempts += 1
            candidate = GroupId.from_uuid(self._uuid_factory())
            if not self._in_use(candidate):
                self._probe.group_id_allocated(
                    group_id=candidate.value, attempts=attempts
                )
                return candidate

            self._probe.group_id_collision(group_id=candidate.value)

    def _in_use(self, group_id: GroupId) -> bool:
        query = CatalogQuery.count_of(Column.DATA_NAME).where(
            META_DATA_ATTR_NAME=self._attribute,
            META_DATA_ATTR_VALUE=group_id.value,
        )
        for row in self._catalog.submit(query):
            return int(row[0]) > 0

        return False
