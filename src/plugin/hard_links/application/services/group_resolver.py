"""Group resolution for hard-link groups.

Looks up the group identifier tagged onto a data object and the other data
objects carrying the same identifier.
"""

from __future__ import annotations

from hard_links.application.observability import (
    DefaultGroupResolverProbe,
    GroupResolverProbe,
)
from hard_links.domain.value_objects import (
    HARD_LINK_ATTRIBUTE,
    GroupId,
    LogicalPath,
    MetadataTag,
)
from hard_links.ports.catalog import Catalog
from hard_links.ports.queries import CatalogQuery, Column


class GroupResolver:
    """Resolves group membership from catalog metadata.

    A missing data object is not an error: it simply has no group and no
    siblings. Catalog failures propagate as CatalogError.
    """

    def __init__(
        self,
        catalog: Catalog,
        attribute: str = HARD_LINK_ATTRIBUTE,
        scope_by_resource: bool = False,
        probe: GroupResolverProbe | None = None,
    ):
        """Initialize the resolver.

        Args:
            catalog: Catalog to query
            attribute: Metadata attribute carrying the group identifier
            scope_by_resource: Only consider members tagged with the same
                resource scope as the queried path
            probe: Optional domain probe for observability
        """
        self._catalog = catalog
        self._attribute = attribute
        self._scope_by_resource = scope_by_resource
        self._probe = probe or DefaultGroupResolverProbe()

    def resolve(self, logical_path: LogicalPath) -> GroupId | None:
        """Return the group identifier of a data object, if tagged.

        If the object carries several tags, the first row returned by the
        catalog wins.
        """
        tag = self.group_tag_of(logical_path)
        if tag is None:
            return None
        return GroupId(value=tag.value)

    def group_tag_of(self, logical_path: LogicalPath) -> MetadataTag | None:
        """Return the group tag attached to a data object, if any.

        The tag unit is the resource scope recorded when the member joined
        its group.
        """
        query = CatalogQuery.select(
            Column.META_DATA_ATTR_VALUE, Column.META_DATA_ATTR_UNITS
        ).where(
            COLL_NAME=logical_path.collection,
            DATA_NAME=logical_path.data_name,
            META_DATA_ATTR_NAME=self._attribute,
        )
        rows = self._catalog.submit(query)
        if not rows:
            return None

        if len(rows) > 1:
            self._probe.multiple_group_tags_found(
                logical_path=logical_path.value,
                group_ids=[row[0] for row in rows],
            )

        value, unit = rows[0]
        return MetadataTag(attribute=self._attribute, value=value, unit=unit)

    def members_of(
        self,
        group_id: GroupId,
        resource_scope: str | None = None,
    ) -> list[LogicalPath]:
        """Return every data object tagged with ``group_id``.

        Args:
            group_id: Group to list
            resource_scope: When given, only members whose tag unit equals
                this scope are returned

        Returns:
            Logical paths in the order produced by the catalog
        """
        query = CatalogQuery.select(Column.COLL_NAME, Column.DATA_NAME).where(
            META_DATA_ATTR_NAME=self._attribute,
            META_DATA_ATTR_VALUE=group_id.value,
        )
        if resource_scope is not None:
            query = query.where(META_DATA_ATTR_UNITS=resource_scope)

        return [
            LogicalPath.join(collection, data_name)
            for collection, data_name in self._catalog.submit(query)
        ]

    def siblings_of(self, logical_path: LogicalPath) -> list[LogicalPath]:
        """Return the other members of the group ``logical_path`` belongs to.

        With resource scoping on, members are matched on the unit of the
        path's own tag. Its current resource may differ from the one the
        group was tagged with.
        """
        tag = self.group_tag_of(logical_path)
        if tag is None:
            return []

        group_id = GroupId(value=tag.value)
        scope = tag.unit if self._scope_by_resource else None

        return [
            member
            for member in self.members_of(group_id, resource_scope=scope)
            if member != logical_path
        ]
