"""Link creation for the hard-link bounded context.

Registers a new logical path over the payload of an existing data object
and binds both ends to a shared group identifier.
"""

from __future__ import annotations

from hard_links.application.observability import (
    DefaultLinkServiceProbe,
    LinkServiceProbe,
)
from hard_links.application.services.catalog_support import (
    physical_path_of,
    resource_scope_of,
)
from hard_links.application.services.group_resolver import GroupResolver
from hard_links.application.services.identifier_allocator import IdentifierAllocator
from hard_links.application.value_objects import LinkResult
from hard_links.domain.value_objects import (
    HARD_LINK_ATTRIBUTE,
    LogicalPath,
    MetadataTag,
)
from hard_links.ports.catalog import Catalog
from hard_links.ports.exceptions import CatalogError


class LinkService:
    """Application service creating hard links.

    Catalog writes are issued one after another. Nothing is rolled back if
    a later step fails: a registered link whose tagging failed stays
    registered and must be cleaned up by an administrator.
    """

    def __init__(
        self,
        catalog: Catalog,
        resolver: GroupResolver,
        allocator: IdentifierAllocator,
        attribute: str = HARD_LINK_ATTRIBUTE,
        strict_registration: bool = False,
        probe: LinkServiceProbe | None = None,
    ):
        """Initialize LinkService with dependencies.

        Args:
            catalog: Catalog holding the data objects
            resolver: Resolver used to reuse an existing group identifier
            allocator: Allocator used when the source has no group yet
            attribute: Metadata attribute carrying the group identifier
            strict_registration: Abort when registering the link fails
                instead of logging and continuing
            probe: Optional domain probe for observability
        """
        self._catalog = catalog
        self._resolver = resolver
        self._allocator = allocator
        self._attribute = attribute
        self._strict_registration = strict_registration
        self._probe = probe or DefaultLinkServiceProbe()

    def create_link(self, source: LogicalPath, link: LogicalPath) -> LinkResult:
        """Create ``link`` as a hard link to ``source``.

        Args:
            source: Existing data object whose payload is shared
            link: Logical path of the new data object

        Returns:
            LinkResult describing the group the link joined

        Raises:
            SourceNotFoundError: If the source has no physical path
            CatalogError: If the resource id of the source cannot be found,
                if tagging fails, or if registration fails under
                ``strict_registration``
        """
        physical_path = physical_path_of(self._catalog, source)

        registered = True
        status = self._catalog.register_existing_payload(link, physical_path)
        if status < 0:
            registered = False
            self._probe.payload_registration_failed(
                link_name=link.value,
                physical_path=physical_path,
                status=status,
            )
            if self._strict_registration:
                raise CatalogError(
                    f"Could not make hard-link [physical_path = {physical_path}, "
                    f"link_name = {link}]",
                    status=status,
                )

        group_id = self._resolver.resolve(source)
        new_group = group_id is None
        if group_id is None:
            group_id = self._allocator.allocate()

        resource_scope = resource_scope_of(self._catalog, source)
        if resource_scope is None:
            raise CatalogError("Could not get resource id for source logical path")

        tag = MetadataTag(
            attribute=self._attribute,
            value=group_id.value,
            unit=resource_scope,
        )

        try:
            self._catalog.set_metadata(link, tag)
            if new_group:
                self._catalog.set_metadata(source, tag)
        except CatalogError as e:
            self._probe.hard_link_tagging_failed(
                logical_path=source.value,
                link_name=link.value,
                error=e.message,
                status=e.status,
            )
            raise

        self._probe.hard_link_created(
            logical_path=source.value,
            link_name=link.value,
            physical_path=physical_path,
            group_id=group_id.value,
            new_group=new_group,
        )
        return LinkResult(
            link=link,
            physical_path=physical_path,
            group_id=group_id,
            new_group=new_group,
            registered=registered,
        )
