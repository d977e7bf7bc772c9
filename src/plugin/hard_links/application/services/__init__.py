"""Application services for the hard-link bounded context."""

from hard_links.application.services.deletion_guard import DeletionGuard
from hard_links.application.services.group_resolver import GroupResolver
from hard_links.application.services.identifier_allocator import IdentifierAllocator
from hard_links.application.services.link_service import LinkService
from hard_links.application.services.rename_propagator import RenamePropagator

__all__ = [
    "DeletionGuard",
    "GroupResolver",
    "IdentifierAllocator",
    "LinkService",
    "RenamePropagator",
]
