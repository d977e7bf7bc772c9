"""Domain-Oriented Observability for the hard-link application layer.

Probes for application service operations following Domain-Oriented Observability patterns.
"""

from hard_links.application.observability.deletion_guard_probe import (
    DefaultDeletionGuardProbe,
    DeletionGuardProbe,
)
from hard_links.application.observability.group_probe import (
    DefaultGroupResolverProbe,
    DefaultIdentifierAllocatorProbe,
    GroupResolverProbe,
    IdentifierAllocatorProbe,
)
from hard_links.application.observability.link_service_probe import (
    DefaultLinkServiceProbe,
    LinkServiceProbe,
)
from hard_links.application.observability.rename_propagator_probe import (
    DefaultRenamePropagatorProbe,
    RenamePropagatorProbe,
)

__all__ = [
    "DeletionGuardProbe",
    "DefaultDeletionGuardProbe",
    "GroupResolverProbe",
    "DefaultGroupResolverProbe",
    "IdentifierAllocatorProbe",
    "DefaultIdentifierAllocatorProbe",
    "LinkServiceProbe",
    "DefaultLinkServiceProbe",
    "RenamePropagatorProbe",
    "DefaultRenamePropagatorProbe",
]
