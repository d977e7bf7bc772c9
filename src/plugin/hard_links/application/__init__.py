"""Application layer of the hard-link bounded context.

Services orchestrate catalog reads and writes for one component each;
they are composed per invocation by ``hard_links.dependencies``.
"""

from hard_links.application.services import (
    DeletionGuard,
    GroupResolver,
    IdentifierAllocator,
    LinkService,
    RenamePropagator,
)
from hard_links.application.value_objects import (
    DeletionDecision,
    DeletionOutcome,
    LinkResult,
    PropagationResult,
    SiblingUpdateFailure,
)

__all__ = [
    "DeletionDecision",
    "DeletionGuard",
    "DeletionOutcome",
    "GroupResolver",
    "IdentifierAllocator",
    "LinkResult",
    "LinkService",
    "PropagationResult",
    "RenamePropagator",
    "SiblingUpdateFailure",
]
