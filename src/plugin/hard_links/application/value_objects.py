"""Results produced by the hard-link application services."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from hard_links.domain.value_objects import GroupId, LogicalPath
from hard_links.ports.exceptions import CatalogError


@dataclass(frozen=True)
class LinkResult:
    """Outcome of a successful link creation.

    Attributes:
        link: Logical path of the new hard link
        physical_path: Payload location shared by the group
        group_id: Identifier tagged onto the link (and the source if new)
        new_group: Whether the identifier was allocated by this call
        registered: Whether registering the link in the catalog succeeded
    """

    link: LogicalPath
    physical_path: str
    group_id: GroupId
    new_group: bool
    registered: bool


@dataclass(frozen=True)
class SiblingUpdateFailure:
    """A sibling whose physical path could not be updated."""

    sibling: LogicalPath
    status: int | None
    message: str


@dataclass(frozen=True)
class PropagationResult:
    """Per-sibling outcome of a rename propagation.

    The propagation never aborts early; ``failures`` lists every sibling
    left pointing at a stale physical path.
    """

    destination: LogicalPath
    physical_path: str
    updated: tuple[LogicalPath, ...] = ()
    failures: tuple[SiblingUpdateFailure, ...] = ()

    @property
    def complete(self) -> bool:
        return not self.failures


class DeletionDecision(StrEnum):
    """What the host should do with its default deletion."""

    SKIP_DEFAULT = "skip_default"
    CONTINUE_DEFAULT = "continue_default"


@dataclass(frozen=True)
class DeletionOutcome:
    """Decision of the deletion guard for one logical path.

    ``failure`` is set when the guard tried to detach the member and the
    catalog refused; the decision then falls back to CONTINUE_DEFAULT.
    """

    logical_path: LogicalPath
    decision: DeletionDecision
    siblings: tuple[LogicalPath, ...] = ()
    failure: CatalogError | None = field(default=None, compare=False)

    @property
    def skips_default(self) -> bool:
        return self.decision is DeletionDecision.SKIP_DEFAULT
