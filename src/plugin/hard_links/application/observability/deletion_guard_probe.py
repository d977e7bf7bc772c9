"""Protocol for deletion guard observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from hard_links.application.observability.base import BaseProbe

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DeletionGuardProbe(Protocol):
    """Domain probe for guarded deletions."""

    def hard_link_detached(self, logical_path: str, remaining: int) -> None:
        """Record that a member was removed from the catalog only."""
        ...

    def hard_link_detach_failed(
        self,
        logical_path: str,
        status: int | None,
    ) -> None:
        """Record that a member could not be detached."""
        ...

    def last_member_deletion_allowed(self, logical_path: str) -> None:
        """Record that default deletion may destroy the payload."""
        ...

    def with_context(self, context: ObservationContext) -> DeletionGuardProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultDeletionGuardProbe(BaseProbe):
    """Default implementation of DeletionGuardProbe using structlog."""

    def with_context(self, context: ObservationContext) -> DefaultDeletionGuardProbe:
        return DefaultDeletionGuardProbe(logger=self._logger, context=context)

    def hard_link_detached(self, logical_path: str, remaining: int) -> None:
        self._logger.info(
            "hard_link_detached",
            logical_path=logical_path,
            remaining=remaining,
            **self._get_context_kwargs(),
        )

    def hard_link_detach_failed(
        self,
        logical_path: str,
        status: int | None,
    ) -> None:
        self._logger.error(
            "hard_link_detach_failed",
            logical_path=logical_path,
            status=status,
            **self._get_context_kwargs(),
        )

    def last_member_deletion_allowed(self, logical_path: str) -> None:
        self._logger.debug(
            "last_member_deletion_allowed",
            logical_path=logical_path,
            **self._get_context_kwargs(),
        )
