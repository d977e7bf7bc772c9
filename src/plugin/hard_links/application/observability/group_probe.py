"""Probes for group resolution and identifier allocation.

Defines the interface for domain probes that capture events raised while
looking up hard-link groups and allocating new group identifiers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from hard_links.application.observability.base import BaseProbe

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class GroupResolverProbe(Protocol):
    """Domain probe for group resolution."""

    def multiple_group_tags_found(
        self,
        logical_path: str,
        group_ids: list[str],
    ) -> None:
        """Record that a data object carries more than one group tag."""
        ...

    def with_context(self, context: ObservationContext) -> GroupResolverProbe:
        """Create a new probe with observation context bound."""
        ...


class IdentifierAllocatorProbe(Protocol):
    """Domain probe for group identifier allocation."""

    def group_id_collision(self, group_id: str) -> None:
        """Record that a freshly generated identifier was already in use."""
        ...

    def group_id_allocated(self, group_id: str, attempts: int) -> None:
        """Record that an unused identifier was allocated."""
        ...

    def with_context(self, context: ObservationContext) -> IdentifierAllocatorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultGroupResolverProbe(BaseProbe):
    """Default implementation of GroupResolverProbe using structlog."""

    def with_context(self, context: ObservationContext) -> DefaultGroupResolverProbe:
        return DefaultGroupResolverProbe(logger=self._logger, context=context)

    def multiple_group_tags_found(
        self,
        logical_path: str,
        group_ids: list[str],
    ) -> None:
        self._logger.warning(
            "multiple_group_tags_found",
            logical_path=logical_path,
            group_ids=group_ids,
            **self._get_context_kwargs(),
        )


class DefaultIdentifierAllocatorProbe(BaseProbe):
    """Default implementation of IdentifierAllocatorProbe using structlog."""

    def with_context(
        self, context: ObservationContext
    ) -> DefaultIdentifierAllocatorProbe:
        return DefaultIdentifierAllocatorProbe(logger=self._logger, context=context)

    def group_id_collision(self, group_id: str) -> None:
        self._logger.warning(
            "group_id_collision",
            group_id=group_id,
            **self._get_context_kwargs(),
        )

    def group_id_allocated(self, group_id: str, attempts: int) -> None:
        self._logger.debug(
            "group_id_allocated",
            group_id=group_id,
            attempts=attempts,
            **self._get_context_kwargs(),
        )
