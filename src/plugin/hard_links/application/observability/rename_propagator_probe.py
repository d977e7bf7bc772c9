"""Protocol for rename propagation observability."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from hard_links.application.observability.base import BaseProbe

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RenamePropagatorProbe(Protocol):
    """Domain probe for propagating physical paths to group members."""

    def sibling_physical_path_updated(
        self,
        sibling: str,
        physical_path: str,
    ) -> None:
        """Record that a sibling now points at the new physical path."""
        ...

    def sibling_physical_path_update_failed(
        self,
        destination: str,
        sibling: str,
        physical_path: str,
        status: int | None,
    ) -> None:
        """Record that a sibling could not be updated."""
        ...

    def rename_propagated(
        self,
        destination: str,
        physical_path: str,
        updated_count: int,
        failed_count: int,
    ) -> None:
        """Record the overall outcome of a propagation."""
        ...

    def with_context(self, context: ObservationContext) -> RenamePropagatorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRenamePropagatorProbe(BaseProbe):
    """Default implementation of RenamePropagatorProbe using structlog."""

    def with_context(
        self, context: ObservationContext
    ) -> DefaultRenamePropagatorProbe:
        return DefaultRenamePropagatorProbe(logger=self._logger, context=context)

    def sibling_physical_path_updated(
        self,
        sibling: str,
        physical_path: str,
    ) -> None:
        self._logger.debug(
            "sibling_physical_path_updated",
            sibling=sibling,
            physical_path=physical_path,
            **self._get_context_kwargs(),
        )

    def sibling_physical_path_update_failed(
        self,
        destination: str,
        sibling: str,
        physical_path: str,
        status: int | None,
    ) -> None:
        self._logger.error(
            "sibling_physical_path_update_failed",
            destination=destination,
            sibling=sibling,
            physical_path=physical_path,
            status=status,
            hint="Use iadmin modrepl to update the remaining data objects.",
            **self._get_context_kwargs(),
        )

    def rename_propagated(
        self,
        destination: str,
        physical_path: str,
        updated_count: int,
        failed_count: int,
    ) -> None:
        self._logger.info(
            "rename_propagated",
            destination=destination,
            physical_path=physical_path,
            updated_count=updated_count,
            failed_count=failed_count,
            **self._get_context_kwargs(),
        )
