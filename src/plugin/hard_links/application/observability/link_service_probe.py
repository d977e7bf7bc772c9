"""Protocol for link service observability.

Defines the interface for domain probes that capture application-level
domain events while creating hard links.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from hard_links.application.observability.base import BaseProbe

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class LinkServiceProbe(Protocol):
    """Domain probe for hard-link creation."""

    def payload_registration_failed(
        self,
        link_name: str,
        physical_path: str,
        status: int,
    ) -> None:
        """Record that the new logical path could not be registered."""
        ...

    def hard_link_created(
        self,
        logical_path: str,
        link_name: str,
        physical_path: str,
        group_id: str,
        new_group: bool,
    ) -> None:
        """Record that a hard link was created and tagged."""
        ...

    def hard_link_tagging_failed(
        self,
        logical_path: str,
        link_name: str,
        error: str,
        status: int | None,
    ) -> None:
        """Record that group metadata could not be written."""
        ...

    def with_context(self, context: ObservationContext) -> LinkServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultLinkServiceProbe(BaseProbe):
    """Default implementation of LinkServiceProbe using structlog."""

    def with_context(self, context: ObservationContext) -> DefaultLinkServiceProbe:
        """Create a new probe with observation context bound."""
        return DefaultLinkServiceProbe(logger=self._logger, context=context)

    def payload_registration_failed(
        self,
        link_name: str,
        physical_path: str,
        status: int,
    ) -> None:
        """Record that the new logical path could not be registered."""
        self._logger.error(
            "payload_registration_failed",
            link_name=link_name,
            physical_path=physical_path,
            status=status,
            **self._get_context_kwargs(),
        )

    def hard_link_created(
        self,
        logical_path: str,
        link_name: str,
        physical_path: str,
        group_id: str,
        new_group: bool,
    ) -> None:
        """Record that a hard link was created and tagged."""
        self._logger.info(
            "hard_link_created",
            logical_path=logical_path,
            link_name=link_name,
            physical_path=physical_path,
            group_id=group_id,
            new_group=new_group,
            **self._get_context_kwargs(),
        )

    def hard_link_tagging_failed(
        self,
        logical_path: str,
        link_name: str,
        error: str,
        status: int | None,
    ) -> None:
        """Record that group metadata could not be written."""
        self._logger.error(
            "hard_link_tagging_failed",
            logical_path=logical_path,
            link_name=link_name,
            error=error,
            status=status,
            **self._get_context_kwargs(),
        )
