"""Domain probe for the rule engine plugin boundary.

Captures what the host asked the plugin to do and every error reported
back to it, including the originating operation name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class PluginProbe(Protocol):
    """Domain probe for plugin operations."""

    def plugin_started(self, instance_name: str) -> None:
        """Record that the host started the plugin instance."""
        ...

    def plugin_stopped(self, instance_name: str) -> None:
        """Record that the host stopped the plugin instance."""
        ...

    def hook_failed(self, operation: str, code: str, message: str) -> None:
        """Record that a hook handler reported an error."""
        ...

    def operation_failed(self, operation: str, code: str, message: str) -> None:
        """Record that a direct operation reported an error."""
        ...

    def rule_not_supported(self, rule_name: str) -> None:
        """Record that the host asked for an unknown rule."""
        ...

    def rule_text_received(self, rule_text: str) -> None:
        """Record the rule text of a direct invocation."""
        ...

    def with_context(self, context: ObservationContext) -> PluginProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultPluginProbe:
    """Default implementation of PluginProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultPluginProbe:
        """Create a new probe with observation context bound."""
        return DefaultPluginProbe(logger=self._logger, context=context)

    def plugin_started(self, instance_name: str) -> None:
        self._logger.info("plugin_started", instance_name=instance_name)

    def plugin_stopped(self, instance_name: str) -> None:
        self._logger.info("plugin_stopped", instance_name=instance_name)

    def _failure_kwargs(self, operation: str, code: str, message: str) -> dict[str, Any]:
        # The failing operation wins over the one bound in the context
        return {
            **self._get_context_kwargs(),
            "rule_engine_plugin": "hard_links",
            "operation": operation,
            "code": code,
            "log_message": message,
        }

    def hook_failed(self, operation: str, code: str, message: str) -> None:
        self._logger.error(
            "hook_failed", **self._failure_kwargs(operation, code, message)
        )

    def operation_failed(self, operation: str, code: str, message: str) -> None:
        self._logger.error(
            "operation_failed", **self._failure_kwargs(operation, code, message)
        )

    def rule_not_supported(self, rule_name: str) -> None:
        self._logger.error(
            "rule_not_supported",
            rule_name=rule_name,
            **self._get_context_kwargs(),
        )

    def rule_text_received(self, rule_text: str) -> None:
        self._logger.debug(
            "rule_text_received",
            rule_text=rule_text,
            **self._get_context_kwargs(),
        )
