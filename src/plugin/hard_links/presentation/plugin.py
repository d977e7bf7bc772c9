"""Rule engine plugin facade for hard links.

Exposes the operations a host server calls on a rule engine plugin. The
event and operation maps are built once by ``create_rule_engine`` and owned
by the plugin instance.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from hard_links.ports.context import ContextProvider
from hard_links.presentation.hooks import HookDispatcher, build_hook_handlers
from hard_links.presentation.observability import DefaultPluginProbe, PluginProbe
from hard_links.presentation.outcomes import RuleOutcome
from hard_links.presentation.rule_text import (
    RuleTextInterpreter,
    build_direct_operations,
)
from infrastructure.logging import configure_logging
from infrastructure.settings import HardLinkSettings, get_settings


class HardLinksRuleEngine:
    """Hard-link rule engine plugin instance."""

    def __init__(
        self,
        instance_name: str,
        dispatcher: HookDispatcher,
        interpreter: RuleTextInterpreter,
        probe: PluginProbe | None = None,
        configure_logs: bool = True,
    ):
        self.instance_name = instance_name
        self._dispatcher = dispatcher
        self._interpreter = interpreter
        self._probe = probe or DefaultPluginProbe()
        self._configure_logs = configure_logs

    def start(self) -> None:
        if self._configure_logs:
            configure_logging()
        self._probe.plugin_started(instance_name=self.instance_name)

    def stop(self) -> None:
        self._probe.plugin_stopped(instance_name=self.instance_name)

    def rule_exists(self, rule_name: str) -> bool:
        """Whether the plugin handles the policy enforcement point ``rule_name``.

        Direct operations are only reachable through rule text, so they are
        not reported here.
        """
        return self._dispatcher.handles(rule_name)

    def list_rules(self) -> list[str]:
        """All rule names known to the plugin, direct operations first."""
        return [*self._interpreter.operation_names, *self._dispatcher.event_names]

    def exec_rule(
        self,
        rule_name: str,
        arguments: Sequence[Any],
        context_provider: ContextProvider,
    ) -> RuleOutcome:
        return self._dispatcher.dispatch(rule_name, arguments, context_provider)

    def exec_rule_text(
        self,
        rule_text: str,
        context_provider: ContextProvider,
    ) -> RuleOutcome:
        return self._interpreter.execute(rule_text, context_provider)

    def exec_rule_expression(
        self,
        rule_text: str,
        context_provider: ContextProvider,
    ) -> RuleOutcome:
        return self._interpreter.execute(rule_text, context_provider)


def create_rule_engine(
    instance_name: str,
    settings: HardLinkSettings | None = None,
    probe: PluginProbe | None = None,
    configure_logs: bool = True,
) -> HardLinksRuleEngine:
    """Plugin factory: build a rule engine instance and its handler maps.

    Args:
        instance_name: Name the host gave this plugin instance
        settings: Engine settings (defaults to environment settings)
        probe: Optional domain probe shared by dispatcher and interpreter
        configure_logs: Configure structlog when the plugin starts
    """
    settings = settings or get_settings()
    probe = probe or DefaultPluginProbe()

    return HardLinksRuleEngine(
        instance_name=instance_name,
        dispatcher=HookDispatcher(build_hook_handlers(settings), probe=probe),
        interpreter=RuleTextInterpreter(build_direct_operations(settings), probe=probe),
        probe=probe,
        configure_logs=configure_logs,
    )
