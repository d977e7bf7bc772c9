"""Presentation layer: the host-facing rule engine plugin surface."""

from hard_links.presentation.hooks import (
    HardLinkHooks,
    HookDispatcher,
    build_hook_handlers,
    decode_hook_request,
)
from hard_links.presentation.outcomes import OutcomeStatus, RuleOutcome
from hard_links.presentation.plugin import HardLinksRuleEngine, create_rule_engine
from hard_links.presentation.rule_text import (
    HardLinkOperations,
    NotYetSupported,
    RuleTextInterpreter,
    build_direct_operations,
    parse_rule_text,
    strip_calling_convention,
)

__all__ = [
    "HardLinkHooks",
    "HardLinkOperations",
    "HardLinksRuleEngine",
    "HookDispatcher",
    "NotYetSupported",
    "OutcomeStatus",
    "RuleOutcome",
    "RuleTextInterpreter",
    "build_direct_operations",
    "build_hook_handlers",
    "create_rule_engine",
    "decode_hook_request",
    "parse_rule_text",
    "strip_calling_convention",
]
