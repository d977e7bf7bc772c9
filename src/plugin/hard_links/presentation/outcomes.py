"""Results returned to the host by the rule engine plugin."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from hard_links.ports.exceptions import ErrorCode


class OutcomeStatus(StrEnum):
    """How the host should carry on after a rule returns."""

    SUCCESS = "success"
    CONTINUE = "continue"
    SKIP_OPERATION = "skip_operation"
    NOT_SUPPORTED = "not_supported"
    ERROR = "error"


@dataclass(frozen=True)
class RuleOutcome:
    """Status of a hook or direct operation, plus error details if any.

    Hooks return CONTINUE, SKIP_OPERATION or ERROR; direct operations
    return SUCCESS or ERROR. NOT_SUPPORTED marks hook events the plugin
    does not know, letting the host run its default flow.
    """

    status: OutcomeStatus
    code: ErrorCode | None = None
    message: str | None = None
    data: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def success(cls, **data: Any) -> RuleOutcome:
        return cls(status=OutcomeStatus.SUCCESS, data=data)

    @classmethod
    def proceed(cls) -> RuleOutcome:
        return cls(status=OutcomeStatus.CONTINUE)

    @classmethod
    def skip(cls) -> RuleOutcome:
        return cls(status=OutcomeStatus.SKIP_OPERATION)

    @classmethod
    def unsupported(cls, name: str) -> RuleOutcome:
        return cls(
            status=OutcomeStatus.NOT_SUPPORTED,
            message=f"Rule not supported [{name}]",
        )

    @classmethod
    def error(cls, code: ErrorCode, message: str) -> RuleOutcome:
        return cls(status=OutcomeStatus.ERROR, code=code, message=message)

    @property
    def runs_default(self) -> bool:
        """Whether the host should run its default implementation."""
        return self.status in (OutcomeStatus.CONTINUE, OutcomeStatus.NOT_SUPPORTED)
