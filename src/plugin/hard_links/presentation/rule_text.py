"""Direct invocation of hard-link operations through rule text.

Callers send a JSON document, optionally wrapped in the ``@external``
calling convention, naming an operation and its arguments:

    @external rule { {"operation": "hard_links_make_link",
                      "logical_path": "/tempZone/home/rods/a.txt",
                      "link_name": "/tempZone/home/rods/b.txt"} }
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from hard_links.dependencies import get_link_service, get_observation_context
from hard_links.domain.requests import (
    DirectOperation,
    MakeLinkRequest,
    OperationEnvelope,
)
from hard_links.ports.context import ContextProvider, ExecutionContext
from hard_links.ports.exceptions import (
    ErrorCode,
    HardLinkError,
    InputFormatError,
    InternalTypeError,
    NotYetSupportedError,
    UnsupportedOperationError,
)
from hard_links.presentation.observability import DefaultPluginProbe, PluginProbe
from hard_links.presentation.outcomes import RuleOutcome
from infrastructure.settings import HardLinkSettings
from shared_kernel.observability_context import ObservationContext

OperationHandler = Callable[
    [Mapping[str, Any], ExecutionContext, ObservationContext], RuleOutcome
]


@dataclass(frozen=True)
class NotYetSupported:
    """Marks an operation name that is recognized but not implemented."""

    operation: str


def strip_calling_convention(rule_text: str) -> str:
    """Remove the ``@external`` wrapper around an embedded document.

    ``irule`` sends ``@external rule { <document> }``; a rule file sends
    ``@external`` followed by the document and a closing `` }``.

    Raises:
        InternalTypeError: If ``@external`` text has no opening brace
    """
    if "@external rule {" in rule_text:
        start = rule_text.find("{") + 1
    elif "@external" in rule_text:
        start = rule_text.find("{")
        if start < 0:
            raise InternalTypeError("Missing '{' in @external rule text")
    else:
        return rule_text

    end = rule_text.rfind(" }")
    if end < start:
        return rule_text[start:]
    return rule_text[start:end]


def parse_rule_text(rule_text: str) -> tuple[str, dict[str, Any]]:
    """Parse rule text into its operation name and document.

    Raises:
        InputFormatError: If the text does not contain valid JSON
        InternalTypeError: If the document is not an object with a string
            ``operation`` field
    """
    try:
        document = json.loads(strip_calling_convention(rule_text))
    except json.JSONDecodeError as e:
        raise InputFormatError(str(e)) from e

    if not isinstance(document, dict):
        raise InternalTypeError(
            f"Expected a JSON object, got {type(document).__name__}"
        )

    try:
        envelope = OperationEnvelope.model_validate(document)
    except ValidationError as e:
        raise InternalTypeError(str(e)) from e

    return envelope.operation, document


class HardLinkOperations:
    """Handlers for the operations available through rule text."""

    def __init__(self, settings: HardLinkSettings):
        self._settings = settings

    def make_link(
        self,
        document: Mapping[str, Any],
        context: ExecutionContext,
        observation: ObservationContext,
    ) -> RuleOutcome:
        """Create ``link_name`` as a hard link to ``logical_path``."""
        try:
            request = MakeLinkRequest.model_validate(document)
        except ValidationError as e:
            raise InternalTypeError(str(e)) from e

        service = get_link_service(context, self._settings, observation)
        result = service.create_link(request.source, request.link)

        return RuleOutcome.success(
            logical_path=request.logical_path,
            link_name=result.link.value,
            physical_path=result.physical_path,
            group_id=result.group_id.value,
            new_group=result.new_group,
        )


def build_direct_operations(
    settings: HardLinkSettings,
) -> dict[str, OperationHandler | NotYetSupported]:
    """Build the operation name to handler map used by RuleTextInterpreter."""
    operations = HardLinkOperations(settings)
    return {
        DirectOperation.COUNT_LINKS.value: NotYetSupported(
            DirectOperation.COUNT_LINKS.value
        ),
        DirectOperation.LIST_DATA_OBJECTS.value: NotYetSupported(
            DirectOperation.LIST_DATA_OBJECTS.value
        ),
        DirectOperation.MAKE_LINK.value: operations.make_link,
    }


class RuleTextInterpreter:
    """Executes operations requested through rule text.

    Every failure is logged with the originating operation name and
    returned as an ERROR outcome carrying the matching error code.
    """

    def __init__(
        self,
        operations: Mapping[str, OperationHandler | NotYetSupported],
        probe: PluginProbe | None = None,
    ):
        self._operations = dict(operations)
        self._probe = probe or DefaultPluginProbe()

    @property
    def operation_names(self) -> list[str]:
        return list(self._operations)

    def execute(
        self,
        rule_text: str,
        context_provider: ContextProvider,
    ) -> RuleOutcome:
        """Parse ``rule_text`` and run the operation it names."""
        self._probe.rule_text_received(rule_text=rule_text)

        operation = "unknown"
        try:
            operation, document = parse_rule_text(rule_text)

            entry = self._operations.get(operation)
            if entry is None:
                raise UnsupportedOperationError(operation)
            if isinstance(entry, NotYetSupported):
                raise NotYetSupportedError(entry.operation)

            context = context_provider()
            observation = get_observation_context(context, operation)
            return entry(document, context, observation)
        except HardLinkError as e:
            return self._report(operation, e.code, str(e))
        except Exception as e:
            return self._report(operation, ErrorCode.SYS_INTERNAL_ERR, str(e))

    def _report(self, operation: str, code: ErrorCode, message: str) -> RuleOutcome:
        self._probe.operation_failed(
            operation=operation, code=code.value, message=message
        )
        return RuleOutcome.error(code, message)
