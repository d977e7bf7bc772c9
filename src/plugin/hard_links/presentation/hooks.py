"""Hook handlers and dispatcher for policy enforcement points.

The host fires named events around data object operations. Each event's
positional argument list is decoded once into a typed request, then handed
to the handler registered for that event.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from hard_links.dependencies import (
    get_deletion_guard,
    get_observation_context,
    get_rename_propagator,
)
from hard_links.domain.requests import (
    DeletionRequest,
    HookEvent,
    HookRequest,
    RenamePostRequest,
    TrimPostRequest,
    TrimPreRequest,
    UnlinkPreRequest,
)
from hard_links.domain.value_objects import LogicalPath
from hard_links.ports.context import (
    ContextProvider,
    DataObjectCopyInput,
    DataObjectInput,
    ExecutionContext,
)
from hard_links.ports.exceptions import ErrorCode, HardLinkError, InternalTypeError
from hard_links.presentation.observability import DefaultPluginProbe, PluginProbe
from hard_links.presentation.outcomes import RuleOutcome
from infrastructure.settings import HardLinkSettings
from shared_kernel.observability_context import ObservationContext

HookHandler = Callable[[Any, ExecutionContext, ObservationContext], RuleOutcome]

# Position of the API input within the host's argument list
_INPUT_ARGUMENT_INDEX = 2


def _logical_path(value: Any, event: HookEvent) -> LogicalPath:
    try:
        return LogicalPath.from_string(value)
    except ValueError as e:
        raise InternalTypeError(f"Invalid logical path for [{event}]: {e}") from e


def decode_hook_request(event: HookEvent, arguments: Sequence[Any]) -> HookRequest:
    """Decode the host's argument list into a typed request.

    Raises:
        InternalTypeError: If the API input is missing or has the wrong type
    """
    if len(arguments) <= _INPUT_ARGUMENT_INDEX:
        raise InternalTypeError(f"Missing API input for [{event}]")

    api_input = arguments[_INPUT_ARGUMENT_INDEX]

    if event is HookEvent.DATA_OBJ_RENAME_POST:
        if not isinstance(api_input, DataObjectCopyInput):
            raise InternalTypeError(
                f"Expected DataObjectCopyInput for [{event}], "
                f"got {type(api_input).__name__}"
            )
        return RenamePostRequest(
            source=_logical_path(api_input.source.obj_path, event),
            destination=_logical_path(api_input.destination.obj_path, event),
        )

    if not isinstance(api_input, DataObjectInput):
        raise InternalTypeError(
            f"Expected DataObjectInput for [{event}], got {type(api_input).__name__}"
        )

    logical_path = _logical_path(api_input.obj_path, event)
    if event is HookEvent.DATA_OBJ_UNLINK_PRE:
        return UnlinkPreRequest(logical_path=logical_path)
    if event is HookEvent.DATA_OBJ_TRIM_PRE:
        return TrimPreRequest(logical_path=logical_path)
    return TrimPostRequest(logical_path=logical_path)


class HardLinkHooks:
    """Handlers for the events the engine subscribes to."""

    def __init__(self, settings: HardLinkSettings):
        self._settings = settings

    def rename_post(
        self,
        request: RenamePostRequest,
        context: ExecutionContext,
        observation: ObservationContext,
    ) -> RuleOutcome:
        """Propagate the destination's physical path to its siblings.

        The rename already committed, so sibling failures are reported on
        the error channel and the host continues.
        """
        propagator = get_rename_propagator(context, self._settings, observation)
        result = propagator.propagate(request.destination)

        for failure in result.failures:
            context.errors.append(ErrorCode.RE_RUNTIME_ERROR, failure.message)

        return RuleOutcome.proceed()

    def deletion_pre(
        self,
        request: DeletionRequest,
        context: ExecutionContext,
        observation: ObservationContext,
    ) -> RuleOutcome:
        """Shared by unlink and trim: detach members that still have siblings."""
        guard = get_deletion_guard(context, self._settings, observation)
        outcome = guard.evaluate(request.logical_path)

        if outcome.failure is not None:
            context.errors.append(outcome.failure.code, str(outcome.failure))

        if outcome.skips_default:
            return RuleOutcome.skip()
        return RuleOutcome.proceed()

    def trim_post(
        self,
        request: TrimPostRequest,
        context: ExecutionContext,
        observation: ObservationContext,
    ) -> RuleOutcome:
        return RuleOutcome.proceed()


def build_hook_handlers(settings: HardLinkSettings) -> dict[str, HookHandler]:
    """Build the event name to handler map used by HookDispatcher."""
    hooks = HardLinkHooks(settings)
    return {
        HookEvent.DATA_OBJ_RENAME_POST.value: hooks.rename_post,
        HookEvent.DATA_OBJ_UNLINK_PRE.value: hooks.deletion_pre,
        HookEvent.DATA_OBJ_TRIM_PRE.value: hooks.deletion_pre,
        HookEvent.DATA_OBJ_TRIM_POST.value: hooks.trim_post,
    }


class HookDispatcher:
    """Routes host events to their handlers.

    Unknown events are not errors: they produce a NOT_SUPPORTED outcome so
    the host keeps its default flow. Errors raised by handlers are logged,
    appended to the caller's error channel and returned as ERROR outcomes.
    """

    def __init__(
        self,
        handlers: Mapping[str, HookHandler],
        probe: PluginProbe | None = None,
    ):
        self._handlers = dict(handlers)
        self._probe = probe or DefaultPluginProbe()

    @property
    def event_names(self) -> list[str]:
        return list(self._handlers)

    def handles(self, event_name: str) -> bool:
        return event_name in self._handlers

    def dispatch(
        self,
        event_name: str,
        arguments: Sequence[Any],
        context_provider: ContextProvider,
    ) -> RuleOutcome:
        """Run the handler registered for ``event_name``."""
        handler = self._handlers.get(event_name)
        if handler is None:
            self._probe.rule_not_supported(rule_name=event_name)
            return RuleOutcome.unsupported(event_name)

        context: ExecutionContext | None = None
        try:
            context = context_provider()
            observation = get_observation_context(context, event_name)
            request = decode_hook_request(HookEvent(event_name), arguments)
            return handler(request, context, observation)
        except HardLinkError as e:
            return self._report(event_name, e.code, str(e), context)
        except Exception as e:
            return self._report(event_name, ErrorCode.RE_RUNTIME_ERROR, str(e), context)

    def _report(
        self,
        event_name: str,
        code: ErrorCode,
        message: str,
        context: ExecutionContext | None,
    ) -> RuleOutcome:
        probe = self._probe
        if context is not None:
            probe = probe.with_context(get_observation_context(context, event_name))
            context.errors.append(code, message)

        probe.hook_failed(operation=event_name, code=code.value, message=message)
        return RuleOutcome.error(code, message)
