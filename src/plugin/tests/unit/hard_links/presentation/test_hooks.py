"""Unit tests for hook decoding and dispatch."""

from unittest.mock import MagicMock, create_autospec

import pytest

from hard_links.domain.requests import (
    HookEvent,
    RenamePostRequest,
    TrimPostRequest,
    TrimPreRequest,
    UnlinkPreRequest,
)
from hard_links.domain.value_objects import GroupId, MetadataTag
from hard_links.ports.context import DataObjectCopyInput, DataObjectInput
from hard_links.ports.exceptions import CatalogError, ErrorCode, InternalTypeError
from hard_links.presentation.hooks import (
    HookDispatcher,
    build_hook_handlers,
    decode_hook_request,
)
from hard_links.presentation.observability import PluginProbe
from hard_links.presentation.outcomes import OutcomeStatus, RuleOutcome
from tests.unit.conftest import logical

GROUP = GroupId("66666666-6666-6666-6666-666666666666")


def hook_args(api_input):
    """Host argument list: instance name, communication handle, API input."""
    return ["hard_links-instance", object(), api_input]


def unlink_args(name: str):
    return hook_args(DataObjectInput(obj_path=logical(name).value))


@pytest.fixture
def mock_probe():
    probe = create_autospec(PluginProbe, instance=True)
    probe.with_context.return_value = probe
    return probe


@pytest.fixture
def dispatcher(settings, mock_probe) -> HookDispatcher:
    return HookDispatcher(build_hook_handlers(settings), probe=mock_probe)


@pytest.fixture
def linked_pair(catalog):
    for name in ("a.txt", "b.txt"):
        catalog.put_data_object(logical(name), "/vault/0001")
        catalog.set_metadata(
            logical(name), MetadataTag("irods::hard_link", GROUP.value, "10014")
        )
    return catalog


class TestDecodeHookRequest:
    def test_rename_post(self):
        api_input = DataObjectCopyInput(
            source=DataObjectInput("/z/a"), destination=DataObjectInput("/z/b")
        )
        request = decode_hook_request(
            HookEvent.DATA_OBJ_RENAME_POST, hook_args(api_input)
        )
        assert isinstance(request, RenamePostRequest)
        assert request.destination.value == "/z/b"

    @pytest.mark.parametrize(
        ("event", "expected"),
        [
            (HookEvent.DATA_OBJ_UNLINK_PRE, UnlinkPreRequest),
            (HookEvent.DATA_OBJ_TRIM_PRE, TrimPreRequest),
            (HookEvent.DATA_OBJ_TRIM_POST, TrimPostRequest),
        ],
    )
    def test_single_object_events(self, event, expected):
        request = decode_hook_request(event, hook_args(DataObjectInput("/z/a")))
        assert isinstance(request, expected)
        assert request.logical_path.value == "/z/a"

    def test_missing_input(self):
        with pytest.raises(InternalTypeError, match="Missing API input"):
            decode_hook_request(HookEvent.DATA_OBJ_UNLINK_PRE, ["instance", None])

    def test_wrong_input_type(self):
        with pytest.raises(InternalTypeError, match="DataObjectCopyInput"):
            decode_hook_request(
                HookEvent.DATA_OBJ_RENAME_POST, hook_args(DataObjectInput("/z/a"))
            )

    def test_invalid_path(self):
        with pytest.raises(InternalTypeError, match="Invalid logical path"):
            decode_hook_request(
                HookEvent.DATA_OBJ_UNLINK_PRE, hook_args(DataObjectInput("relative"))
            )


class TestDispatch:
    def test_unknown_event_is_not_supported(self, dispatcher, context, mock_probe):
        outcome = dispatcher.dispatch("pep_api_coll_create_pre", [], lambda: context)

        assert outcome.status is OutcomeStatus.NOT_SUPPORTED
        assert outcome.runs_default
        assert outcome.message == "Rule not supported [pep_api_coll_create_pre]"
        mock_probe.rule_not_supported.assert_called_once_with(
            rule_name="pep_api_coll_create_pre"
        )

    def test_unknown_event_does_not_touch_context(self, dispatcher):
        provider = MagicMock()

        dispatcher.dispatch("pep_api_coll_create_pre", [], provider)

        provider.assert_not_called()

    def test_handles_subscribed_events(self, dispatcher):
        assert set(dispatcher.event_names) == {e.value for e in HookEvent}
        assert dispatcher.handles("pep_api_data_obj_unlink_pre")
        assert not dispatcher.handles("hard_links_make_link")

    def test_unlink_pre_skips_default_when_siblings_remain(
        self, dispatcher, linked_pair, context
    ):
        outcome = dispatcher.dispatch(
            "pep_api_data_obj_unlink_pre", unlink_args("a.txt"), lambda: context
        )

        assert outcome.status is OutcomeStatus.SKIP_OPERATION
        assert not linked_pair.exists(logical("a.txt"))
        assert linked_pair.payload_exists("/vault/0001")

    def test_trim_pre_shares_unlink_behavior(self, dispatcher, linked_pair, context):
        outcome = dispatcher.dispatch(
            "pep_api_data_obj_trim_pre", unlink_args("a.txt"), lambda: context
        )

        assert outcome.status is OutcomeStatus.SKIP_OPERATION
        assert not linked_pair.exists(logical("a.txt"))

    def test_unlink_pre_continues_for_last_member(
        self, dispatcher, seeded_catalog, context
    ):
        outcome = dispatcher.dispatch(
            "pep_api_data_obj_unlink_pre", unlink_args("a.txt"), lambda: context
        )

        assert outcome.status is OutcomeStatus.CONTINUE
        assert seeded_catalog.exists(logical("a.txt"))

    def test_detach_failure_is_reported_and_continues(
        self, dispatcher, linked_pair, context
    ):
        linked_pair.inject_failure("force_unregister", logical("a.txt"), status=-9)

        outcome = dispatcher.dispatch(
            "pep_api_data_obj_unlink_pre", unlink_args("a.txt"), lambda: context
        )

        assert outcome.status is OutcomeStatus.CONTINUE
        assert len(context.errors) == 1
        assert context.errors.messages[0].code is ErrorCode.CATALOG_ERROR
        assert "Could not remove hard-link" in context.errors.messages[0].message

    def test_rename_post_reports_sibling_failures(
        self, dispatcher, linked_pair, context
    ):
        linked_pair.move_payload(logical("a.txt"), "/vault/0002")
        linked_pair.inject_failure("set_physical_path", logical("b.txt"))
        api_input = DataObjectCopyInput(
            source=DataObjectInput(logical("old.txt").value),
            destination=DataObjectInput(logical("a.txt").value),
        )

        outcome = dispatcher.dispatch(
            "pep_api_data_obj_rename_post", hook_args(api_input), lambda: context
        )

        assert outcome.status is OutcomeStatus.CONTINUE
        assert [m.code for m in context.errors.messages] == [
            ErrorCode.RE_RUNTIME_ERROR
        ]
        assert "iadmin modrepl" in context.errors.messages[0].message

    def test_trim_post_always_continues(self, dispatcher, context):
        outcome = dispatcher.dispatch(
            "pep_api_data_obj_trim_post", unlink_args("a.txt"), lambda: context
        )
        assert outcome == RuleOutcome.proceed()

    def test_decode_error_becomes_error_outcome(
        self, dispatcher, context, mock_probe
    ):
        outcome = dispatcher.dispatch(
            "pep_api_data_obj_unlink_pre", ["instance"], lambda: context
        )

        assert outcome.status is OutcomeStatus.ERROR
        assert outcome.code is ErrorCode.SYS_INTERNAL_ERR
        assert context.errors.messages[0].code is ErrorCode.SYS_INTERNAL_ERR
        mock_probe.hook_failed.assert_called_once()
        assert mock_probe.hook_failed.call_args.kwargs["operation"] == (
            "pep_api_data_obj_unlink_pre"
        )

    def test_catalog_error_from_handler(self, settings, mock_probe, context):
        def failing(request, ctx, observation):
            raise CatalogError("catalog down", status=-1)

        dispatcher = HookDispatcher(
            {HookEvent.DATA_OBJ_UNLINK_PRE.value: failing}, probe=mock_probe
        )

        outcome = dispatcher.dispatch(
            "pep_api_data_obj_unlink_pre", unlink_args("a.txt"), lambda: context
        )

        assert outcome.code is ErrorCode.CATALOG_ERROR
        assert outcome.message == "catalog down [status = -1]"

    def test_unexpected_exception_is_runtime_error(self, mock_probe, context):
        def failing(request, ctx, observation):
            raise RuntimeError("boom")

        dispatcher = HookDispatcher(
            {HookEvent.DATA_OBJ_UNLINK_PRE.value: failing}, probe=mock_probe
        )

        outcome = dispatcher.dispatch(
            "pep_api_data_obj_unlink_pre", unlink_args("a.txt"), lambda: context
        )

        assert outcome.status is OutcomeStatus.ERROR
        assert outcome.code is ErrorCode.RE_RUNTIME_ERROR
        assert context.errors.messages[0].message == "boom"

    def test_context_provider_failure(self, dispatcher, mock_probe):
        def provider():
            raise RuntimeError("no connection")

        outcome = dispatcher.dispatch(
            "pep_api_data_obj_unlink_pre", unlink_args("a.txt"), provider
        )

        assert outcome.code is ErrorCode.RE_RUNTIME_ERROR
        mock_probe.with_context.assert_not_called()
        mock_probe.hook_failed.assert_called_once()
