"""End-to-end lifecycle of a hard-link pair through the plugin facade.

Link a.txt to b.txt, move the payload of b.txt, then unlink b.txt and
finally a.txt, the way the host would drive the plugin.
"""

import json

import pytest

from hard_links.domain.value_objects import LogicalPath
from hard_links.ports.context import DataObjectCopyInput, DataObjectInput
from hard_links.presentation.outcomes import OutcomeStatus
from hard_links.presentation.plugin import create_rule_engine

A = LogicalPath("/z/home/u/a.txt")
B = LogicalPath("/z/home/u/b.txt")


@pytest.fixture
def engine(settings):
    return create_rule_engine("hard_links-instance", settings, configure_logs=False)


def host_args(api_input):
    return ["hard_links-instance", object(), api_input]


def unlink(engine, path, provider):
    """Run the pre-hook and, if it allows, the host's default deletion."""
    outcome = engine.exec_rule(
        "pep_api_data_obj_unlink_pre",
        host_args(DataObjectInput(path.value)),
        provider,
    )
    if outcome.runs_default:
        provider().catalog.unlink(path)
    return outcome


def test_hard_link_lifecycle(engine, catalog, context):
    def provider():
        return context

    catalog.put_data_object(A, "/vault/0001")

    # Link b.txt to a.txt
    outcome = engine.exec_rule_text(
        "@external rule { "
        + json.dumps(
            {
                "operation": "hard_links_make_link",
                "logical_path": A.value,
                "link_name": B.value,
            }
        )
        + " }",
        provider,
    )
    assert outcome.status is OutcomeStatus.SUCCESS

    a, b = catalog.get_member(A), catalog.get_member(B)
    assert b.physical_path == "/vault/0001"
    assert a.group_id is not None
    assert a.group_id == b.group_id
    assert a.group_id.value == outcome.data["group_id"]

    # The host renames b.txt and moves its payload
    catalog.move_payload(B, "/vault/0002")
    outcome = engine.exec_rule(
        "pep_api_data_obj_rename_post",
        host_args(
            DataObjectCopyInput(
                source=DataObjectInput("/z/home/u/old_b.txt"),
                destination=DataObjectInput(B.value),
            )
        ),
        provider,
    )
    assert outcome.status is OutcomeStatus.CONTINUE
    assert catalog.get_member(A).physical_path == "/vault/0002"

    # Unlinking b.txt only detaches it
    outcome = unlink(engine, B, provider)
    assert outcome.status is OutcomeStatus.SKIP_OPERATION
    assert not catalog.exists(B)
    assert catalog.get_member(A).physical_path == "/vault/0002"
    assert catalog.payload_exists("/vault/0002")

    # Unlinking the last member destroys the payload
    outcome = unlink(engine, A, provider)
    assert outcome.status is OutcomeStatus.CONTINUE
    assert not catalog.exists(A)
    assert not catalog.payload_exists("/vault/0002")
    assert len(context.errors) == 0
