"""Unit tests for LinkService."""

import uuid
from unittest.mock import create_autospec

import pytest

from hard_links.application.observability import LinkServiceProbe
from hard_links.application.services import (
    GroupResolver,
    IdentifierAllocator,
    LinkService,
)
from hard_links.domain.value_objects import GroupId, MetadataTag
from hard_links.infrastructure.in_memory_catalog import (
    CATALOG_ALREADY_HAS_ITEM_BY_THAT_NAME,
)
from hard_links.ports.catalog import Catalog
from hard_links.ports.exceptions import CatalogError, SourceNotFoundError
from tests.unit.conftest import logical

ATTRIBUTE = "irods::hard_link"
FIXED = uuid.UUID("33333333-3333-3333-3333-333333333333")


@pytest.fixture
def mock_probe():
    return create_autospec(LinkServiceProbe, instance=True)


def make_service(catalog, probe, strict_registration=False) -> LinkService:
    return LinkService(
        catalog=catalog,
        resolver=GroupResolver(catalog=catalog, attribute=ATTRIBUTE),
        allocator=IdentifierAllocator(
            catalog=catalog, attribute=ATTRIBUTE, uuid_factory=lambda: FIXED
        ),
        attribute=ATTRIBUTE,
        strict_registration=strict_registration,
        probe=probe,
    )


@pytest.fixture
def service(seeded_catalog, mock_probe) -> LinkService:
    return make_service(seeded_catalog, mock_probe)


class TestCreateLinkNewGroup:
    """Linking a data object that is not yet in any group."""

    def test_registers_link_over_source_payload(
        self, service, seeded_catalog, source_path
    ):
        service.create_link(source_path, logical("b.txt"))

        member = seeded_catalog.get_member(logical("b.txt"))
        assert member is not None
        assert member.physical_path == "/vault/0001"

    def test_tags_both_ends_with_new_group(self, service, seeded_catalog, source_path):
        result = service.create_link(source_path, logical("b.txt"))

        expected = MetadataTag(ATTRIBUTE, str(FIXED), "10014")
        assert seeded_catalog.metadata_of(source_path) == [expected]
        assert seeded_catalog.metadata_of(logical("b.txt")) == [expected]
        assert result.group_id == GroupId(str(FIXED))
        assert result.new_group is True
        assert result.registered is True
        assert result.physical_path == "/vault/0001"

    def test_probe_records_creation(self, service, mock_probe, source_path):
        service.create_link(source_path, logical("b.txt"))

        mock_probe.hard_link_created.assert_called_once_with(
            logical_path=source_path.value,
            link_name=logical("b.txt").value,
            physical_path="/vault/0001",
            group_id=str(FIXED),
            new_group=True,
        )
        mock_probe.payload_registration_failed.assert_not_called()


class TestCreateLinkExistingGroup:
    """Linking a data object that already belongs to a group."""

    def test_reuses_source_group(self, service, seeded_catalog, source_path):
        existing = GroupId.from_uuid(uuid.uuid4())
        seeded_catalog.set_metadata(
            source_path, MetadataTag(ATTRIBUTE, existing.value, "10014")
        )

        result = service.create_link(source_path, logical("c.txt"))

        assert result.group_id == existing
        assert result.new_group is False
        assert seeded_catalog.get_member(logical("c.txt")).group_id == existing

    def test_source_tag_is_not_rewritten(self, service, seeded_catalog, source_path):
        existing = GroupId.from_uuid(uuid.uuid4())
        original = MetadataTag(ATTRIBUTE, existing.value, "10014")
        seeded_catalog.set_metadata(source_path, original)
        seeded_catalog.inject_failure("set_metadata", source_path)

        service.create_link(source_path, logical("c.txt"))

        assert seeded_catalog.metadata_of(source_path) == [original]

    def test_chained_links_share_one_group(self, service, seeded_catalog, source_path):
        first = service.create_link(source_path, logical("b.txt"))
        second = service.create_link(logical("b.txt"), logical("c.txt"))

        assert second.group_id == first.group_id
        groups = {
            seeded_catalog.get_member(logical(name)).group_id
            for name in ("a.txt", "b.txt", "c.txt")
        }
        assert groups == {first.group_id}


class TestCreateLinkFailures:
    def test_missing_source_raises(self, catalog, mock_probe):
        service = make_service(catalog, mock_probe)

        with pytest.raises(SourceNotFoundError, match="Could not retrieve physical"):
            service.create_link(logical("missing.txt"), logical("b.txt"))

        assert not catalog.exists(logical("b.txt"))

    def test_registration_failure_is_best_effort(
        self, service, seeded_catalog, mock_probe, source_path
    ):
        seeded_catalog.put_data_object(logical("b.txt"), "/vault/0099")

        result = service.create_link(source_path, logical("b.txt"))

        assert result.registered is False
        mock_probe.payload_registration_failed.assert_called_once_with(
            link_name=logical("b.txt").value,
            physical_path="/vault/0001",
            status=CATALOG_ALREADY_HAS_ITEM_BY_THAT_NAME,
        )
        # The existing object is tagged regardless
        assert seeded_catalog.get_member(logical("b.txt")).group_id == result.group_id

    def test_registration_failure_aborts_when_strict(
        self, seeded_catalog, mock_probe, source_path
    ):
        service = make_service(seeded_catalog, mock_probe, strict_registration=True)
        seeded_catalog.inject_failure("register_existing_payload", logical("b.txt"))

        with pytest.raises(CatalogError) as exc_info:
            service.create_link(source_path, logical("b.txt"))

        assert exc_info.value.status == -1
        assert seeded_catalog.metadata_of(source_path) == []

    def test_tagging_failure_is_reported_and_raised(
        self, service, seeded_catalog, mock_probe, source_path
    ):
        seeded_catalog.inject_failure("set_metadata", logical("b.txt"), status=-806000)

        with pytest.raises(CatalogError):
            service.create_link(source_path, logical("b.txt"))

        mock_probe.hard_link_tagging_failed.assert_called_once()
        kwargs = mock_probe.hard_link_tagging_failed.call_args.kwargs
        assert kwargs["status"] == -806000
        mock_probe.hard_link_created.assert_not_called()
        # No rollback: the registered link stays
        assert seeded_catalog.exists(logical("b.txt"))

    def test_missing_resource_id_raises(self, mock_probe):
        catalog = create_autospec(Catalog, instance=True)
        catalog.register_existing_payload.return_value = 0
        # physical path, group lookup, collision count, resource id
        catalog.submit.side_effect = [[["/vault/0001"]], [], [["0"]], []]

        with pytest.raises(CatalogError, match="resource id"):
            make_service(catalog, mock_probe).create_link(
                logical("a.txt"), logical("b.txt")
            )

        catalog.set_metadata.assert_not_called()
