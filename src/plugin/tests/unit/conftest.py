"""Unit test fixtures with an in-memory catalog and mocked probes."""

import pytest

from hard_links.domain.value_objects import LogicalPath
from hard_links.infrastructure import InMemoryCatalog
from hard_links.ports.context import ClientSession, ExecutionContext
from infrastructure.settings import HardLinkSettings

COLLECTION = "/tempZone/home/alice"


def logical(name: str) -> LogicalPath:
    """Build a logical path inside the test collection."""
    return LogicalPath.join(COLLECTION, name)


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """Provide an empty in-memory catalog."""
    return InMemoryCatalog(default_resource_id="10014")


@pytest.fixture
def session() -> ClientSession:
    """Provide a non-privileged client session."""
    return ClientSession(user_name="alice", zone="tempZone")


@pytest.fixture
def context(catalog, session) -> ExecutionContext:
    """Provide an execution context over the in-memory catalog."""
    return ExecutionContext(catalog=catalog, session=session)


@pytest.fixture
def settings() -> HardLinkSettings:
    """Provide default hard-link settings independent of the environment."""
    return HardLinkSettings(
        metadata_attribute="irods::hard_link",
        scope_by_resource=False,
        strict_registration=False,
        elevate_privileges=True,
    )


@pytest.fixture
def source_path() -> LogicalPath:
    return logical("a.txt")


@pytest.fixture
def seeded_catalog(catalog, source_path) -> InMemoryCatalog:
    """Catalog holding one untagged data object at /vault/0001."""
    catalog.put_data_object(source_path, "/vault/0001")
    return catalog
