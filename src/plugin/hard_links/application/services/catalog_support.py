"""Catalog lookups shared by the hard-link services."""

from __future__ import annotations

from contextlib import AbstractContextManager, nullcontext

from hard_links.domain.value_objects import LogicalPath
from hard_links.ports.catalog import Catalog
from hard_links.ports.exceptions import SourceNotFoundError
from hard_links.ports.queries import CatalogQuery, Column
from shared_kernel.privileges import PrivilegedSession, elevated_privileges


def physical_path_of(catalog: Catalog, logical_path: LogicalPath) -> str:
    """Return the recorded physical path of a data object.

    Raises:
        SourceNotFoundError: If the catalog has no record for the path
    """
    query = CatalogQuery.select(Column.DATA_PATH).where(
        COLL_NAME=logical_path.collection,
        DATA_NAME=logical_path.data_name,
    )
    for row in catalog.submit(query):
        return row[0]

    raise SourceNotFoundError(
        f"Could not retrieve physical path for [{logical_path}]"
    )


def resource_scope_of(catalog: Catalog, logical_path: LogicalPath) -> str | None:
    """Return the resource id backing a data object, or None if unknown."""
    query = CatalogQuery.select(Column.RESC_ID).where(
        COLL_NAME=logical_path.collection,
        DATA_NAME=logical_path.data_name,
    )
    for row in catalog.submit(query):
        return row[0]

    return None


def privileged(
    session: PrivilegedSession | None, enabled: bool = True
) -> AbstractContextManager[object]:
    """Elevate ``session`` when enabled, otherwise do nothing."""
    if session is None or not enabled:
        return nullcontext()
    return elevated_privileges(session)
