"""Propagation of physical-path changes across a hard-link group."""

from __future__ import annotations

from hard_links.application.observability import (
    DefaultRenamePropagatorProbe,
    RenamePropagatorProbe,
)
from hard_links.application.services.catalog_support import (
    physical_path_of,
    privileged,
)
from hard_links.application.services.group_resolver import GroupResolver
from hard_links.application.value_objects import (
    PropagationResult,
    SiblingUpdateFailure,
)
from hard_links.domain.value_objects import LogicalPath
from hard_links.ports.catalog import Catalog
from hard_links.ports.exceptions import CatalogError
from shared_kernel.privileges import PrivilegedSession


class RenamePropagator:
    """Keeps the recorded physical path of every group member in sync.

    Runs after the rename of one member has committed. Every sibling is
    updated independently: a failed update is recorded and the remaining
    siblings are still attempted. Nothing is rolled back.
    """

    def __init__(
        self,
        catalog: Catalog,
        resolver: GroupResolver,
        session: PrivilegedSession | None = None,
        elevate_privileges: bool = True,
        probe: RenamePropagatorProbe | None = None,
    ):
        self._catalog = catalog
        self._resolver = resolver
        self._session = session
        self._elevate_privileges = elevate_privileges
        self._probe = probe or DefaultRenamePropagatorProbe()

    def propagate(self, destination: LogicalPath) -> PropagationResult:
        """Point every sibling of ``destination`` at its new physical path.

        Raises:
            SourceNotFoundError: If ``destination`` has no physical path
            CatalogError: If the group of ``destination`` cannot be resolved
        """
        physical_path = physical_path_of(self._catalog, destination)

        updated: list[LogicalPath] = []
        failures: list[SiblingUpdateFailure] = []

        for sibling in self._resolver.siblings_of(destination):
            failure = self._update_sibling(destination, sibling, physical_path)
            if failure is None:
                updated.append(sibling)
            else:
                failures.append(failure)

        self._probe.rename_propagated(
            destination=destination.value,
            physical_path=physical_path,
            updated_count=len(updated),
            failed_count=len(failures),
        )
        return PropagationResult(
            destination=destination,
            physical_path=physical_path,
            updated=tuple(updated),
            failures=tuple(failures),
        )

    def _update_sibling(
        self,
        destination: LogicalPath,
        sibling: LogicalPath,
        physical_path: str,
    ) -> SiblingUpdateFailure | None:
        try:
            with privileged(self._session, self._elevate_privileges):
                status = self._catalog.set_physical_path(sibling, physical_path)
        except CatalogError as e:
            # A raised error is a failure whatever status it carries
            status = e.status if e.status is not None and e.status < 0 else -1
            return self._record_failure(
                destination, sibling, physical_path, status, e.message
            )

        if status < 0:
            return self._record_failure(destination, sibling, physical_path, status)

        self._probe.sibling_physical_path_updated(
            sibling=sibling.value,
            physical_path=physical_path,
        )
        return None

    def _record_failure(
        self,
        destination: LogicalPath,
        sibling: LogicalPath,
        physical_path: str,
        status: int,
        reason: str | None = None,
    ) -> SiblingUpdateFailure:
        self._probe.sibling_physical_path_update_failed(
            destination=destination.value,
            sibling=sibling.value,
            physical_path=physical_path,
            status=status,
        )
        return SiblingUpdateFailure(
            sibling=sibling,
            status=status,
            message=reason
            or (
                f"Could not update physical path of [{sibling}] to [{physical_path}]. "
                "Use iadmin modrepl to update remaining data objects."
            ),
        )
