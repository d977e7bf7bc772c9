"""Deletion guard for hard-link group members.

Removing one member of a group must never destroy a payload other members
still reference. Unlink and trim both route through ``DeletionGuard.evaluate``.
"""

from __future__ import annotations

from hard_links.application.observability import (
    DefaultDeletionGuardProbe,
    DeletionGuardProbe,
)
from hard_links.application.services.catalog_support import privileged
from hard_links.application.services.group_resolver import GroupResolver
from hard_links.application.value_objects import DeletionDecision, DeletionOutcome
from hard_links.domain.value_objects import LogicalPath
from hard_links.ports.catalog import Catalog
from hard_links.ports.exceptions import CatalogError
from shared_kernel.privileges import PrivilegedSession


class DeletionGuard:
    """Decides whether the host's default deletion may run.

    - Siblings remain: the member's record is force-unregistered (payload
      untouched) and the default deletion is skipped.
    - No siblings: the default deletion proceeds and destroys the payload.
    - Detach refused by the catalog: the failure is reported and the
      default deletion proceeds.
    """

    def __init__(
        self,
        catalog: Catalog,
        resolver: GroupResolver,
        session: PrivilegedSession | None = None,
        elevate_privileges: bool = True,
        probe: DeletionGuardProbe | None = None,
    ):
        self._catalog = catalog
        self._resolver = resolver
        self._session = session
        self._elevate_privileges = elevate_privileges
        self._probe = probe or DefaultDeletionGuardProbe()

    def evaluate(self, logical_path: LogicalPath) -> DeletionOutcome:
        """Guard the deletion of ``logical_path``.

        Raises:
            CatalogError: If the group of ``logical_path`` cannot be resolved
        """
        siblings = tuple(self._resolver.siblings_of(logical_path))

        if not siblings:
            self._probe.last_member_deletion_allowed(logical_path=logical_path.value)
            return DeletionOutcome(
                logical_path=logical_path,
                decision=DeletionDecision.CONTINUE_DEFAULT,
            )

        failure = self._detach(logical_path)
        if failure is not None:
            self._probe.hard_link_detach_failed(
                logical_path=logical_path.value,
                status=failure.status,
            )
            return DeletionOutcome(
                logical_path=logical_path,
                decision=DeletionDecision.CONTINUE_DEFAULT,
                siblings=siblings,
                failure=failure,
            )

        self._probe.hard_link_detached(
            logical_path=logical_path.value,
            remaining=len(siblings),
        )
        return DeletionOutcome(
            logical_path=logical_path,
            decision=DeletionDecision.SKIP_DEFAULT,
            siblings=siblings,
        )

    def _detach(self, logical_path: LogicalPath) -> CatalogError | None:
        try:
            with privileged(self._session, self._elevate_privileges):
                status = self._catalog.force_unregister(logical_path)
        except CatalogError as e:
            return e

        if status < 0:
            return CatalogError(
                f"Could not remove hard-link [{logical_path}]", status=status
            )
        return None
