"""Scoped privilege elevation for catalog primitives.

Some catalog primitives (updating a sibling's physical path, force
unregistering a record) must run with administrative rights because the
caller does not necessarily own every member of a hard-link group.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from enum import StrEnum
from typing import Protocol


class PrivilegeLevel(StrEnum):
    """Authorization levels a client session can hold."""

    REMOTE_USER = "remote_user"
    LOCAL_USER = "local_user"
    REMOTE_PRIV_USER = "remote_priv_user"
    LOCAL_PRIV_USER = "local_priv_user"


class PrivilegedSession(Protocol):
    """Anything carrying a mutable privilege level."""

    privilege: PrivilegeLevel


@contextmanager
def elevated_privileges(
    session: PrivilegedSession,
    level: PrivilegeLevel = PrivilegeLevel.LOCAL_PRIV_USER,
) -> Iterator[PrivilegedSession]:
    """Raise the session's privilege level for the duration of the block.

    The previous level is restored on every exit path, including when the
    wrapped primitive raises.

    Example:
        with elevated_privileges(context.session):
            catalog.force_unregister(path)
    """
    previous = session.privilege
    session.privilege = level
    try:
        yield session
    finally:
        session.privilege = previous
