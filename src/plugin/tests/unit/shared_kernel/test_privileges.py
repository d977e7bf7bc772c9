"""Unit tests for scoped privilege elevation."""

import pytest

from hard_links.ports.context import ClientSession
from shared_kernel.privileges import PrivilegeLevel, elevated_privileges


@pytest.fixture
def client_session() -> ClientSession:
    return ClientSession(user_name="alice", zone="tempZone")


class TestElevatedPrivileges:
    def test_elevates_inside_block(self, client_session):
        with elevated_privileges(client_session) as session:
            assert session is client_session
            assert session.privilege is PrivilegeLevel.LOCAL_PRIV_USER

    def test_restores_previous_level(self, client_session):
        with elevated_privileges(client_session):
            pass
        assert client_session.privilege is PrivilegeLevel.LOCAL_USER

    def test_restores_level_when_block_raises(self, client_session):
        with pytest.raises(RuntimeError):
            with elevated_privileges(client_session):
                raise RuntimeError("primitive failed")

        assert client_session.privilege is PrivilegeLevel.LOCAL_USER

    def test_nested_elevation_restores_each_level(self, client_session):
        client_session.privilege = PrivilegeLevel.REMOTE_USER

        with elevated_privileges(client_session, PrivilegeLevel.REMOTE_PRIV_USER):
            with elevated_privileges(client_session):
                assert client_session.privilege is PrivilegeLevel.LOCAL_PRIV_USER
            assert client_session.privilege is PrivilegeLevel.REMOTE_PRIV_USER

        assert client_session.privilege is PrivilegeLevel.REMOTE_USER
