"""Role Gate — tests for the pure allow-list check and the role catalogue.

Tests cover:
    - Anonymous callers always fail, even with an empty allow-list
    - Empty allow-list admits any authenticated role
    - Non-empty allow-list admits only listed roles
    - Permission allow-lists only reference known roles
"""

from uuid import uuid4

from taskforge.api.dependencies import check_role
from taskforge.core.domain_types import CallerIdentity
from taskforge.core.roles import PERMISSIONS, ROLES


def _caller(role: str) -> CallerIdentity:
    return CallerIdentity(id=uuid4(), role=role)


def test_no_identity_with_admin_allow_list_fails():
    assert check_role(["admin"], None) is False


def test_no_identity_with_empty_allow_list_fails():
    assert check_role([], None) is False


def test_empty_allow_list_admits_guest():
    assert check_role([], _caller("guest")) is True


def test_listed_role_passes():
    assert check_role(["admin", "manager"], _caller("manager")) is True


def test_unlisted_role_fails():
    assert check_role(["admin"], _caller("user")) is False


def test_role_match_is_exact():
    assert check_role(["admin"], _caller("Admin")) is False


def test_permissions_reference_known_roles_only():
    for permission, allowed in PERMISSIONS.items():
        assert set(allowed) <= set(ROLES), permission


def test_delete_user_is_admin_only():
    assert PERMISSIONS["deleteUser"] == ("admin",)
