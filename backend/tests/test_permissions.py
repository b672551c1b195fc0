# tests/test_permissions.py - Role permission table tests
import pytest

from fieldform.models.user import UserRole
from fieldform.services.permissions import (
    BASE_PERMISSIONS,
    EXTRA_PERMISSIONS,
    ROLE_PERMISSIONS,
    can_create_forms,
    can_delete_forms,
    can_manage_users,
    can_view_analytics,
    has_permission,
)


def test_viewer_cannot_create_forms():
    assert not has_permission("viewer", "forms", "create")


def test_admin_can_delete_users():
    assert has_permission("admin", "users", "delete")


def test_accepts_enum_roles():
    assert has_permission(UserRole.FIELD_WORKER, "submissions", "create")
    assert not has_permission(UserRole.FIELD_WORKER, "work-orders", "delete")


def test_unknown_role_has_no_permissions():
    assert not has_permission("contractor", "forms", "read")


def test_roles_nest():
    admin = ROLE_PERMISSIONS[UserRole.ADMIN]
    manager = ROLE_PERMISSIONS[UserRole.MANAGER]
    assert manager <= admin
    assert ROLE_PERMISSIONS[UserRole.FIELD_WORKER] <= manager
    assert ROLE_PERMISSIONS[UserRole.VIEWER] <= manager


@pytest.mark.parametrize(
    "role, forms_create, forms_delete, users, analytics",
    [
        ("admin", True, True, True, True),
        ("manager", True, False, False, True),
        ("field-worker", False, False, False, False),
        ("viewer", False, False, False, True),
    ],
)
def test_helper_predicates(role, forms_create, forms_delete, users, analytics):
    assert can_create_forms(role) is forms_create
    assert can_delete_forms(role) is forms_delete
    assert can_manage_users(role) is users
    assert can_view_analytics(role) is analytics


def test_base_table_leaves_form_filling_to_field_workers():
    submitters = {role for role, grants in BASE_PERMISSIONS.items() if ("submissions", "create") in grants}
    assert submitters == {UserRole.FIELD_WORKER}
    assert not any(resource == "tasks" for grants in BASE_PERMISSIONS.values() for resource, _ in grants)


def test_extra_grants_cover_tasks_and_submitting():
    assert EXTRA_PERMISSIONS[UserRole.ADMIN] == {
        ("submissions", "create"),
        ("tasks", "create"),
        ("tasks", "read"),
        ("tasks", "update"),
        ("tasks", "delete"),
    }
    assert EXTRA_PERMISSIONS[UserRole.MANAGER] == {
        ("submissions", "create"),
        ("tasks", "create"),
        ("tasks", "read"),
        ("tasks", "update"),
    }
    assert EXTRA_PERMISSIONS[UserRole.FIELD_WORKER] == {("tasks", "read"), ("tasks", "update")}
    assert EXTRA_PERMISSIONS[UserRole.VIEWER] == {("tasks", "read")}
    for role in UserRole:
        assert ROLE_PERMISSIONS[role] == BASE_PERMISSIONS[role] | EXTRA_PERMISSIONS[role]
    assert has_permission("admin", "submissions", "create")
    assert not has_permission("viewer", "tasks", "update")
