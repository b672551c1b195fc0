"""Role-based permission table."""

from typing import Dict, FrozenSet, Tuple, Union

from fieldform.models.user import UserRole

Permission = Tuple[str, str]


def _grants(**resources: str) -> FrozenSet[Permission]:
    """Expand ``forms="create read"`` style keyword arguments into pairs."""
    return frozenset(
        (resource.replace("_", "-"), action)
        for resource, actions in resources.items()
        for action in actions.split()
    )


BASE_PERMISSIONS: Dict[UserRole, FrozenSet[Permission]] = {
    UserRole.ADMIN: _grants(
        forms="create read update delete",
        submissions="read delete",
        work_orders="create read update delete",
        users="create read update delete",
        analytics="read",
    ),
    UserRole.MANAGER: _grants(
        forms="create read update",
        submissions="read",
        work_orders="create read update",
        analytics="read",
    ),
    UserRole.FIELD_WORKER: _grants(
        forms="read",
        submissions="create read",
        work_orders="read update",
    ),
    UserRole.VIEWER: _grants(
        forms="read",
        submissions="read",
        analytics="read",
    ),
}

# Grants layered on the base table: scheduling tasks, and filling in forms
# as an admin or manager.
EXTRA_PERMISSIONS: Dict[UserRole, FrozenSet[Permission]] = {
    UserRole.ADMIN: _grants(submissions="create", tasks="create read update delete"),
    UserRole.MANAGER: _grants(submissions="create", tasks="create read update"),
    UserRole.FIELD_WORKER: _grants(tasks="read update"),
    UserRole.VIEWER: _grants(tasks="read"),
}

ROLE_PERMISSIONS: Dict[UserRole, FrozenSet[Permission]] = {
    role: BASE_PERMISSIONS[role] | EXTRA_PERMISSIONS[role] for role in UserRole
}


def has_permission(role: Union[UserRole, str], resource: str, action: str) -> bool:
    """Whether ``role`` may perform ``action`` on ``resource``. Unknown roles get nothing."""
    try:
        role = UserRole(role)
    except ValueError:
        return False
    return (resource, action) in ROLE_PERMISSIONS.get(role, frozenset())


def can_create_forms(role: Union[UserRole, str]) -> bool:
    return has_permission(role, "forms", "create")


def can_delete_forms(role: Union[UserRole, str]) -> bool:
    return has_permission(role, "forms", "delete")


def can_manage_users(role: Union[UserRole, str]) -> bool:
    return has_permission(role, "users", "create")


def can_view_analytics(role: Union[UserRole, str]) -> bool:
    return has_permission(role, "analytics", "read")
