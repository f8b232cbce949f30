"""Roles & Permissions — the role catalogue and per-action allow-lists.

Invariants:
    - Every permission allow-list only contains names from ROLES
    - Lists are tuples: shared config, never mutated at runtime
"""

from types import MappingProxyType

ROLES: tuple[str, ...] = ("admin", "manager", "user", "viewer")

DEFAULT_ROLE = "user"

PERMISSIONS = MappingProxyType({
    "upload": ("admin", "manager"),
    "report": ("admin", "manager"),
    "notify": ("admin", "manager", "user"),
    "register": ("admin", "manager"),
    "view": ("admin", "manager", "user", "viewer"),
    "deleteUser": ("admin",),
    "updateProfile": ("user", "manager"),
    "addComment": ("user", "manager"),
    "viewDashboard": ("viewer",),
})
