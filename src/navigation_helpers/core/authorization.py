"""Role-based authorization with wildcard permissions.

Permissions are strings of the form ``resource:privilege``:

- ``*:*`` grants everything
- ``admin:*`` grants every privilege on ``admin`` and its sub-resources
- ``*:view`` grants ``view`` on every resource
- ``admin:edit`` also grants ``edit`` on ``admin.users`` (dotted sub-resource)
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from navigation_helpers.errors import NavigationConfigError


def permission_matches(permission: str, required: str) -> bool:
    """Check whether a held permission satisfies a required one."""
    if permission == required or permission == "*:*":
        return True

    if ":" not in permission or ":" not in required:
        return False

    perm_resource, perm_privilege = permission.split(":", 1)
    req_resource, req_privilege = required.split(":", 1)

    if perm_privilege not in ("*", req_privilege) and req_privilege != "*":
        return False

    if perm_resource in ("*", req_resource):
        return True

    return req_resource.startswith(perm_resource + ".")


@dataclass(frozen=True)
class Role:
    """A named role with direct permissions and inherited roles."""

    name: str
    permissions: tuple[str, ...] = ()
    inherits: tuple[str, ...] = ()


@dataclass
class RoleAuthorization:
    """Authorization backed by a static table of roles."""

    roles: dict[str, Role] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "RoleAuthorization":
        """Build from ``{role: {"permissions": [...], "inherits": [...]}}``.

        Raises:
            NavigationConfigError: if a role entry is malformed.
        """
        roles: dict[str, Role] = {}
        for name, entry in config.items():
            if not isinstance(entry, Mapping):
                msg = f"roles.{name}: expected a mapping, got {type(entry).__name__}"
                raise NavigationConfigError(msg)
            permissions = entry.get("permissions", [])
            inherits = entry.get("inherits", [])
            if not isinstance(permissions, list) or not isinstance(inherits, list):
                msg = f"roles.{name}: 'permissions' and 'inherits' must be lists"
                raise NavigationConfigError(msg)
            roles[name] = Role(
                name=name,
                permissions=tuple(str(p) for p in permissions),
                inherits=tuple(str(r) for r in inherits),
            )
        logger.debug("Loaded {} roles", len(roles))
        return cls(roles=roles)

    def permissions_for(self, role: str) -> set[str]:
        """Resolve the permissions of a role, following inheritance."""
        permissions: set[str] = set()
        visited: set[str] = set()

        def add(name: str) -> None:
            if name in visited:
                return  # circular inheritance
            visited.add(name)
            definition = self.roles.get(name)
            if definition is None:
                return
            permissions.update(definition.permissions)
            for inherited in definition.inherits:
                add(inherited)

        add(role)
        return permissions

    def is_granted(self, role: str, resource: str, privilege: str | None) -> bool:
        if role not in self.roles:
            return False
        required = f"{resource}:{privilege or '*'}"
        return any(permission_matches(p, required) for p in self.permissions_for(role))
