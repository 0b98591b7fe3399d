"""Request gating: maps a caller's permission ids to roles and checks them.

The workflow core never depends on this module; it belongs in front of
whatever inbound trigger starts a run.
"""

import logging
from collections.abc import Iterable, Mapping

from nodechain.application.port import PrivilegeService

log = logging.getLogger(__name__)

ROLE_USER = "USER"
ROLE_ADMIN = "ADMIN"

DEFAULT_PERMISSION_ROLES = {
    "PERM_VIEW": ROLE_USER,
    "PERM_ADMIN": ROLE_ADMIN,
}


class PermissionRoleMapper:
    def __init__(self, table: Mapping[str, str] | None = None):
        self._table = dict(DEFAULT_PERMISSION_ROLES if table is None else table)

    def roles_for(self, permission_ids: Iterable[str]) -> set[str]:
        """Unknown permission ids are ignored."""
        return {self._table[pid] for pid in permission_ids if pid in self._table}


class Authorizer:
    def __init__(
        self,
        privileges: PrivilegeService,
        mapper: PermissionRoleMapper | None = None,
        admin_prefix: str = "/api/v1/admin",
    ):
        self.privileges = privileges
        self.mapper = mapper if mapper is not None else PermissionRoleMapper()
        self.admin_prefix = admin_prefix

    def required_role(self, path: str) -> str:
        return ROLE_ADMIN if path.startswith(self.admin_prefix) else ROLE_USER

    def authorize(self, user_id: str | None, required_role: str) -> bool:
        if not user_id:
            log.warning("Rejected request without a user id")
            return False
        roles = self.mapper.roles_for(self.privileges.permission_ids(user_id))
        allowed = required_role in roles
        if not allowed:
            log.warning("User %s lacks role %s", user_id, required_role)
        return allowed
