from collections.abc import Iterable, Mapping

from nodechain.application.port import PrivilegeService


class StaticPrivilegeService(PrivilegeService):
    """Serves permission ids from a fixed table, with a default grant for unknown users."""

    def __init__(
        self,
        grants: Mapping[str, Iterable[str]] | None = None,
        default: Iterable[str] = ("PERM_VIEW",),
    ):
        self._grants = {user: list(perms) for user, perms in (grants or {}).items()}
        self._default = list(default)

    def permission_ids(self, user_id: str) -> list[str]:
        return list(self._grants.get(user_id, self._default))
