"""
Access Control Module

Two roles: a single owner fixed at construction and a mutable admin set that
only the owner may change. There is no ownership transfer.
"""

from typing import Dict, FrozenSet

from .amounts import require_identity
from .errors import Unauthorized
from .state import StateComponent


OWNER_ROLE = "owner"


class AccessControl(StateComponent):
    """Owner identity plus admin set"""

    def __init__(self, owner: str):
        self._owner = require_identity(owner, "owner")
        self._admins: Dict[str, bool] = {}

    @property
    def owner(self) -> str:
        return self._owner

    def is_owner(self, identity: str) -> bool:
        return identity == self._owner

    def is_admin(self, identity: str) -> bool:
        return identity in self._admins

    def admins(self) -> FrozenSet[str]:
        return frozenset(self._admins)

    def require_owner(self, caller: str, operation: str) -> None:
        """Raise Unauthorized unless caller is the owner"""
        if not self.is_owner(caller):
            raise Unauthorized(caller, OWNER_ROLE, operation)

    def grant_admin(self, caller: str, identity: str) -> None:
        """Add identity to the admin set; a no-op if already present"""
        self.require_owner(caller, "grant_admin")
        require_identity(identity, "account")
        if identity not in self._admins:
            self._write(self._admins, identity, True)

    def revoke_admin(self, caller: str, identity: str) -> None:
        """Remove identity from the admin set; a no-op if absent"""
        self.require_owner(caller, "revoke_admin")
        require_identity(identity, "account")
        self._delete(self._admins, identity)
