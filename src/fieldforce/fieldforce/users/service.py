from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.logging import get_logger
from ..common.validators import require_latitude, require_longitude
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..state.app_state import AppState
from .model import LastLocation, User

logger = get_logger(__name__)


class AuthService:
    """Use case: session identity (login by phone + role) and live location.

    Login is a roster lookup, not a credential check.
    """

    def __init__(self, state: AppState):
        self._state = state

    def authenticate(self, phone: str, role: Role | str) -> Optional[User]:
        """Roster lookup by phone + role; does not touch the session."""
        try:
            role = Role(role)
        except ValueError:
            return None

        user = next((u for u in self._state.users if u.phone == phone and u.role == role), None)
        if not user:
            logger.info("Login failed for role=%s", role.value)
            return None

        logger.info("Login: user=%s role=%s", user.id, role.value)
        return user

    def login(self, phone: str, role: Role | str) -> bool:
        user = self.authenticate(phone, role)
        if not user:
            return False

        self._state.set_current_user(user.id)
        return True

    def logout(self) -> None:
        self._state.set_current_user(None)

    def current_user(self) -> Optional[User]:
        return self._state.current_user

    def resolve(self, user_id: Optional[str]) -> Optional[User]:
        """Look up the identity carried by a web session cookie.

        The core session is left alone; request handlers pass the result on
        explicitly.
        """
        return self._state.get_user(user_id) if user_id else None

    def require_user(self, user: Optional[User] = None) -> User:
        """Return the acting user, fresh from the roster.

        ``user`` overrides the core session identity.
        """
        current = self._state.get_user(user.id) if user else self._state.current_user
        if not current:
            raise AuthenticationError("Please log in first")
        return current

    def update_location(self, lat: float, lng: float, *, user: Optional[User] = None) -> User:
        lat = require_latitude(lat)
        lng = require_longitude(lng)

        with self._state.lock:
            user = self.require_user(user)
            updated = replace(user, last_location=LastLocation(lat=lat, lng=lng, timestamp=self._state.now()))
            self._state.commit(users=[updated if u.id == user.id else u for u in self._state.users])
        return updated


class UserService:
    """Use case: roster queries."""

    def __init__(self, state: AppState):
        self._state = state

    def get(self, user_id: str) -> Optional[User]:
        return self._state.get_user(user_id)

    def employees(self) -> Sequence[User]:
        return [u for u in self._state.users if u.role == Role.EMPLOYEE]
