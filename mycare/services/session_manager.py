"""
Session manager: the client's record of who is logged in
Holds the current user, token and loading flag, and mirrors user and token into durable storage
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional, Any, Dict, Union

from mycare.schemas.user import ActionResult, AuthResult, UserUpdate, UserRole
from mycare.services.auth_service import AuthService
from mycare.services.session_storage import KeyValueStorage, JsonFileStorage

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"
MISSING_TOKEN_ERROR = "Authentication response did not include a token"

@dataclass
class SessionState:
    """In-memory session"""
    user: Optional[Dict[str, Any]] = None
    token: Optional[str] = None
    loading: bool = False

class SessionManager:
    """Login, logout and profile updates for a single client session"""

    def __init__(self, auth_service: Optional[AuthService] = None, storage: Optional[KeyValueStorage] = None):
        self.auth_service = auth_service or AuthService()
        self.storage = storage if storage is not None else JsonFileStorage()
        self.state = SessionState()

    @property
    def user(self) -> Optional[Dict[str, Any]]:
        return self.state.user

    @property
    def token(self) -> Optional[str]:
        return self.state.token

    @property
    def loading(self) -> bool:
        return self.state.loading

    @property
    def is_authenticated(self) -> bool:
        return self.state.user is not None

    def restore(self) -> bool:
        """Reload a persisted session, returning whether one was found"""
        token = self.storage.get_item(TOKEN_KEY)
        raw_user = self.storage.get_item(USER_KEY)
        if not token or not raw_user:
            return False

        try:
            user = json.loads(raw_user)
        except json.JSONDecodeError:
            logger.warning("Discarding corrupt persisted session")
            self._clear_storage()
            return False

        if not isinstance(user, dict):
            logger.warning("Discarding persisted session with malformed user")
            self._clear_storage()
            return False

        self.state.user = user
        self.state.token = token
        logger.info(f"Restored session for user {user.get('id')}")
        return True

    async def login(self, email: str, password: str) -> ActionResult:
        """Authenticate and, on success, persist the new session"""
        return await self._authenticate(
            lambda: self.auth_service.login(email, password),
            "An error occurred during login"
        )

    async def register(self, name: str, email: str, password: str, user_type: str = UserRole.PATIENT.value) -> ActionResult:
        """Create an account and start a session for it"""
        return await self._authenticate(
            lambda: self.auth_service.register(name, email, password, user_type),
            "An error occurred during registration"
        )

    def logout(self) -> None:
        """Forget the session in memory and in storage"""
        self.state.user = None
        self.state.token = None
        self._clear_storage()
        logger.info("Logged out")

    def update_user(self, partial: Union[UserUpdate, Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """Merge changed fields into the current user; no-op without a session"""
        if self.state.user is None:
            return None

        changes = partial.to_partial() if isinstance(partial, UserUpdate) else dict(partial)
        # The identifier is immutable
        changes.pop("id", None)

        updated_user = {**self.state.user, **changes}
        self.storage.set_item(USER_KEY, json.dumps(updated_user))
        self.state.user = updated_user
        return updated_user

    async def _authenticate(self, call, error_message: str) -> ActionResult:
        try:
            self.state.loading = True
            response: AuthResult = await call()
            if response.success and not response.token:
                logger.warning("Authentication succeeded without a token; session not started")
                return ActionResult(success=False, error=MISSING_TOKEN_ERROR)
            if response.success:
                self.storage.set_item(TOKEN_KEY, response.token)
                self.storage.set_item(USER_KEY, json.dumps(response.user))
                self.state.token = response.token
                self.state.user = response.user
                logger.info(f"Session started for user {(response.user or {}).get('id')}")
                return ActionResult(success=True)
            return ActionResult(success=False, error=response.error)
        except Exception as e:
            logger.error(f"Unexpected authentication failure: {e}")
            return ActionResult(success=False, error=error_message)
        finally:
            self.state.loading = False

    def _clear_storage(self) -> None:
        self.storage.remove_item(TOKEN_KEY)
        self.storage.remove_item(USER_KEY)
