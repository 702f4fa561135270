"""
Auth service: stateless client for the backend's authentication endpoints
Every call is a single request; failures come back as an AuthResult, never as exceptions
"""

import logging
from typing import Optional, Any, Dict

import httpx

from mycare.config import API_URL
from mycare.schemas.user import AuthResult, UserRole
from mycare.utils.error_handler import ErrorContext, ErrorHandler

logger = logging.getLogger(__name__)

class AuthService:
    """Wraps login, registration and profile requests"""

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = (base_url or API_URL).rstrip("/")
        self.transport = transport

    async def login(self, email: str, password: str) -> AuthResult:
        """Authenticate with email and password"""
        return await self._request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
            failure_message="Login failed",
            error_message="An error occurred during login"
        )

    async def register(self, name: str, email: str, password: str, user_type: str = UserRole.PATIENT.value) -> AuthResult:
        """Create an account and receive a session token"""
        return await self._request(
            "POST",
            "/auth/register",
            json={"name": name, "email": email, "password": password, "userType": user_type},
            failure_message="Registration failed",
            error_message="An error occurred during registration"
        )

    async def get_profile(self, token: str) -> AuthResult:
        """Fetch the profile of the account owning the token"""
        result = await self._request(
            "GET",
            "/auth/profile",
            headers={"Authorization": f"Bearer {token}"},
            failure_message="Failed to get profile",
            error_message="An error occurred while fetching the profile"
        )
        if result.success:
            result.token = token
        return result

    async def _request(
        self,
        method: str,
        path: str,
        failure_message: str,
        error_message: str,
        json: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> AuthResult:
        url = f"{self.base_url}{path}"
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.request(method, url, json=json, headers=headers)

            # The body is decoded before the status is checked
            data = response.json()

            if not response.is_success:
                message = data.get("message") if isinstance(data, dict) else None
                logger.warning(f"{method} {path} rejected with status {response.status_code}")
                return AuthResult(success=False, error=message or failure_message)

            return AuthResult(success=True, token=data.get("token"), user=data.get("user"))

        except Exception as e:
            ErrorHandler.log_error(ErrorContext(method, url), e)
            return AuthResult(success=False, error=error_message)
