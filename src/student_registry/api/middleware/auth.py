"""
Authentication middleware.

Gates API requests behind HTTP Basic credentials. The registration core
never sees credentials; requests that fail here never reach a route.
"""

import base64
import binascii
import hmac
import logging
from typing import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from student_registry.api.schemas.exceptions import AuthRequiredError

logger = logging.getLogger(__name__)

DEFAULT_REALM = "student-registry"


def parse_basic_credentials(auth_header: str | None) -> tuple[str, str] | None:
    """
    Extract username and password from a Basic Authorization header.

    Args:
        auth_header: The Authorization header value

    Returns:
        (username, password) or None if the header is missing or malformed
    """
    if not auth_header:
        return None

    parts = auth_header.split()
    if len(parts) != 2:
        return None

    scheme, encoded = parts
    if scheme.lower() != "basic":
        return None

    try:
        decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None

    username, sep, password = decoded.partition(":")
    if not sep:
        return None
    return username, password


def credentials_match(
    provided: tuple[str, str],
    expected_username: str,
    expected_password: str,
) -> bool:
    """Compare credentials in constant time."""
    username, password = provided
    username_ok = hmac.compare_digest(username.encode("utf-8"), expected_username.encode("utf-8"))
    password_ok = hmac.compare_digest(password.encode("utf-8"), expected_password.encode("utf-8"))
    return username_ok and password_ok


class BasicAuthMiddleware(BaseHTTPMiddleware):
    """
    Middleware for HTTP Basic authentication.

    Requests to non-public paths must carry credentials matching the
    configured username and password. Failures are answered with 401 and
    a ``WWW-Authenticate`` challenge.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        username: str,
        password: str,
        require_auth: bool = True,
        public_paths: set[str] | None = None,
        realm: str = DEFAULT_REALM,
    ) -> None:
        """
        Initialize authentication middleware.

        Args:
            app: ASGI application
            username: Accepted username
            password: Accepted password
            require_auth: Whether to reject unauthenticated requests
            public_paths: Paths (and their sub-paths) that bypass auth
            realm: Realm announced in the authentication challenge
        """
        super().__init__(app)
        self._username = username
        self._password = password
        self._require_auth = require_auth
        self._public_paths = public_paths or set()
        self._realm = realm

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """
        Process request and authenticate.

        Args:
            request: Incoming request
            call_next: Next middleware/route handler

        Returns:
            Response from downstream handlers, or a 401 challenge
        """
        user = self._authenticate(request)
        request.state.user = user

        if not self._require_auth or self._is_public_path(request.url.path):
            return await call_next(request)

        if user is None:
            logger.info(f"Rejected unauthenticated {request.method} {request.url.path}")
            return self._challenge()

        logger.debug(f"Authenticated request from user: {user} on {request.url.path}")
        return await call_next(request)

    def _is_public_path(self, path: str) -> bool:
        """
        Check if a path should bypass authentication.

        Args:
            path: Request path

        Returns:
            True if path is public (bypasses auth)
        """
        for public_path in self._public_paths:
            if path == public_path or path.startswith(public_path.rstrip("/") + "/"):
                return True
        return False

    def _authenticate(self, request: Request) -> str | None:
        """Return the authenticated username, or None."""
        credentials = parse_basic_credentials(request.headers.get("authorization"))
        if credentials is None:
            return None

        if credentials_match(credentials, self._username, self._password):
            return credentials[0]

        logger.debug(f"Invalid credentials provided for user: {credentials[0]}")
        return None

    def _challenge(self) -> JSONResponse:
        """Build the 401 response with a Basic challenge."""
        error = AuthRequiredError(
            detail="Provide valid credentials via HTTP Basic authentication",
        )
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={
                "error": {
                    "type": error.error_type,
                    "message": error.message,
                    "detail": error.detail,
                }
            },
            headers={"WWW-Authenticate": f'Basic realm="{self._realm}"'},
        )

