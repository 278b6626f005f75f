"""Bearer token authentication for the HTTP transport."""

import logging
import secrets

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

_logger = logging.getLogger(__name__)

_BEARER_PREFIX = "bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token from an ``Authorization: Bearer ...`` header."""
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        return None
    token = authorization[len(_BEARER_PREFIX) :].strip()
    return token or None


def is_authorized(authorization: str | None, auth_token: str) -> bool:
    token = extract_bearer_token(authorization)
    return token is not None and secrets.compare_digest(
        token.encode("utf-8"), auth_token.encode("utf-8")
    )


class RequireBearerToken:
    """ASGI wrapper that rejects requests without the configured bearer token."""

    def __init__(self, app: ASGIApp, auth_token: str) -> None:
        self.app = app
        self.auth_token = auth_token

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        if not is_authorized(request.headers.get("authorization"), self.auth_token):
            client = request.client.host if request.client else "unknown"
            _logger.warning(
                "Unauthorized request: path=%s remote_addr=%s user_agent=%s",
                request.url.path,
                client,
                request.headers.get("user-agent"),
            )
            response = JSONResponse(
                {"detail": "Unauthorized"},
                status_code=status.HTTP_401_UNAUTHORIZED,
                headers={"WWW-Authenticate": 'Bearer realm="foundation-foods"'},
            )
            await response(scope, receive, send)
            return
        await self.app(scope, receive, send)
