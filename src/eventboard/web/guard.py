"""Bearer-token authentication check for protected routes."""

from collections.abc import Callable, Coroutine
from typing import Any, cast

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from fastapi.security.utils import get_authorization_scheme_param

from eventboard.app import App
from eventboard.core.modules.session.models import AuthToken
from eventboard.web.error_handlers import authentication_error_response


def extract_bearer_token(request: Request) -> AuthToken | None:
    """Return the token from an `Authorization: Bearer <token>` header.

    The scheme is matched case-sensitively. A missing header, another scheme
    or an empty token all give None.
    """
    scheme, credentials = get_authorization_scheme_param(request.headers.get("Authorization"))
    if scheme != "Bearer" or not credentials:
        return None
    return AuthToken(credentials)


def require_auth(request: Request) -> JSONResponse | None:
    """Return a 401 response for unauthenticated requests, None when the request may proceed.

    Callers must return the response unchanged when it is not None.
    """
    app = cast(App, request.app.state.app)
    if not app.is_auth_token_valid(extract_bearer_token(request)):
        return authentication_error_response()
    return None


class AuthGuardedRoute(APIRoute):
    """Route that runs `require_auth` before the request body is read or validated."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def guarded_handler(request: Request) -> Response:
            rejection = require_auth(request)
            if rejection is not None:
                return rejection
            return await handler(request)

        return guarded_handler
