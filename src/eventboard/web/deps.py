from typing import Annotated, cast

from fastapi import Depends, Request

from eventboard.app import App
from eventboard.core.modules.session.models import AuthToken
from eventboard.errors import AuthenticationError
from eventboard.web.guard import extract_bearer_token, require_auth


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


def get_bearer_token(request: Request) -> AuthToken | None:
    """Get the bearer token, if any, without checking it."""
    return extract_bearer_token(request)


def get_auth_token(request: Request) -> AuthToken:
    """Get the bearer token of an authenticated request, checked by `require_auth`."""
    if require_auth(request) is not None:
        raise AuthenticationError
    return cast(AuthToken, extract_bearer_token(request))


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
BearerTokenDep = Annotated[AuthToken | None, Depends(get_bearer_token)]
AuthTokenDep = Annotated[AuthToken, Depends(get_auth_token)]
