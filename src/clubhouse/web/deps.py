from typing import Annotated, cast

from fastapi import Depends, Request

from clubhouse.app import App
from clubhouse.core.modules.session.models import AuthToken

# Key inside Starlette's signed session cookie; the cookie carries nothing else
SESSION_TOKEN_KEY = "auth_token"


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


async def get_auth_token(request: Request) -> AuthToken | None:
    """Read the session token from the signed session cookie, if any.

    Validation happens in App, which decides between redirecting, rejecting and proceeding.
    """
    token = request.session.get(SESSION_TOKEN_KEY)
    if not isinstance(token, str) or not token:
        return None
    return AuthToken(token)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AuthTokenDep = Annotated[AuthToken | None, Depends(get_auth_token)]
