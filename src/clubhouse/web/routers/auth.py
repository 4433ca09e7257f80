from typing import Annotated

import structlog
from fastapi import APIRouter, Form, Request
from fastapi.responses import RedirectResponse

from clubhouse.core.modules.access.models import Role
from clubhouse.errors import AuthenticationError, ValidationError
from clubhouse.web.deps import SESSION_TOKEN_KEY, AppDep, AuthTokenDep

router = APIRouter(tags=["auth"])

logger = structlog.get_logger(__name__)


@router.post(
    "/api/login",
    summary="Authenticate user",
    description="Check username and password from a form post. Admins land on /admin, members on /members.",
    operation_id="login",
    response_class=RedirectResponse,
    status_code=302,
)
async def login(
    request: Request,
    app: AppDep,
    auth_token: AuthTokenDep,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> RedirectResponse:
    try:
        result = await app.login(username, password, auth_token)
    except (ValidationError, AuthenticationError) as e:
        logger.info("login_rejected", error=str(e))
        return RedirectResponse("/login", status_code=302)

    request.session[SESSION_TOKEN_KEY] = result.auth_token
    return RedirectResponse("/admin" if result.role == Role.ADMIN else "/members", status_code=302)


@router.post(
    "/api/register",
    summary="Create account",
    description="Register a member account from a form post, then send the browser to the login page.",
    operation_id="register",
    response_class=RedirectResponse,
    status_code=302,
)
async def register(
    app: AppDep,
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
) -> RedirectResponse:
    try:
        await app.register(username, password)
    except ValidationError as e:
        logger.info("register_rejected", error=str(e))
        return RedirectResponse("/register", status_code=302)
    return RedirectResponse("/login", status_code=302)


@router.get(
    "/api/logout",
    summary="End session",
    description="Destroy the current session and clear the cookie.",
    operation_id="logout",
    response_class=RedirectResponse,
    status_code=302,
)
async def logout(request: Request, app: AppDep, auth_token: AuthTokenDep) -> RedirectResponse:
    await app.logout(auth_token)
    request.session.clear()
    return RedirectResponse("/login", status_code=302)
