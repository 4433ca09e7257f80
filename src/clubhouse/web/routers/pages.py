from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from clubhouse.utils import parse_limit
from clubhouse.web.deps import AppDep, AuthTokenDep
from clubhouse.web.rendering import templates

router = APIRouter(tags=["pages"], include_in_schema=False, default_response_class=HTMLResponse)


@router.get("/")
async def index_page(request: Request, app: AppDep, auth_token: AuthTokenDep) -> Response:
    session = await app.get_session(auth_token)
    return templates.TemplateResponse(request, "index.html", {"session": session})


@router.get("/login")
async def login_page(request: Request, app: AppDep, auth_token: AuthTokenDep) -> Response:
    if await app.is_authenticated(auth_token):
        return RedirectResponse("/members", status_code=302)
    return templates.TemplateResponse(request, "login.html")


@router.get("/register")
async def register_page(request: Request, app: AppDep, auth_token: AuthTokenDep) -> Response:
    if await app.is_authenticated(auth_token):
        return RedirectResponse("/members", status_code=302)
    return templates.TemplateResponse(request, "register.html")


@router.get("/members")
async def members_page(request: Request, app: AppDep, auth_token: AuthTokenDep) -> Response:
    session = await app.ensure_member(auth_token)
    return templates.TemplateResponse(request, "members.html", {"session": session})


@router.get("/admin")
async def admin_page(
    request: Request,
    app: AppDep,
    auth_token: AuthTokenDep,
    username: str | None = None,
    limit: str | None = None,
) -> Response:
    users = await app.search_users(auth_token, username, parse_limit(limit))
    return templates.TemplateResponse(
        request, "admin.html", {"users": users, "query": username or "", "limit": limit or ""}
    )
