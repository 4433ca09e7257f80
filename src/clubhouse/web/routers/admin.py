from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse

from clubhouse.web.deps import AppDep, AuthTokenDep

router = APIRouter(tags=["admin"])


@router.get(
    "/api/admin/grantAdmin/{user_id}",
    summary="Grant admin",
    description="Give a user the admin role. Only accessible by admin users. Unknown ids are ignored.",
    operation_id="grantAdmin",
    response_class=RedirectResponse,
    status_code=302,
    responses={403: {"description": "Admin privileges required"}},
)
async def grant_admin(user_id: str, app: AppDep, auth_token: AuthTokenDep) -> RedirectResponse:
    await app.grant_admin(auth_token, user_id)
    return RedirectResponse("/admin", status_code=302)


@router.get(
    "/api/admin/revokeAdmin/{user_id}",
    summary="Revoke admin",
    description="Take the admin role away from a user. Revoking your own role logs you out.",
    operation_id="revokeAdmin",
    response_class=RedirectResponse,
    status_code=302,
    responses={403: {"description": "Admin privileges required"}},
)
async def revoke_admin(user_id: str, request: Request, app: AppDep, auth_token: AuthTokenDep) -> RedirectResponse:
    if await app.revoke_admin(auth_token, user_id):
        request.session.clear()
        return RedirectResponse("/login", status_code=302)
    return RedirectResponse("/admin", status_code=302)
