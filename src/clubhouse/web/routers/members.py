from fastapi import APIRouter
from fastapi.responses import FileResponse, PlainTextResponse, Response

from clubhouse.errors import AuthenticationError
from clubhouse.web.deps import AppDep, AuthTokenDep

router = APIRouter(tags=["members"])


@router.get(
    "/api/members/getUsername",
    summary="Current username",
    description="Return the logged-in username as plain text.",
    operation_id="getUsername",
    response_class=PlainTextResponse,
    responses={404: {"description": "Not logged in"}},
)
async def get_username(app: AppDep, auth_token: AuthTokenDep) -> Response:
    try:
        username = await app.get_username(auth_token)
    except AuthenticationError:
        return PlainTextResponse("You're not logged in!", status_code=404)
    return PlainTextResponse(username)


@router.get(
    "/api/members/randomPhoto",
    summary="Random photo",
    description="Return a randomly chosen photo from the members pool.",
    operation_id="randomPhoto",
    response_class=FileResponse,
    responses={400: {"description": "Not logged in"}, 404: {"description": "No photos available"}},
)
@router.get("/api/members/randomPhoto/{photo_key}", include_in_schema=False)
async def random_photo(app: AppDep, auth_token: AuthTokenDep, photo_key: str | None = None) -> Response:
    # photo_key only defeats browser caching, it does not select a photo
    try:
        path = await app.get_random_photo(auth_token)
    except AuthenticationError:
        return PlainTextResponse("You don't have access!", status_code=400)
    return FileResponse(path=path, headers={"Cache-Control": "no-store"})
