import logging

from fastapi import Request
from fastapi.responses import RedirectResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from clubhouse.errors import AccessDeniedError, AuthenticationError, NotFoundError, StoreUnavailableError, ValidationError
from clubhouse.web.rendering import render_error

logger = logging.getLogger(__name__)


async def user_error_handler(request: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses: anonymous requests go to login, the rest get an error page."""
    if isinstance(exc, AuthenticationError):
        return RedirectResponse("/login", status_code=302)

    if isinstance(exc, AccessDeniedError):
        status_code = 403
    elif isinstance(exc, NotFoundError):
        status_code = 404
    elif isinstance(exc, ValidationError):
        status_code = 400
    else:
        # Default for any other UserError subclass
        status_code = 400

    return render_error(request, status_code, str(exc))


async def http_exception_handler(request: Request, exc: Exception) -> Response:
    """Render unmatched routes and other HTTP errors with the error page."""
    if not isinstance(exc, StarletteHTTPException):
        raise exc
    if exc.status_code == 404:
        return render_error(request, 404, "Page not found")
    return render_error(request, exc.status_code, str(exc.detail))


async def store_error_handler(request: Request, exc: Exception) -> Response:
    """Handle MongoDB failures on paths where they must not be hidden (503)."""
    cause = exc.__cause__ if isinstance(exc, StoreUnavailableError) else exc
    logger.error("Store unavailable on %s %s: %s", request.method, request.url.path, cause)
    return render_error(request, 503, "Service temporarily unavailable. Please try again later.")


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return render_error(request, 500, "An unexpected error occurred.")
