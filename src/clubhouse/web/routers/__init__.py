from clubhouse.web.routers.admin import router as admin_router
from clubhouse.web.routers.auth import router as auth_router
from clubhouse.web.routers.members import router as members_router
from clubhouse.web.routers.pages import router as pages_router

__all__ = [
    "admin_router",
    "auth_router",
    "members_router",
    "pages_router",
]
