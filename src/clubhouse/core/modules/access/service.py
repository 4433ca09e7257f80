from clubhouse.core.core import Service
from clubhouse.core.modules.access.models import Role
from clubhouse.core.modules.session.models import AuthToken, Session
from clubhouse.errors import AccessDeniedError, AuthenticationError


class AccessService(Service):
    async def get_session(self, auth_token: AuthToken | None) -> Session | None:
        """Resolve the request's token: a Session when authenticated, None when anonymous."""
        if not auth_token:
            return None
        return await self.core.services.session.get_session(auth_token)

    async def get_role(self, session: Session) -> Role:
        """Re-read the session's user and derive its role."""
        user = await self.core.services.user.find_user(session.user_id)
        if user is None:
            return Role.NOT_FOUND
        return Role.ADMIN if user.is_admin else Role.MEMBER

    async def ensure_authenticated(self, auth_token: AuthToken | None) -> Session:
        """Ensure the request carries a live session."""
        session = await self.get_session(auth_token)
        if session is None:
            raise AuthenticationError("Not logged in")
        return session

    async def ensure_admin(self, auth_token: AuthToken | None) -> Session:
        """Ensure the session's user is an admin right now, raise AccessDeniedError if not."""
        session = await self.ensure_authenticated(auth_token)
        if await self.get_role(session) != Role.ADMIN:
            raise AccessDeniedError("Admin privileges required")
        return session
