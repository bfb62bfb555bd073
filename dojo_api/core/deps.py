# dojo_api/core/deps.py
"""Authorization gates shared by the routers."""
from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.user import User
from .config import Settings
from .database import get_db
from .exceptions import NotAuthenticated, PermissionDenied
from .security import logout_session, session_user_id


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User:
    """Any logged-in user; 401 otherwise"""
    user_id = session_user_id(request)
    if user_id is None:
        raise NotAuthenticated()

    user = await db.get(User, user_id)
    if user is None:
        # Cookie outlived its user
        logout_session(request)
        raise NotAuthenticated()
    return user


async def require_instructor(current_user: User = Depends(get_current_user)) -> User:
    """Instructor or admin; students get 403"""
    if not current_user.is_instructor:
        raise PermissionDenied()
    return current_user


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
