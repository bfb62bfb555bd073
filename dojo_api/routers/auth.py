# dojo_api/routers/auth.py
"""Session-cookie authentication."""
import logging

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import get_current_user
from ..core.exceptions import NotAuthenticated, NotFoundError
from ..core.security import login_session, logout_session
from ..models.enums import UserRole
from ..models.user import User as UserModel
from ..schemas.user_schemas import LoginRequest, RegisterRequest, User
from ..services.user_service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
async def register(
    request: Request,
    body: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """Create an account and log it in"""
    service = UserService(db)
    user = await service.create_user(body.model_dump())
    login_session(request, user.id)
    return user


@router.post("/login", response_model=User)
async def login(
    request: Request,
    body: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    service = UserService(db)
    user = await service.authenticate(body.username, body.password)
    if not user:
        logger.info(f"Failed login for {body.username}")
        raise NotAuthenticated("Invalid username or password")
    login_session(request, user.id)
    return user


@router.post("/logout")
async def logout(request: Request):
    logout_session(request)
    return {"message": "Logged out"}


@router.get("/user", response_model=User)
async def current_user(current_user: UserModel = Depends(get_current_user)):
    return current_user


@router.post("/become-admin", response_model=User)
async def become_admin(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Promote the caller to admin; the same session is instructor-authorized from now on"""
    service = UserService(db)
    user = await service.set_role(current_user.id, UserRole.ADMIN)
    if not user:
        raise NotFoundError("User", current_user.id)
    logger.info(f"User {user.username} promoted to admin")
    return user
