# dojo_api/services/user_service.py
import logging
from typing import Dict, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import DependentRecordsError, DuplicateError
from ..core.security import get_password_hash, verify_password
from ..models.class_model import ClassModel
from ..models.enums import UserRole
from ..models.progress import StudentProgress
from ..models.user import User
from .base_service import BaseService

logger = logging.getLogger(__name__)


class UserService(BaseService[User]):
    resource_name = "User"

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(self.model).where(self.model.username == username)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def authenticate(self, username: str, password: str) -> Optional[User]:
        user = await self.get_by_username(username)
        if not user or not verify_password(password, user.password):
            return None
        return user

    async def create_user(self, user_data: Dict, belt_rank=None) -> User:
        """Hash the password and insert; duplicate usernames are rejected"""
        if await self.get_by_username(user_data["username"]):
            raise DuplicateError("Username already exists")

        user_data = dict(user_data)
        user_data["password"] = get_password_hash(user_data["password"])
        user = self.model(**user_data)
        self.db.add(user)
        try:
            await self.db.flush()
            if belt_rank is not None:
                self.db.add(StudentProgress(student_id=user.id, belt_rank=belt_rank, stripes=0))
            await self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration of the same name
            await self.db.rollback()
            raise DuplicateError("Username already exists")

        await self.db.refresh(user)
        logger.info(f"Created user {user.username} ({user.role.value})")
        return user

    async def update_user(self, user_id: int, user_data: Dict, expected_version: Optional[int] = None) -> Optional[User]:
        user_data = dict(user_data)
        if "username" in user_data:
            existing = await self.get_by_username(user_data["username"])
            if existing and existing.id != user_id:
                raise DuplicateError("Username already exists")
        if user_data.get("password"):
            user_data["password"] = get_password_hash(user_data["password"])
        return await self.update(user_id, user_data, expected_version=expected_version)

    async def set_role(self, user_id: int, role: UserRole) -> Optional[User]:
        return await self.update(user_id, {"role": role})

    async def delete_member(self, user_id: int) -> bool:
        """Attendance, progress and notes go with the member; instructors of a class cannot be deleted"""
        user = await self.get(user_id)
        if not user:
            return False

        stmt = select(func.count()).select_from(ClassModel).where(ClassModel.instructor_id == user_id)
        taught = (await self.db.execute(stmt)).scalar()
        if taught:
            raise DependentRecordsError(
                f"Member {user_id} instructs {taught} class(es); reassign or delete them first"
            )
        return await self.delete(user_id)
