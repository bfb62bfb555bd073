# dojo_api/services/class_service.py
import logging
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.class_model import ClassModel
from ..models.user import User
from .base_service import BaseService

logger = logging.getLogger(__name__)


class ClassService(BaseService[ClassModel]):
    resource_name = "Class"

    def __init__(self, db: AsyncSession):
        super().__init__(ClassModel, db)

    async def get_classes(self, instructor_id: Optional[int] = None) -> List[ClassModel]:
        """All class templates, optionally those of one instructor"""
        return await self.get_multi(instructor_id=instructor_id)

    async def create_class(self, class_data: Dict) -> ClassModel:
        await self.ensure_exists(User, class_data.get("instructor_id"), "instructorId", "Instructor")
        return await self.create(class_data)

    async def update_class(self, class_id: int, class_data: Dict, expected_version: Optional[int] = None) -> Optional[ClassModel]:
        if "instructor_id" in class_data:
            await self.ensure_exists(User, class_data["instructor_id"], "instructorId", "Instructor")
        return await self.update(class_id, class_data, expected_version=expected_version)

    async def delete_class(self, class_id: int) -> bool:
        """Sessions and their attendance are removed with the class"""
        deleted = await self.delete(class_id)
        if deleted:
            logger.info(f"Deleted class {class_id} and its sessions")
        return deleted
