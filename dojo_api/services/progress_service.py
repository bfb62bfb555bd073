# dojo_api/services/progress_service.py
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import DuplicateError
from ..models.progress import ProgressNote, StudentProgress
from ..models.technique import Technique
from ..models.user import User
from .base_service import BaseService


class ProgressService(BaseService[StudentProgress]):
    resource_name = "Progress record"

    def __init__(self, db: AsyncSession):
        super().__init__(StudentProgress, db)

    async def get_by_student(self, student_id: int) -> Optional[StudentProgress]:
        stmt = select(self.model).where(self.model.student_id == student_id).order_by(self.model.id).limit(1)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create_progress(self, progress_data: Dict) -> StudentProgress:
        """One progress record per student; a second one is refused"""
        await self.ensure_exists(User, progress_data.get("student_id"), "studentId", "Student")
        if await self.get_by_student(progress_data["student_id"]):
            raise DuplicateError("Student already has a progress record. Use PUT to update.")
        return await self.create(progress_data)


class ProgressNoteService(BaseService[ProgressNote]):
    resource_name = "Progress note"

    def __init__(self, db: AsyncSession):
        super().__init__(ProgressNote, db)

    async def get_by_member(self, member_id: int) -> List[ProgressNote]:
        """Newest first"""
        return await self.get_multi(
            order_by=[self.model.date.desc(), self.model.id.desc()],
            member_id=member_id,
        )

    async def create_note(self, note_data: Dict, author_id: int) -> ProgressNote:
        await self.ensure_exists(User, note_data.get("member_id"), "memberId", "Member")
        await self.ensure_exists(Technique, note_data.get("technique_id"), "techniqueId", "Technique")
        return await self.create({**note_data, "author_id": author_id})

    async def update_note(self, note_id: int, note_data: Dict, expected_version: Optional[int] = None) -> Optional[ProgressNote]:
        if note_data.get("technique_id") is not None:
            await self.ensure_exists(Technique, note_data["technique_id"], "techniqueId", "Technique")
        return await self.update(note_id, note_data, expected_version=expected_version)
