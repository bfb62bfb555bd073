# dojo_api/services/attendance_service.py
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.attendance import Attendance
from ..models.class_model import ClassSession
from ..models.user import User
from .base_service import BaseService


class AttendanceService(BaseService[Attendance]):
    resource_name = "Attendance record"

    def __init__(self, db: AsyncSession):
        super().__init__(Attendance, db)

    async def get_by_session(self, session_id: int) -> List[Attendance]:
        """Attendance records for one session"""
        return await self.get_multi(session_id=session_id)

    async def get_by_student(self, student_id: int) -> List[Attendance]:
        """Attendance records for one student"""
        return await self.get_multi(student_id=student_id)

    async def mark_attendance(self, attendance_data: Dict) -> Attendance:
        await self.ensure_exists(ClassSession, attendance_data.get("session_id"), "sessionId", "Session")
        await self.ensure_exists(User, attendance_data.get("student_id"), "studentId", "Student")
        return await self.create(attendance_data)

    async def update_attendance(self, attendance_id: int, attendance_data: Dict, expected_version: Optional[int] = None) -> Optional[Attendance]:
        if "session_id" in attendance_data:
            await self.ensure_exists(ClassSession, attendance_data["session_id"], "sessionId", "Session")
        if "student_id" in attendance_data:
            await self.ensure_exists(User, attendance_data["student_id"], "studentId", "Student")
        return await self.update(attendance_id, attendance_data, expected_version=expected_version)
