# dojo_api/schemas/attendance_schemas.py
from typing import Optional

from ..models.enums import AttendanceStatus
from .base import RecordSchema, RequestSchema, UpdateSchema


class AttendanceCreate(RequestSchema):
    session_id: int
    student_id: int
    status: AttendanceStatus
    notes: Optional[str] = None


class AttendanceUpdate(UpdateSchema):
    session_id: Optional[int] = None
    student_id: Optional[int] = None
    status: Optional[AttendanceStatus] = None
    notes: Optional[str] = None


class Attendance(RecordSchema):
    session_id: int
    student_id: int
    status: AttendanceStatus
    notes: Optional[str] = None
