# dojo_api/routers/attendance.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import require_instructor
from ..core.exceptions import NotFoundError
from ..schemas.attendance_schemas import Attendance, AttendanceCreate, AttendanceUpdate
from ..services.attendance_service import AttendanceService

router = APIRouter(prefix="/api/attendance", tags=["attendance"], dependencies=[Depends(require_instructor)])


@router.post("", response_model=Attendance, status_code=status.HTTP_201_CREATED)
async def mark_attendance(body: AttendanceCreate, db: AsyncSession = Depends(get_db)):
    service = AttendanceService(db)
    return await service.mark_attendance(body.model_dump())


@router.put("/{attendance_id}", response_model=Attendance)
async def update_attendance(attendance_id: int, body: AttendanceUpdate, db: AsyncSession = Depends(get_db)):
    service = AttendanceService(db)
    data, version = body.changes()
    record = await service.update_attendance(attendance_id, data, expected_version=version)
    if not record:
        raise NotFoundError("Attendance record", attendance_id)
    return record


@router.delete("/{attendance_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_attendance(attendance_id: int, db: AsyncSession = Depends(get_db)):
    service = AttendanceService(db)
    if not await service.delete(attendance_id):
        raise NotFoundError("Attendance record", attendance_id)
