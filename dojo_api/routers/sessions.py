# dojo_api/routers/sessions.py
from datetime import date
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import get_current_user, require_instructor
from ..core.exceptions import NotFoundError, ValidationException
from ..schemas.attendance_schemas import Attendance
from ..schemas.class_schemas import (
    CalendarSession,
    ClassSession,
    RecurringSessionCreate,
    SessionCreate,
    SessionUpdate,
)
from ..services.attendance_service import AttendanceService
from ..services.session_service import SessionService

router = APIRouter(prefix="/api/sessions", tags=["sessions"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=Union[List[CalendarSession], List[ClassSession]])
async def get_sessions(
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    db: AsyncSession = Depends(get_db)
):
    """Calendar view of every session, or the plain sessions in a date range.

    startDate and endDate go together; sending only one of them is a 400.
    """
    service = SessionService(db)

    if (start_date is None) != (end_date is None):
        missing = "endDate" if end_date is None else "startDate"
        raise ValidationException(
            "startDate and endDate must be given together",
            errors=[{"field": missing, "message": "Required when filtering by date range"}],
        )

    if start_date and end_date:
        if end_date < start_date:
            raise ValidationException(
                "endDate must not be before startDate",
                errors=[{"field": "endDate", "message": "endDate must not be before startDate"}],
            )
        sessions = await service.get_by_date_range(start_date, end_date)
        return [ClassSession.model_validate(s) for s in sessions]

    calendar = await service.get_calendar()
    return [
        CalendarSession(
            **ClassSession.model_validate(entry["session"]).model_dump(),
            class_title=entry["class_title"],
            class_type=entry["class_type"],
            class_level=entry["class_level"],
        )
        for entry in calendar
    ]


@router.get("/{session_id}", response_model=ClassSession)
async def get_session(session_id: int, db: AsyncSession = Depends(get_db)):
    service = SessionService(db)
    session = await service.get(session_id)
    if not session:
        raise NotFoundError("Session", session_id)
    return session


@router.post("", response_model=ClassSession, status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_instructor)])
async def create_session(body: SessionCreate, db: AsyncSession = Depends(get_db)):
    service = SessionService(db)
    return await service.create_session(body.model_dump())


@router.post(
    "/recurring",
    response_model=List[ClassSession],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_instructor)],
)
async def create_recurring_sessions(body: RecurringSessionCreate, db: AsyncSession = Depends(get_db)):
    """Materialize one session per matching weekday up to recurrenceEndDate"""
    service = SessionService(db)
    session_data = body.model_dump(exclude={"days_of_week", "recurrence_end_date"})
    return await service.create_recurring(session_data, body.days_of_week, body.recurrence_end_date)


@router.put("/{session_id}", response_model=ClassSession, dependencies=[Depends(require_instructor)])
async def update_session(session_id: int, body: SessionUpdate, db: AsyncSession = Depends(get_db)):
    service = SessionService(db)
    data, version = body.changes()
    session = await service.update_session(session_id, data, expected_version=version)
    if not session:
        raise NotFoundError("Session", session_id)
    return session


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_instructor)])
async def delete_session(session_id: int, db: AsyncSession = Depends(get_db)):
    service = SessionService(db)
    if not await service.delete_session(session_id):
        raise NotFoundError("Session", session_id)


@router.get("/{session_id}/attendance", response_model=List[Attendance], dependencies=[Depends(require_instructor)])
async def get_session_attendance(session_id: int, db: AsyncSession = Depends(get_db)):
    service = AttendanceService(db)
    return await service.get_by_session(session_id)
