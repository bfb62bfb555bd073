# dojo_api/services/session_service.py
"""Scheduled class sessions: calendar reads and recurrence materialization."""
import logging
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import ValidationException
from ..models.class_model import ClassModel, ClassSession
from ..schemas.base import to_minutes
from .base_service import BaseService

logger = logging.getLogger(__name__)

MAX_RECURRING_SESSIONS = 366


def js_weekday(day: date) -> int:
    """0 = Sunday ... 6 = Saturday"""
    return (day.weekday() + 1) % 7


def count_recurring_dates(start: date, end: date, days_of_week: List[int]) -> int:
    """Size of recurring_dates(start, end, days_of_week) without walking the range"""
    if end < start:
        return 0
    wanted = set(days_of_week)
    span = (end - start).days + 1
    full_weeks, remainder = divmod(span, 7)
    first = js_weekday(start)
    tail = sum(1 for offset in range(remainder) if (first + offset) % 7 in wanted)
    return full_weeks * len(wanted) + tail


def recurring_dates(start: date, end: date, days_of_week: List[int]) -> List[date]:
    """Every day in [start, end] whose weekday is listed"""
    wanted = set(days_of_week)
    days = (start + timedelta(days=offset) for offset in range((end - start).days + 1))
    return [day for day in days if js_weekday(day) in wanted]


class SessionService(BaseService[ClassSession]):
    resource_name = "Session"

    def __init__(self, db: AsyncSession):
        super().__init__(ClassSession, db)

    def _order(self):
        return [self.model.date, self.model.start_time, self.model.id]

    async def get_by_class(self, class_id: int) -> List[ClassSession]:
        return await self.get_multi(order_by=self._order(), class_id=class_id)

    async def get_by_date_range(self, start_date: date, end_date: date) -> List[ClassSession]:
        """Sessions whose date falls in the inclusive range"""
        stmt = (
            select(self.model)
            .where(self.model.date >= start_date, self.model.date <= end_date)
            .order_by(*self._order())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_calendar(self) -> List[Dict[str, Any]]:
        """Every session with its class title/type/level read at call time"""
        stmt = (
            select(self.model, ClassModel)
            .outerjoin(ClassModel, ClassModel.id == self.model.class_id)
            .order_by(*self._order())
        )
        result = await self.db.execute(stmt)

        calendar = []
        for session, class_obj in result.all():
            calendar.append({
                "session": session,
                "class_title": class_obj.title if class_obj else "Unknown Class",
                "class_type": class_obj.type.value if class_obj else "Unknown Type",
                "class_level": class_obj.level.value if class_obj else "Unknown Level",
            })
        return calendar

    async def create_session(self, session_data: Dict) -> ClassSession:
        await self.ensure_exists(ClassModel, session_data.get("class_id"), "classId", "Class")
        return await self.create(session_data)

    async def create_recurring(self, session_data: Dict, days_of_week: List[int], recurrence_end_date: date) -> List[ClassSession]:
        """One row per matching weekday between date and recurrence_end_date, in one transaction"""
        await self.ensure_exists(ClassModel, session_data.get("class_id"), "classId", "Class")

        count = count_recurring_dates(session_data["date"], recurrence_end_date, days_of_week)
        if not count:
            raise ValidationException(
                "No dates match the recurrence",
                errors=[{"field": "daysOfWeek", "message": "No day in the range falls on the selected weekdays"}],
            )
        if count > MAX_RECURRING_SESSIONS:
            raise ValidationException(
                f"Recurrence would create {count} sessions; the limit is {MAX_RECURRING_SESSIONS}",
                errors=[{"field": "recurrenceEndDate", "message": "Recurrence range is too long"}],
            )

        dates = recurring_dates(session_data["date"], recurrence_end_date, days_of_week)
        sessions = [self.model(**{**session_data, "date": day}) for day in dates]
        self.db.add_all(sessions)
        await self.db.commit()
        for session in sessions:
            await self.db.refresh(session)

        logger.info(f"Materialized {len(sessions)} sessions for class {session_data['class_id']}")
        return sessions

    async def update_session(self, session_id: int, session_data: Dict, expected_version: Optional[int] = None) -> Optional[ClassSession]:
        if "class_id" in session_data:
            await self.ensure_exists(ClassModel, session_data["class_id"], "classId", "Class")

        if "start_time" in session_data or "end_time" in session_data:
            current = await self.get(session_id)
            if current is None:
                return None
            start = session_data.get("start_time") or current.start_time
            end = session_data.get("end_time") or current.end_time
            if to_minutes(start) >= to_minutes(end):
                raise ValidationException(
                    "endTime must be later than startTime",
                    errors=[{"field": "endTime", "message": "endTime must be later than startTime"}],
                )

        return await self.update(session_id, session_data, expected_version=expected_version)

    async def delete_session(self, session_id: int) -> bool:
        """Attendance for the session is removed with it"""
        return await self.delete(session_id)
