# dojo_api/services/report_service.py
"""Live dashboard counts."""
import logging
from datetime import date
from typing import Any, Dict

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.attendance import Attendance
from ..models.class_model import ClassModel, ClassSession
from ..models.enums import AttendanceStatus, BeltRank, UserRole
from ..models.event import Event
from ..models.progress import StudentProgress
from ..models.user import User

logger = logging.getLogger(__name__)


def attendance_rate(by_status: Dict[str, int]) -> float:
    """Present plus late over every record, as a percentage rounded to one decimal"""
    total = sum(by_status.values())
    if total == 0:
        return 0.0
    attended = by_status.get(AttendanceStatus.PRESENT.value, 0) + by_status.get(AttendanceStatus.LATE.value, 0)
    return round(attended * 100.0 / total, 1)


class ReportService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def _count(self, model) -> int:
        result = await self.db.execute(select(func.count()).select_from(model))
        return result.scalar_one()

    async def _distribution(self, column, enum_cls) -> Dict[str, int]:
        """Row count per enum value, zero-filled"""
        query = select(column, func.count().label('count')).where(column.isnot(None)).group_by(column)
        query_result = await self.db.execute(query)

        counts = {member.value: 0 for member in enum_cls}
        for value, count in query_result.all():
            key = value.value if isinstance(value, enum_cls) else str(value)
            counts[key] = count
        return counts

    async def get_summary(self, today: date = None) -> Dict[str, Any]:
        today = today or date.today()

        by_status = await self._distribution(Attendance.status, AttendanceStatus)
        upcoming = await self.db.execute(
            select(func.count()).select_from(Event).where(Event.date >= today)
        )

        summary = {
            "members_by_role": await self._distribution(User.role, UserRole),
            "belt_distribution": await self._distribution(StudentProgress.belt_rank, BeltRank),
            "total_classes": await self._count(ClassModel),
            "total_sessions": await self._count(ClassSession),
            "upcoming_events": upcoming.scalar_one(),
            "attendance": {
                "total": sum(by_status.values()),
                "by_status": by_status,
                "attendance_rate": attendance_rate(by_status),
            },
        }
        logger.debug(f"Report summary computed for {today}")
        return summary
