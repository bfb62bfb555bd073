# dojo_api/schemas/report_schemas.py
from typing import Dict

from .base import DojoSchema


class AttendanceTotals(DojoSchema):
    total: int
    by_status: Dict[str, int]
    attendance_rate: float


class ReportSummary(DojoSchema):
    members_by_role: Dict[str, int]
    belt_distribution: Dict[str, int]
    total_classes: int
    total_sessions: int
    upcoming_events: int
    attendance: AttendanceTotals
