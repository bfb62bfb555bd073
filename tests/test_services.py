# tests/test_services.py
"""Storage-level checks that run the async services directly."""
import asyncio
from datetime import date

import pytest

from dojo_api.core.database import build_engine, build_session_factory, create_tables
from dojo_api.core.exceptions import DependentRecordsError, DuplicateError, StaleWriteError, ValidationException
from dojo_api.models.enums import AttendanceStatus, ClassLevel, ClassType, UserRole
from dojo_api.services.attendance_service import AttendanceService
from dojo_api.services.class_service import ClassService
from dojo_api.services.report_service import attendance_rate
from dojo_api.services.session_service import SessionService, count_recurring_dates, js_weekday, recurring_dates
from dojo_api.services.user_service import UserService


def run(settings, scenario):
    """Run one scenario against a fresh schema on its own event loop"""
    async def main():
        engine = build_engine(settings)
        try:
            await create_tables(engine)
            session_factory = build_session_factory(engine)
            async with session_factory() as db:
                return await scenario(db)
        finally:
            await engine.dispose()

    return asyncio.run(main())


async def _instructor(db, username="sensei"):
    return await UserService(db).create_user(
        {"username": username, "password": "secret123", "role": UserRole.INSTRUCTOR}
    )


def test_js_weekday():
    # 2026-01-04 is a Sunday
    assert js_weekday(date(2026, 1, 4)) == 0
    assert js_weekday(date(2026, 1, 10)) == 6


def test_recurring_dates():
    dates = recurring_dates(date(2026, 1, 1), date(2026, 1, 31), [6])
    assert dates == [date(2026, 1, 3), date(2026, 1, 10), date(2026, 1, 17), date(2026, 1, 24), date(2026, 1, 31)]
    assert recurring_dates(date(2026, 1, 5), date(2026, 1, 5), [1]) == [date(2026, 1, 5)]


def test_recurring_count_matches_materialized_dates():
    cases = [
        (date(2026, 1, 1), date(2026, 1, 31), [6]),
        (date(2026, 1, 4), date(2026, 1, 17), [1, 3]),
        (date(2026, 1, 5), date(2026, 1, 6), [0]),
        (date(2026, 2, 27), date(2027, 3, 3), [0, 2, 5]),
        (date(9999, 12, 20), date(9999, 12, 31), [0, 1, 2, 3, 4, 5, 6]),
    ]
    for start, end, days in cases:
        assert count_recurring_dates(start, end, days) == len(recurring_dates(start, end, days))

    assert recurring_dates(date(9999, 12, 31), date(9999, 12, 31), [0, 1, 2, 3, 4, 5, 6]) == [date(9999, 12, 31)]
    assert count_recurring_dates(date(1, 1, 1), date(9999, 12, 31), [3]) > 366
    assert count_recurring_dates(date(2026, 2, 1), date(2026, 1, 1), [0]) == 0


def test_attendance_rate():
    assert attendance_rate({}) == 0.0
    assert attendance_rate({"present": 2, "late": 1, "absent": 1}) == 75.0


def test_user_lookup_by_id_and_username(settings):
    async def scenario(db):
        service = UserService(db)
        created = await service.create_user({"username": "zoe", "password": "secret123"})
        assert created.password != "secret123"

        by_id = await service.get(created.id)
        by_name = await service.get_by_username("zoe")
        assert by_id.id == by_name.id == created.id
        assert by_id.role == UserRole.STUDENT

        with pytest.raises(DuplicateError):
            await service.create_user({"username": "zoe", "password": "other123"})

        assert await service.authenticate("zoe", "secret123") is not None
        assert await service.authenticate("zoe", "wrong") is None

    run(settings, scenario)


def test_stale_update_leaves_row_untouched(settings):
    async def scenario(db):
        instructor = await _instructor(db)
        service = ClassService(db)
        class_obj = await service.create_class({
            "title": "Kids Class", "instructor_id": instructor.id,
            "level": ClassLevel.BEGINNER, "type": ClassType.GI,
        })

        updated = await service.update_class(class_obj.id, {"title": "Kids Class A"}, expected_version=1)
        assert updated.version == 2

        with pytest.raises(StaleWriteError) as excinfo:
            await service.update_class(class_obj.id, {"title": "Kids Class B"}, expected_version=1)
        assert excinfo.value.current == 2

        current = await service.get(class_obj.id)
        assert current.title == "Kids Class A"

        assert await service.update_class(999, {"title": "Nobody"}) is None

    run(settings, scenario)


def test_recurring_materialization_is_atomic(settings):
    async def scenario(db):
        instructor = await _instructor(db)
        class_obj = await ClassService(db).create_class({
            "title": "Competition Team", "instructor_id": instructor.id,
            "level": ClassLevel.ADVANCED, "type": ClassType.NO_GI,
        })
        sessions = SessionService(db)
        base = {"class_id": class_obj.id, "date": date(2026, 1, 1), "start_time": "19:00", "end_time": "20:30"}

        with pytest.raises(ValidationException):
            await sessions.create_recurring(base, [0, 1, 2, 3, 4, 5, 6], date(2027, 6, 30))
        assert await sessions.get_by_class(class_obj.id) == []

        created = await sessions.create_recurring(base, [2, 4], date(2026, 1, 14))
        assert [s.date for s in created] == [date(2026, 1, 1), date(2026, 1, 6), date(2026, 1, 8), date(2026, 1, 13)]

        calendar = await sessions.get_calendar()
        assert {entry["class_title"] for entry in calendar} == {"Competition Team"}
        assert {entry["class_type"] for entry in calendar} == {"no-gi"}

    run(settings, scenario)


def test_member_delete_policy(settings):
    async def scenario(db):
        users = UserService(db)
        instructor = await _instructor(db)
        student = await users.create_user({"username": "yuki", "password": "secret123"})
        class_obj = await ClassService(db).create_class({
            "title": "Fundamentals", "instructor_id": instructor.id,
            "level": ClassLevel.BEGINNER, "type": ClassType.GI,
        })
        session = await SessionService(db).create_session({
            "class_id": class_obj.id, "date": date(2026, 1, 5), "start_time": "18:00", "end_time": "19:00",
        })
        attendance = AttendanceService(db)
        await attendance.mark_attendance({
            "session_id": session.id, "student_id": student.id, "status": AttendanceStatus.PRESENT,
        })

        with pytest.raises(DependentRecordsError):
            await users.delete_member(instructor.id)

        assert await users.delete_member(student.id) is True
        assert await attendance.get_by_session(session.id) == []
        assert await users.delete_member(student.id) is False

    run(settings, scenario)
