# dojo_api/routers/members.py
"""Member management plus the per-member attendance and progress-note views."""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import Settings
from ..core.database import get_db
from ..core.deps import get_app_settings, get_current_user, require_instructor
from ..core.exceptions import NotFoundError
from ..schemas.attendance_schemas import Attendance
from ..schemas.progress_schemas import ProgressNote
from ..schemas.user_schemas import MemberCreate, MemberUpdate, User
from ..services.attendance_service import AttendanceService
from ..services.progress_service import ProgressNoteService
from ..services.user_service import UserService

router = APIRouter(prefix="/api/members", tags=["members"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[User])
async def get_members(db: AsyncSession = Depends(get_db)):
    service = UserService(db)
    return await service.get_multi()


@router.get("/{member_id}", response_model=User)
async def get_member(member_id: int, db: AsyncSession = Depends(get_db)):
    service = UserService(db)
    member = await service.get(member_id)
    if not member:
        raise NotFoundError("Member", member_id)
    return member


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_instructor)])
async def create_member(
    body: MemberCreate,
    settings: Settings = Depends(get_app_settings),
    db: AsyncSession = Depends(get_db)
):
    """Add a member; without a password the configured default is used"""
    service = UserService(db)
    member_data = body.model_dump(exclude={"belt_rank"})
    if not member_data.get("password"):
        member_data["password"] = settings.default_member_password
    return await service.create_user(member_data, belt_rank=body.belt_rank)


@router.put("/{member_id}", response_model=User, dependencies=[Depends(require_instructor)])
async def update_member(member_id: int, body: MemberUpdate, db: AsyncSession = Depends(get_db)):
    service = UserService(db)
    data, version = body.changes()
    member = await service.update_user(member_id, data, expected_version=version)
    if not member:
        raise NotFoundError("Member", member_id)
    return member


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_instructor)])
async def delete_member(member_id: int, db: AsyncSession = Depends(get_db)):
    service = UserService(db)
    if not await service.delete_member(member_id):
        raise NotFoundError("Member", member_id)


@router.get("/{member_id}/attendance", response_model=List[Attendance])
async def get_member_attendance(member_id: int, db: AsyncSession = Depends(get_db)):
    service = AttendanceService(db)
    return await service.get_by_student(member_id)


@router.get("/{member_id}/progress", response_model=List[ProgressNote])
async def get_member_progress_notes(member_id: int, db: AsyncSession = Depends(get_db)):
    """Progress notes, newest first"""
    service = ProgressNoteService(db)
    return await service.get_by_member(member_id)
