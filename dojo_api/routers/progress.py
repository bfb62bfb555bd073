# dojo_api/routers/progress.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import get_current_user, require_instructor
from ..core.exceptions import NotFoundError, PermissionDenied
from ..models.user import User
from ..schemas.progress_schemas import (
    ProgressNote,
    ProgressNoteCreate,
    ProgressNoteUpdate,
    StudentProgress,
    StudentProgressCreate,
    StudentProgressUpdate,
)
from ..services.progress_service import ProgressNoteService, ProgressService

router = APIRouter(prefix="/api", tags=["progress"], dependencies=[Depends(get_current_user)])


@router.get("/students/{student_id}/progress", response_model=StudentProgress)
async def get_student_progress(
    student_id: int,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Belt record; students may only read their own"""
    if current_user.id != student_id and not current_user.is_instructor:
        raise PermissionDenied("Forbidden. You can only view your own progress.")

    service = ProgressService(db)
    progress = await service.get_by_student(student_id)
    if not progress:
        raise NotFoundError("Progress record for student", student_id)
    return progress


@router.post("/progress", response_model=StudentProgress, status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_instructor)])
async def create_student_progress(body: StudentProgressCreate, db: AsyncSession = Depends(get_db)):
    service = ProgressService(db)
    return await service.create_progress(body.model_dump())


@router.put("/progress/{progress_id}", response_model=StudentProgress, dependencies=[Depends(require_instructor)])
async def update_student_progress(progress_id: int, body: StudentProgressUpdate, db: AsyncSession = Depends(get_db)):
    service = ProgressService(db)
    data, version = body.changes()
    progress = await service.update(progress_id, data, expected_version=version)
    if not progress:
        raise NotFoundError("Progress record", progress_id)
    return progress


@router.post("/progress-notes", response_model=ProgressNote, status_code=status.HTTP_201_CREATED)
async def create_progress_note(
    body: ProgressNoteCreate,
    current_user: User = Depends(require_instructor),
    db: AsyncSession = Depends(get_db)
):
    service = ProgressNoteService(db)
    return await service.create_note(body.model_dump(), author_id=current_user.id)


@router.put("/progress-notes/{note_id}", response_model=ProgressNote, dependencies=[Depends(require_instructor)])
async def update_progress_note(note_id: int, body: ProgressNoteUpdate, db: AsyncSession = Depends(get_db)):
    service = ProgressNoteService(db)
    data, version = body.changes()
    note = await service.update_note(note_id, data, expected_version=version)
    if not note:
        raise NotFoundError("Progress note", note_id)
    return note


@router.delete("/progress-notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_instructor)])
async def delete_progress_note(note_id: int, db: AsyncSession = Depends(get_db)):
    service = ProgressNoteService(db)
    if not await service.delete(note_id):
        raise NotFoundError("Progress note", note_id)
