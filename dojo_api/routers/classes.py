# dojo_api/routers/classes.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import get_current_user, require_instructor
from ..core.exceptions import NotFoundError
from ..schemas.class_schemas import Class, ClassCreate, ClassSession, ClassSessionCreate, ClassUpdate
from ..services.class_service import ClassService
from ..services.session_service import SessionService

router = APIRouter(prefix="/api/classes", tags=["classes"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[Class])
async def get_classes(
    instructor_id: Optional[int] = Query(default=None, alias="instructorId"),
    db: AsyncSession = Depends(get_db)
):
    service = ClassService(db)
    return await service.get_classes(instructor_id=instructor_id)


@router.get("/{class_id}", response_model=Class)
async def get_class(class_id: int, db: AsyncSession = Depends(get_db)):
    service = ClassService(db)
    class_obj = await service.get(class_id)
    if not class_obj:
        raise NotFoundError("Class", class_id)
    return class_obj


@router.post("", response_model=Class, status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_instructor)])
async def create_class(body: ClassCreate, db: AsyncSession = Depends(get_db)):
    service = ClassService(db)
    return await service.create_class(body.model_dump())


@router.put("/{class_id}", response_model=Class, dependencies=[Depends(require_instructor)])
async def update_class(class_id: int, body: ClassUpdate, db: AsyncSession = Depends(get_db)):
    service = ClassService(db)
    data, version = body.changes()
    class_obj = await service.update_class(class_id, data, expected_version=version)
    if not class_obj:
        raise NotFoundError("Class", class_id)
    return class_obj


@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_instructor)])
async def delete_class(class_id: int, db: AsyncSession = Depends(get_db)):
    service = ClassService(db)
    if not await service.delete_class(class_id):
        raise NotFoundError("Class", class_id)


@router.get("/{class_id}/sessions", response_model=List[ClassSession])
async def get_class_sessions(class_id: int, db: AsyncSession = Depends(get_db)):
    service = SessionService(db)
    return await service.get_by_class(class_id)


@router.post(
    "/{class_id}/sessions",
    response_model=ClassSession,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_instructor)],
)
async def create_class_session(class_id: int, body: ClassSessionCreate, db: AsyncSession = Depends(get_db)):
    service = SessionService(db)
    class_obj = await ClassService(db).get(class_id)
    if not class_obj:
        raise NotFoundError("Class", class_id)
    return await service.create_session({**body.model_dump(), "class_id": class_id})
