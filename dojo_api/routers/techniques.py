# dojo_api/routers/techniques.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import get_current_user, require_instructor
from ..core.exceptions import NotFoundError
from ..models.enums import BeltRank
from ..schemas.technique_schemas import Technique, TechniqueCreate, TechniqueUpdate
from ..services.technique_service import TechniqueService

router = APIRouter(prefix="/api/techniques", tags=["techniques"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[Technique])
async def get_techniques(
    category: Optional[str] = None,
    belt_level: Optional[BeltRank] = Query(default=None, alias="beltLevel"),
    db: AsyncSession = Depends(get_db)
):
    service = TechniqueService(db)
    return await service.get_techniques(category=category, belt_level=belt_level)


@router.get("/category/{category}", response_model=List[Technique])
async def get_techniques_by_category(category: str, db: AsyncSession = Depends(get_db)):
    service = TechniqueService(db)
    return await service.get_techniques(category=category)


@router.get("/belt/{belt_level}", response_model=List[Technique])
async def get_techniques_by_belt(belt_level: BeltRank, db: AsyncSession = Depends(get_db)):
    service = TechniqueService(db)
    return await service.get_techniques(belt_level=belt_level)


@router.get("/{technique_id}", response_model=Technique)
async def get_technique(technique_id: int, db: AsyncSession = Depends(get_db)):
    service = TechniqueService(db)
    technique = await service.get(technique_id)
    if not technique:
        raise NotFoundError("Technique", technique_id)
    return technique


@router.post("", response_model=Technique, status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_instructor)])
async def create_technique(body: TechniqueCreate, db: AsyncSession = Depends(get_db)):
    service = TechniqueService(db)
    return await service.create(body.model_dump())


@router.put("/{technique_id}", response_model=Technique, dependencies=[Depends(require_instructor)])
async def update_technique(technique_id: int, body: TechniqueUpdate, db: AsyncSession = Depends(get_db)):
    service = TechniqueService(db)
    data, version = body.changes()
    technique = await service.update(technique_id, data, expected_version=version)
    if not technique:
        raise NotFoundError("Technique", technique_id)
    return technique


@router.delete("/{technique_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_instructor)])
async def delete_technique(technique_id: int, db: AsyncSession = Depends(get_db)):
    service = TechniqueService(db)
    if not await service.delete(technique_id):
        raise NotFoundError("Technique", technique_id)
