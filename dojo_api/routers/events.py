# dojo_api/routers/events.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.database import get_db
from ..core.deps import get_current_user, require_instructor
from ..core.exceptions import NotFoundError
from ..schemas.event_schemas import Event, EventCreate, EventUpdate
from ..services.event_service import EventService

router = APIRouter(prefix="/api/events", tags=["events"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[Event])
async def get_events(db: AsyncSession = Depends(get_db)):
    service = EventService(db)
    return await service.get_events()


@router.get("/{event_id}", response_model=Event)
async def get_event(event_id: int, db: AsyncSession = Depends(get_db)):
    service = EventService(db)
    event = await service.get(event_id)
    if not event:
        raise NotFoundError("Event", event_id)
    return event


@router.post("", response_model=Event, status_code=status.HTTP_201_CREATED, dependencies=[Depends(require_instructor)])
async def create_event(body: EventCreate, db: AsyncSession = Depends(get_db)):
    service = EventService(db)
    return await service.create_event(body.model_dump())


@router.put("/{event_id}", response_model=Event, dependencies=[Depends(require_instructor)])
async def update_event(event_id: int, body: EventUpdate, db: AsyncSession = Depends(get_db)):
    service = EventService(db)
    data, version = body.changes()
    event = await service.update_event(event_id, data, expected_version=version)
    if not event:
        raise NotFoundError("Event", event_id)
    return event


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT, dependencies=[Depends(require_instructor)])
async def delete_event(event_id: int, db: AsyncSession = Depends(get_db)):
    service = EventService(db)
    if not await service.delete(event_id):
        raise NotFoundError("Event", event_id)
