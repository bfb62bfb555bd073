# dojo_api/services/event_service.py
from typing import Dict, List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import ValidationException
from ..models.event import Event
from ..models.user import User
from ..schemas.base import to_minutes
from .base_service import BaseService


class EventService(BaseService[Event]):
    resource_name = "Event"

    def __init__(self, db: AsyncSession):
        super().__init__(Event, db)

    async def get_events(self) -> List[Event]:
        return await self.get_multi(order_by=[self.model.date, self.model.start_time])

    async def create_event(self, event_data: Dict) -> Event:
        await self.ensure_exists(User, event_data.get("instructor_id"), "instructorId", "Instructor")
        return await self.create(event_data)

    async def update_event(self, event_id: int, event_data: Dict, expected_version: Optional[int] = None) -> Optional[Event]:
        if event_data.get("instructor_id") is not None:
            await self.ensure_exists(User, event_data["instructor_id"], "instructorId", "Instructor")

        if "start_time" in event_data or "end_time" in event_data:
            current = await self.get(event_id)
            if current is None:
                return None
            start = event_data.get("start_time") or current.start_time
            end = event_data.get("end_time") or current.end_time
            if to_minutes(start) >= to_minutes(end):
                raise ValidationException(
                    "endTime must be later than startTime",
                    errors=[{"field": "endTime", "message": "endTime must be later than startTime"}],
                )

        return await self.update(event_id, event_data, expected_version=expected_version)
