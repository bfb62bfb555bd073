# dojo_api/services/technique_service.py
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ..models.enums import BeltRank
from ..models.technique import Technique
from .base_service import BaseService


class TechniqueService(BaseService[Technique]):
    resource_name = "Technique"

    def __init__(self, db: AsyncSession):
        super().__init__(Technique, db)

    async def get_techniques(self, category: Optional[str] = None, belt_level: Optional[BeltRank] = None) -> List[Technique]:
        return await self.get_multi(
            order_by=[self.model.category, self.model.name],
            category=category,
            belt_level=belt_level,
        )
