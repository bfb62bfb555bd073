# dojo_api/services/base_service.py
"""Base service with common CRUD operations."""
from typing import Type, Any, Dict, Optional, List, TypeVar, Generic

from pydantic.alias_generators import to_camel
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import StaleWriteError, ValidationException

# Define generic type
T = TypeVar('T')


class BaseService(Generic[T]):
    resource_name = "Record"

    def __init__(self, model: Type[T], db: AsyncSession):
        self.model = model
        self.db = db

    async def get(self, id: Any) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_multi(self, order_by=None, **filters) -> List[T]:
        """Full matching set; equality filters on mapped columns, None values ignored"""
        stmt = select(self.model)

        for key, value in filters.items():
            if hasattr(self.model, key) and value is not None:
                stmt = stmt.where(getattr(self.model, key) == value)

        stmt = stmt.order_by(*(order_by if order_by is not None else [self.model.id]))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, obj_in: Dict) -> T:
        obj = self.model(**obj_in)
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, id: Any, obj_in: Dict, expected_version: Optional[int] = None) -> Optional[T]:
        """Single UPDATE statement; with expected_version the write only lands on that version"""
        if not obj_in:
            raise ValidationException("No update data provided.")

        columns = self.model.__table__.columns
        nulls = [key for key, value in obj_in.items() if value is None and key in columns and not columns[key].nullable]
        if nulls:
            raise ValidationException(
                "Required fields cannot be cleared",
                errors=[{"field": to_camel(key), "message": "Field cannot be null"} for key in nulls],
            )

        stmt = update(self.model).where(self.model.id == id)
        if expected_version is not None:
            stmt = stmt.where(self.model.version == expected_version)
        stmt = stmt.values(**obj_in, version=self.model.version + 1).execution_options(
            synchronize_session=False
        )

        result = await self.db.execute(stmt)
        if result.rowcount == 0:
            await self.db.rollback()
            current = await self.refetch(id)
            if current is None:
                return None
            raise StaleWriteError(self.resource_name, id, expected_version, current.version)

        await self.db.commit()
        return await self.refetch(id)

    async def refetch(self, id: Any) -> Optional[T]:
        """Reload a row, overwriting any stale copy held by the session"""
        stmt = select(self.model).where(self.model.id == id).execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def delete(self, id: Any) -> bool:
        """Permanently delete record from database"""
        obj = await self.get(id)
        if not obj:
            return False
        await self.db.delete(obj)
        await self.db.commit()
        return True

    async def ensure_exists(self, model: Type, id: Any, field: str, label: str):
        """Reject a body whose foreign key points nowhere"""
        if id is None:
            return None
        obj = await self.db.get(model, id)
        if obj is None:
            raise ValidationException(
                f"{label} {id} does not exist",
                errors=[{"field": field, "message": f"{label} {id} does not exist"}],
            )
        return obj
