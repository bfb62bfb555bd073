# dojo_api/schemas/technique_schemas.py
from typing import Optional

from pydantic import Field

from ..models.enums import BeltRank
from .base import RecordSchema, RequestSchema, UpdateSchema


class TechniqueCreate(RequestSchema):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=50)
    belt_level: Optional[BeltRank] = None


class TechniqueUpdate(UpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, min_length=1, max_length=50)
    belt_level: Optional[BeltRank] = None


class Technique(RecordSchema):
    name: str
    description: Optional[str] = None
    category: str
    belt_level: Optional[BeltRank] = None
