# dojo_api/schemas/base.py
"""Shared Pydantic building blocks: camelCase wire names, strict request bodies."""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"


def pad_time(value: str) -> str:
    """9:05 -> 09:05, so stored times sort as strings"""
    hours, minutes = value.split(":")
    return f"{int(hours):02d}:{minutes}"


TimeOfDay = Annotated[
    str,
    Field(pattern=TIME_PATTERN, description="Time in HH:MM format"),
    AfterValidator(pad_time),
]


def to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


class DojoSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestSchema(DojoSchema):
    """Request body; unknown fields are rejected"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


class UpdateSchema(RequestSchema):
    """Partial update body with an optional optimistic-concurrency precondition"""
    version: Optional[int] = Field(default=None, ge=1, description="Version the client last read")

    def changes(self):
        """(fields the client sent, expected version)"""
        data = self.model_dump(exclude_unset=True)
        return data, data.pop("version", None)


class RecordSchema(DojoSchema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    version: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
