# dojo_api/schemas/progress_schemas.py
import datetime as dt
from typing import Optional

from pydantic import Field

from ..models.enums import BeltRank, NoteType
from .base import RecordSchema, RequestSchema, UpdateSchema


class StudentProgressCreate(RequestSchema):
    student_id: int
    belt_rank: BeltRank
    stripes: int = Field(default=0, ge=0, le=4)
    last_promotion_date: Optional[dt.date] = None
    notes: Optional[str] = None


class StudentProgressUpdate(UpdateSchema):
    belt_rank: Optional[BeltRank] = None
    stripes: Optional[int] = Field(default=None, ge=0, le=4)
    last_promotion_date: Optional[dt.date] = None
    notes: Optional[str] = None


class StudentProgress(RecordSchema):
    student_id: int
    belt_rank: BeltRank
    stripes: int
    last_promotion_date: Optional[dt.date] = None
    notes: Optional[str] = None


class ProgressNoteCreate(RequestSchema):
    member_id: int
    date: dt.date
    note_type: NoteType = NoteType.GENERAL
    title: str = Field(..., min_length=3, max_length=200)
    content: str = Field(..., min_length=5)
    technique_id: Optional[int] = None


class ProgressNoteUpdate(UpdateSchema):
    date: Optional[dt.date] = None
    note_type: Optional[NoteType] = None
    title: Optional[str] = Field(default=None, min_length=3, max_length=200)
    content: Optional[str] = Field(default=None, min_length=5)
    technique_id: Optional[int] = None


class ProgressNote(RecordSchema):
    member_id: int
    author_id: Optional[int] = None
    date: dt.date
    note_type: NoteType
    title: str
    content: str
    technique_id: Optional[int] = None
