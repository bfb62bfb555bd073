# dojo_api/models/progress.py
from sqlalchemy import Column, String, Integer, ForeignKey, Text, Date
from sqlalchemy.orm import relationship

from .base import Base
from .enums import BeltRank, NoteType, enum_column


class StudentProgress(Base):
    """Belt rank record; the API keeps one per student"""
    __tablename__ = "student_progress"

    student_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    belt_rank = Column(enum_column(BeltRank, "belt_rank"), nullable=False)
    stripes = Column(Integer, default=0, nullable=False)
    last_promotion_date = Column(Date)
    notes = Column(Text)

    student = relationship("User", back_populates="progress")


class ProgressNote(Base):
    __tablename__ = "progress_notes"

    member_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    author_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)
    technique_id = Column(Integer, ForeignKey("techniques.id", ondelete="SET NULL"))

    date = Column(Date, nullable=False, index=True)
    note_type = Column(enum_column(NoteType, "note_type"), default=NoteType.GENERAL, nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)

    member = relationship("User", back_populates="progress_notes", foreign_keys=[member_id])
    author = relationship("User", foreign_keys=[author_id])
    technique = relationship("Technique")
