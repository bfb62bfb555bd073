# dojo_api/models/attendance.py
from sqlalchemy import Column, Integer, ForeignKey, Text
from sqlalchemy.orm import relationship

from .base import Base
from .enums import AttendanceStatus, enum_column


class Attendance(Base):
    __tablename__ = "attendance"

    # Foreign Keys
    session_id = Column(Integer, ForeignKey("class_sessions.id", ondelete="CASCADE"), nullable=False, index=True)
    student_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # One record per (session, student) is expected but not constrained
    status = Column(enum_column(AttendanceStatus, "attendance_status"), nullable=False)
    notes = Column(Text)

    # Relationships
    session = relationship("ClassSession", back_populates="attendances")
    student = relationship("User", back_populates="attendances")
