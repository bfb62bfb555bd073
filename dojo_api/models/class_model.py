# dojo_api/models/class_model.py
from sqlalchemy import Column, String, Integer, ForeignKey, Text, Date
from sqlalchemy.orm import relationship

from .base import Base
from .enums import ClassLevel, ClassType, enum_column


class ClassModel(Base):
    """Reusable class template; sessions are its scheduled occurrences"""
    __tablename__ = "classes"

    # Foreign Keys
    instructor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Class Information
    title = Column(String(200), nullable=False)
    description = Column(Text)
    level = Column(enum_column(ClassLevel, "class_level"), nullable=False)
    type = Column(enum_column(ClassType, "class_type"), nullable=False)
    max_capacity = Column(Integer)

    # Relationships
    instructor = relationship("User", back_populates="classes_taught")
    sessions = relationship("ClassSession", back_populates="class_ref", cascade="all, delete-orphan", passive_deletes=True)


class ClassSession(Base):
    __tablename__ = "class_sessions"

    class_id = Column(Integer, ForeignKey("classes.id", ondelete="CASCADE"), nullable=False, index=True)

    date = Column(Date, nullable=False, index=True)
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)    # HH:MM
    notes = Column(Text)

    # Relationships
    class_ref = relationship("ClassModel", back_populates="sessions")
    attendances = relationship("Attendance", back_populates="session", cascade="all, delete-orphan", passive_deletes=True)
