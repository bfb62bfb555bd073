# dojo_api/models/__init__.py
"""Import all models here, if needed for Alembic migration."""
from .base import Base

from .user import User
from .class_model import ClassModel, ClassSession
from .attendance import Attendance
from .progress import StudentProgress, ProgressNote
from .technique import Technique
from .event import Event

__all__ = [
    "Base",
    "User",
    "ClassModel",
    "ClassSession",
    "Attendance",
    "StudentProgress",
    "ProgressNote",
    "Technique",
    "Event",
]
