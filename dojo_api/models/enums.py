# dojo_api/models/enums.py
import enum

from sqlalchemy import Enum


class UserRole(str, enum.Enum):
    STUDENT = "student"
    INSTRUCTOR = "instructor"
    ADMIN = "admin"


class ClassLevel(str, enum.Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ALL_LEVELS = "all-levels"


class ClassType(str, enum.Enum):
    GI = "gi"
    NO_GI = "no-gi"
    OPEN_MAT = "open-mat"


class AttendanceStatus(str, enum.Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class BeltRank(str, enum.Enum):
    WHITE = "white"
    BLUE = "blue"
    PURPLE = "purple"
    BROWN = "brown"
    BLACK = "black"


class NoteType(str, enum.Enum):
    GENERAL = "general"
    TECHNIQUE = "technique"
    PROMOTION = "promotion"


class EventType(str, enum.Enum):
    SEMINAR = "seminar"
    OPEN_MAT = "open-mat"
    TOURNAMENT = "tournament"
    PROMOTION = "promotion"
    SOCIAL = "social"
    OTHER = "other"


def enum_column(enum_cls: type, name: str) -> Enum:
    """Store the lowercase value, not the member name, as a plain VARCHAR"""
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        length=20,
        values_callable=lambda members: [member.value for member in members],
    )
