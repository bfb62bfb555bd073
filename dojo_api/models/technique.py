# dojo_api/models/technique.py
from sqlalchemy import Column, String, Text

from .base import Base
from .enums import BeltRank, enum_column


class Technique(Base):
    __tablename__ = "techniques"

    name = Column(String(200), nullable=False)
    description = Column(Text)
    category = Column(String(50), nullable=False, index=True)  # guard, pass, submission, ...
    belt_level = Column(enum_column(BeltRank, "technique_belt_level"), index=True)  # minimum belt
