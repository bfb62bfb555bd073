# dojo_api/models/event.py
from sqlalchemy import Column, String, Integer, ForeignKey, Text, Date, Boolean
from sqlalchemy.orm import relationship

from .base import Base
from .enums import EventType, enum_column


class Event(Base):
    __tablename__ = "events"

    instructor_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), index=True)

    # Event Information
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    event_type = Column(enum_column(EventType, "event_type"), nullable=False)
    date = Column(Date, nullable=False, index=True)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    location = Column(String(200), nullable=False)

    # Registration
    max_attendees = Column(Integer)
    registration_required = Column(Boolean, default=False, nullable=False)
    external_link = Column(String(500))
    cost = Column(String(50))

    instructor = relationship("User")
