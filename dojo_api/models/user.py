# dojo_api/models/user.py
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship

from .base import Base
from .enums import UserRole, enum_column


class User(Base):
    __tablename__ = "users"

    username = Column(String(50), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # passlib hash, never serialized
    display_name = Column(String(100))
    email = Column(String(255))
    phone = Column(String(30))
    role = Column(enum_column(UserRole, "user_role"), default=UserRole.STUDENT, nullable=False)

    # Payment gateway references
    stripe_customer_id = Column(String(255))
    stripe_subscription_id = Column(String(255))

    # Relationships
    classes_taught = relationship("ClassModel", back_populates="instructor", passive_deletes="all")
    attendances = relationship("Attendance", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)
    progress = relationship("StudentProgress", back_populates="student", cascade="all, delete-orphan", passive_deletes=True)
    progress_notes = relationship(
        "ProgressNote",
        back_populates="member",
        foreign_keys="ProgressNote.member_id",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    @property
    def is_instructor(self) -> bool:
        return self.role in (UserRole.INSTRUCTOR, UserRole.ADMIN)

    def __repr__(self):
        return f"<User {self.username}>"
