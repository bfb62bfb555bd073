# dojo_api/schemas/user_schemas.py
from typing import Optional

from pydantic import EmailStr, Field

from ..models.enums import BeltRank, UserRole
from .base import RecordSchema, RequestSchema, UpdateSchema


class RegisterRequest(RequestSchema):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=128)
    display_name: Optional[str] = Field(default=None, min_length=3, max_length=100)
    email: Optional[EmailStr] = None
    role: UserRole = UserRole.STUDENT


class LoginRequest(RequestSchema):
    username: str
    password: str


class MemberCreate(RequestSchema):
    username: str = Field(..., min_length=3, max_length=50)
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)
    display_name: Optional[str] = Field(default=None, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(default=None, max_length=30)
    role: UserRole = UserRole.STUDENT
    belt_rank: Optional[BeltRank] = Field(default=None, description="Seeds the member's progress record")


class MemberUpdate(UpdateSchema):
    username: Optional[str] = Field(default=None, min_length=3, max_length=50)
    password: Optional[str] = Field(default=None, min_length=6, max_length=128)
    display_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=30)
    role: Optional[UserRole] = None


class User(RecordSchema):
    """Public user representation; the password hash is never included"""
    username: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
