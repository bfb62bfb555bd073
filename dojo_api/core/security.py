# dojo_api/core/security.py
"""Password hashing and session-cookie login state."""
from typing import Optional

from fastapi import Request
from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

SESSION_USER_KEY = "user_id"


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)


def login_session(request: Request, user_id: int):
    """Bind the signed session cookie to a user; the role is re-read on every request"""
    request.session.clear()
    request.session[SESSION_USER_KEY] = user_id


def logout_session(request: Request):
    request.session.clear()


def session_user_id(request: Request) -> Optional[int]:
    value = request.session.get(SESSION_USER_KEY)
    return int(value) if value is not None else None
