# dojo_api/core/config.py
"""Application configuration using Pydantic."""
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = 'sqlite+aiosqlite:///./dojo.db'
    secret_key: str = 'dev-secret-key'

    app_version: str = '1.0.0'
    environment: str = 'development'
    log_level: str = 'info'
    allowed_origins: List[str] = ['*']

    # Session cookie
    session_cookie: str = 'dojo_session'
    session_max_age: int = 14 * 24 * 60 * 60
    session_https_only: bool = False

    # Create the schema on startup instead of running migrations (tests, local dev)
    create_tables: bool = False

    # Members created by an instructor without a password get this one
    default_member_password: str = 'changeme123'

    # Payment gateway; unset means every payment endpoint answers 503
    stripe_secret_key: Optional[str] = None
    stripe_api_version: str = '2023-10-16'

    model_config = {
        'env_file': '.env',
        'extra': 'ignore'
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
