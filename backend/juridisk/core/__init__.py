from .database import Base, get_db, init_db, enable_sqlite_foreign_keys
from .security import (
    verify_password,
    get_password_hash,
    create_access_token,
    get_current_user,
    authenticate_user,
)
from .logging_config import setup_logging

__all__ = [
    "Base",
    "get_db",
    "init_db",
    "enable_sqlite_foreign_keys",
    "verify_password",
    "get_password_hash",
    "create_access_token",
    "get_current_user",
    "authenticate_user",
    "setup_logging",
]
