"""Database engine, session and declarative base."""

from .base import Base
from .session import get_engine, get_session, init_db, dispose_engine

__all__ = ["Base", "get_engine", "get_session", "init_db", "dispose_engine"]
