"""SQL card store plumbing: declarative base and per-URL engine/session factories."""

from .session import Base, make_engine, make_sessionmaker, session_scope

__all__ = ["Base", "make_engine", "make_sessionmaker", "session_scope"]
