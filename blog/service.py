from __future__ import annotations

import os

from sqlalchemy.exc import SQLAlchemyError

from .client import BlogSourceError, fetch_published_posts, load_supabase_config
from .models import BlogPost

SOURCES = ("supabase", "database")


def default_source() -> str:
    return os.getenv("BLOG_SOURCE", "supabase").strip().lower()


def fetch_posts(source: str | None = None) -> list[BlogPost]:
    source = (source or default_source()).strip().lower()
    if source == "supabase":
        return fetch_published_posts(load_supabase_config())
    if source == "database":
        return _fetch_from_database()
    raise BlogSourceError(f"Unsupported blog source: {source}")


def _fetch_from_database() -> list[BlogPost]:
    from db.session import SessionLocal

    from .repository import load_published_posts

    session = SessionLocal()
    try:
        return load_published_posts(session)
    except SQLAlchemyError as exc:
        raise BlogSourceError(f"Database query failed: {exc}") from exc
    finally:
        session.close()
