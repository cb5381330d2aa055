from __future__ import annotations

from datetime import datetime

from .models import BlogPost, PostCard

EXCERPT_LENGTH = 150


def excerpt(content: str | None, max_length: int = EXCERPT_LENGTH) -> str:
    if not content:
        return ""
    if len(content) > max_length:
        return content[:max_length] + "..."
    return content


def format_date(value: datetime | None) -> str:
    if value is None:
        return ""
    return f"{value:%B} {value.day}, {value.year}"


def picture_url(base_url: str, filename: str, bucket: str = "pictures") -> str:
    return f"{base_url.rstrip('/')}/storage/v1/object/public/{bucket}/{filename}"


def build_card(post: BlogPost, *, base_url: str | None = None, bucket: str = "pictures") -> PostCard:
    url = None
    if base_url and post.picture is not None and post.picture.filename_disk:
        url = picture_url(base_url, post.picture.filename_disk, bucket)
    return PostCard(
        id=post.id,
        title=post.title or "Untitled",
        author=post.author or "Anonymous",
        category=post.category or None,
        date_display=format_date(post.date_created),
        excerpt=excerpt(post.content),
        picture_url=url,
    )
