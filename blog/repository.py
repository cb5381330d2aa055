from __future__ import annotations

from sqlalchemy import desc, select

from db.models import Blog

from .models import BlogPost, Picture


def post_from_row(row: Blog) -> BlogPost:
    picture = None
    if row.picture is not None:
        picture = Picture(filename_disk=row.picture.filename_disk)
    return BlogPost(
        id=row.id,
        title=row.title,
        content=row.content,
        author=row.author,
        category=row.category,
        status=row.status,
        date_created=row.date_created,
        picture=picture,
    )


def published_posts_query():
    return (
        select(Blog)
        .where(Blog.status == "published")
        .order_by(desc(Blog.date_created))
    )


def load_published_posts(session) -> list[BlogPost]:
    rows = session.scalars(published_posts_query()).unique().all()
    return [post_from_row(row) for row in rows]
