from __future__ import annotations

from typing import Sequence

from .models import BlogPost


def filter_posts(posts: Sequence[BlogPost], term: str | None) -> list[BlogPost]:
    if not term:
        return list(posts)
    needle = term.lower()
    return [post for post in posts if _matches(post, needle)]


def _matches(post: BlogPost, needle: str) -> bool:
    for value in (post.title, post.content, post.author, post.category):
        if value and needle in value.lower():
            return True
    return False
