#!/usr/bin/env python3
from __future__ import annotations

from argparse import ArgumentParser
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blog.cards import format_date  # noqa: E402
from blog.client import BlogSourceError  # noqa: E402
from blog.search import filter_posts  # noqa: E402
from blog.service import SOURCES, default_source, fetch_posts  # noqa: E402


def main() -> None:
    parser = ArgumentParser(description="List published blog posts")
    parser.add_argument("--search", default="", help="Case-insensitive filter")
    parser.add_argument("--source", default=default_source(), choices=list(SOURCES))
    args = parser.parse_args()

    try:
        posts = fetch_posts(args.source)
    except BlogSourceError as exc:
        raise SystemExit(f"[blog-posts] {exc}") from exc

    matched = filter_posts(posts, args.search)
    print(f"[blog-posts] {len(matched)} of {len(posts)} post(s)")
    for post in matched:
        print(
            f"[post] id={post.id} date={format_date(post.date_created)} "
            f"author={post.author or 'Anonymous'} title={post.title or 'Untitled'}"
        )


if __name__ == "__main__":
    main()
