from __future__ import annotations

from dataclasses import dataclass
import json
import os
from typing import Any
from urllib import parse as urlparse
from urllib import request as urlrequest
from urllib.error import HTTPError, URLError

from pydantic import ValidationError

from .models import BlogPost

POSTS_TABLE = "blogs"
POSTS_SELECT = "*,picture:directus_files(filename_disk)"


class BlogSourceError(RuntimeError):
    pass


@dataclass(frozen=True)
class SupabaseConfig:
    url: str
    anon_key: str
    timeout_s: int
    pictures_bucket: str


def _first_env(*names: str) -> str:
    for name in names:
        value = os.getenv(name, "").strip()
        if value:
            return value
    return ""


def load_supabase_config() -> SupabaseConfig:
    url = _first_env("SUPABASE_URL", "SUPABASE_DATABASE_URL", "PUBLIC_SUPABASE_URL")
    anon_key = _first_env("SUPABASE_ANON_KEY", "PUBLIC_SUPABASE_ANON_KEY")
    if not url or not anon_key:
        raise BlogSourceError("Missing Supabase environment variables")
    return SupabaseConfig(
        url=url.rstrip("/"),
        anon_key=anon_key,
        timeout_s=int(os.getenv("SUPABASE_TIMEOUT_S", "30")),
        pictures_bucket=os.getenv("SUPABASE_PICTURES_BUCKET", "pictures"),
    )


def build_posts_url(config: SupabaseConfig) -> str:
    query = urlparse.urlencode(
        {
            "select": POSTS_SELECT,
            "status": "eq.published",
            "order": "date_created.desc",
        },
        safe="*,:()",
    )
    return f"{config.url}/rest/v1/{POSTS_TABLE}?{query}"


def call_supabase(config: SupabaseConfig, url: str) -> Any:
    req = urlrequest.Request(
        url=url,
        method="GET",
        headers={
            "apikey": config.anon_key,
            "Authorization": f"Bearer {config.anon_key}",
            "Accept": "application/json",
        },
    )
    try:
        with urlrequest.urlopen(req, timeout=config.timeout_s) as resp:
            return json.loads(resp.read().decode("utf-8"))
    except HTTPError as exc:
        detail = exc.read().decode("utf-8")
        raise BlogSourceError(f"Supabase API error: {exc.code} {detail}") from exc
    except URLError as exc:
        raise BlogSourceError(f"Supabase API unreachable: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise BlogSourceError(f"Supabase API returned invalid JSON: {exc}") from exc


def fetch_published_posts(config: SupabaseConfig) -> list[BlogPost]:
    """Published posts, newest first, with the linked picture file resolved."""
    data = call_supabase(config, build_posts_url(config))
    if data is None:
        return []
    if not isinstance(data, list):
        raise BlogSourceError("Supabase API returned an unexpected payload")
    try:
        return [BlogPost.model_validate(row) for row in data]
    except ValidationError as exc:
        raise BlogSourceError(f"Unexpected post record: {exc}") from exc
