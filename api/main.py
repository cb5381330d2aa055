from __future__ import annotations

from os import getenv
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from blog.cards import build_card
from blog.client import BlogSourceError
from blog.search import filter_posts
from blog.service import fetch_posts
from policygen.run import generate_policies
from policygen.validate import PolicyConfigError

app = FastAPI(title="Blog Reader API", version="0.1.0")


def _cors_origins() -> list[str]:
    raw = getenv("CORS_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _pictures_base() -> tuple[str | None, str]:
    base_url = getenv("SUPABASE_URL", "").strip() or None
    bucket = getenv("SUPABASE_PICTURES_BUCKET", "pictures")
    return base_url, bucket


def _load_posts(q: str | None, source: str | None):
    try:
        posts = fetch_posts(source)
    except BlogSourceError as exc:
        raise HTTPException(status_code=502, detail=str(exc))
    return posts, filter_posts(posts, q)


class PolicySqlRequest(BaseModel):
    config_text: str = Field(min_length=1)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/posts")
def list_posts(
    q: Optional[str] = Query(default=None),
    source: Optional[str] = Query(default=None),
) -> dict:
    posts, matched = _load_posts(q, source)
    return jsonable_encoder(
        {
            "query": q or "",
            "total": len(posts),
            "count": len(matched),
            "posts": matched,
        }
    )


@app.get("/posts/cards")
def list_post_cards(
    q: Optional[str] = Query(default=None),
    source: Optional[str] = Query(default=None),
) -> dict:
    posts, matched = _load_posts(q, source)
    base_url, bucket = _pictures_base()
    cards = [build_card(post, base_url=base_url, bucket=bucket) for post in matched]
    return jsonable_encoder(
        {
            "query": q or "",
            "total": len(posts),
            "count": len(cards),
            "cards": cards,
        }
    )


@app.post("/policies/sql")
def policies_sql(req: PolicySqlRequest) -> dict:
    try:
        sql = generate_policies(req.config_text)
    except PolicyConfigError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return {"sql": sql}
