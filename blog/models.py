from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Picture(BaseModel):
    filename_disk: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class BlogPost(BaseModel):
    id: int
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None
    category: Optional[str] = None
    status: str
    date_created: Optional[datetime] = None
    picture: Optional[Picture] = None

    model_config = ConfigDict(extra="ignore")


class PostCard(BaseModel):
    id: int
    title: str
    author: str
    category: Optional[str] = None
    date_display: str
    excerpt: str
    picture_url: Optional[str] = None
