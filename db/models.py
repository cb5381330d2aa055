from __future__ import annotations

from datetime import datetime
from uuid import UUID

from sqlalchemy import BigInteger, DateTime, ForeignKey, Text
from sqlalchemy.dialects.postgresql import UUID as PGUUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class DirectusFile(Base):
    __tablename__ = "directus_files"

    id: Mapped[UUID] = mapped_column(PGUUID(as_uuid=True), primary_key=True)
    filename_disk: Mapped[str | None] = mapped_column(Text)
    filename_download: Mapped[str | None] = mapped_column(Text)
    type: Mapped[str | None] = mapped_column(Text)


class Blog(Base):
    __tablename__ = "blogs"

    id: Mapped[int] = mapped_column(BigInteger, primary_key=True)
    title: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)
    author: Mapped[str | None] = mapped_column(Text)
    category: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(Text, default="draft")
    date_created: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    picture_id: Mapped[UUID | None] = mapped_column(
        "picture",
        PGUUID(as_uuid=True),
        ForeignKey("directus_files.id", ondelete="SET NULL"),
        nullable=True,
    )

    picture: Mapped[DirectusFile | None] = relationship(lazy="joined")
