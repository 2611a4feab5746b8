# tagstore/database/models/content.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from tagstore.database.core.main import Base
from tagstore.database.core.service_object import ServiceObject


# =======================
# Users
# =======================
class User(ServiceObject, Base):
    __tablename__ = "users"
    __table_args__ = (
        UniqueConstraint("username", name="uq_users_username"),
    )

    username: Mapped[str] = mapped_column(String(64), nullable=False)
    first_name: Mapped[str] = mapped_column(String(128), nullable=False)
    last_name: Mapped[Optional[str]] = mapped_column(String(128))


# =======================
# Posts
# =======================
class Post(ServiceObject, Base):
    __tablename__ = "posts"
    __table_args__ = (
        Index("ix_posts_created_by", "created_by"),
    )

    # weak reference: the author row may go away without taking the post with it
    created_by: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)


# =======================
# Tags
# =======================
class Tag(ServiceObject, Base):
    __tablename__ = "tags"
    __table_args__ = (
        UniqueConstraint("name", name="uq_tags_name"),
    )

    name: Mapped[str] = mapped_column(String(128), nullable=False)


class PostTag(Base):
    __tablename__ = "posts_tags"
    __table_args__ = (
        Index("ix_posts_tags_tag_id", "tag_id"),
    )

    post_id: Mapped[int] = mapped_column(
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tags.id", ondelete="CASCADE"),
        primary_key=True,
    )
    # link order within a post
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
