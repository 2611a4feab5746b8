# tagstore/domain/entities/post.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass(frozen=True)
class Post:
    """
    A piece of content. ``created_by`` is a weak reference to a User: it may
    be None when no creator was given or the user no longer exists.
    Creation order is the identifier order.
    """
    id: int
    title: str
    body: str
    created_by: Optional[int] = None
    date_created: Optional[datetime] = None

    def as_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class PostWithTags:
    """
    Read projection: a post plus the names of the tags linked to it at query
    time, in link order. Never stored.
    """
    post: Post
    tags: List[str] = field(default_factory=list)

    @property
    def id(self) -> int:
        return self.post.id

    def as_dict(self):
        return {"post": self.post.as_dict(), "tags": list(self.tags)}
