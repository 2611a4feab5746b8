# tagstore/domain/entities/links/post_tag_link.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PostTagLink:
    """
    Join entity connecting a Post and a Tag.
    DB enforces that (post_id, tag_id) is unique; re-linking is a no-op.
    """
    post_id: int
    tag_id: int
    position: int = 0
