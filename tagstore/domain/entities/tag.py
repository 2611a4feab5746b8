# tagstore/domain/entities/tag.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Tag:
    """
    Shared label. ``name`` is globally unique and compared case-sensitively;
    a tag never belongs to a single post.
    """
    id: int
    name: str
