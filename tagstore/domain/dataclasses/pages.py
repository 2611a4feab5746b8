# tagstore/domain/dataclasses/pages.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from tagstore.domain.entities.post import PostWithTags
from tagstore.domain.policies.pagination import PaginationMeta


@dataclass(frozen=True)
class PostPage:
    """One page of posts with their tags plus the metadata describing it."""
    meta: PaginationMeta
    records: List[PostWithTags] = field(default_factory=list)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "records": [r.as_dict() for r in self.records],
            "meta": self.meta.as_dict(),
        }
