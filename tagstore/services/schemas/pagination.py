# tagstore/services/schemas/pagination.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from tagstore.services.schemas.posts import PostWithTagsRead


class PaginationMetaRead(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    current_page: int
    per_page: int
    from_: int = Field(..., alias="from")
    to: int
    total_pages: int
    total_docs: int


class PostPageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    records: List[PostWithTagsRead] = Field(default_factory=list)
    meta: PaginationMetaRead
