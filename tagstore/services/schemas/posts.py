# tagstore/services/schemas/posts.py
from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

TagName = Annotated[str, StringConstraints(min_length=1, max_length=128)]


class PostBase(BaseModel):
    created_by: Optional[int] = None
    title: str = Field(..., min_length=1, max_length=255)
    body: str = ""


class PostCreate(PostBase):
    # duplicates are allowed and collapse to one link
    tags: List[TagName] = Field(default_factory=list)


class PostRead(BaseModel):
    # read side mirrors storage, which keeps title/body verbatim
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_by: Optional[int] = None
    title: str
    body: str


class PostWithTagsRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    post: PostRead
    tags: List[str] = Field(default_factory=list)
