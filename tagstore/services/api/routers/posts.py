# tagstore/services/api/routers/posts.py
from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from tagstore.common.settings import get_settings
from tagstore.services.api.deps import get_content_service
from tagstore.services.content.service import ContentService
from tagstore.services.schemas.pagination import PaginationMetaRead, PostPageRead
from tagstore.services.schemas.posts import PostCreate, PostWithTagsRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/posts", tags=["posts"])


@router.post("", response_model=PostWithTagsRead, status_code=HTTPStatus.CREATED)
def create_post(
    payload: PostCreate,
    svc: ContentService = Depends(get_content_service),
) -> PostWithTagsRead:
    created = svc.create_post_with_tags(payload.created_by, payload.title, payload.body, payload.tags)
    return PostWithTagsRead.model_validate(created)


@router.get("", response_model=PostPageRead, response_model_by_alias=True)
def list_posts(
    search: Optional[str] = Query(None, description="Case-insensitive substring of title or body"),
    # no bounds here: out-of-range values are normalized by the service
    page: Optional[int] = Query(None),
    limit: Optional[int] = Query(None),
    svc: ContentService = Depends(get_content_service),
) -> PostPageRead:
    result = svc.list_posts(search=search, page=page, limit=limit)
    return PostPageRead(
        records=[PostWithTagsRead.model_validate(r) for r in result.records],
        meta=PaginationMetaRead(**result.meta.as_dict()),
    )


@router.get("/{post_id}", response_model=PostWithTagsRead)
def get_post(
    post_id: int,
    svc: ContentService = Depends(get_content_service),
) -> PostWithTagsRead:
    found = svc.get_post(post_id)
    if found is None:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail="Post not found")
    return PostWithTagsRead.model_validate(found)
