# tagstore/services/api/routers/users.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends

from tagstore.common.settings import get_settings
from tagstore.services.api.deps import get_content_service
from tagstore.services.content.service import ContentService
from tagstore.services.schemas.users import UserCreate, UserRead

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/users", tags=["users"])


@router.post("", response_model=UserRead, status_code=HTTPStatus.CREATED)
def create_user(
    payload: UserCreate,
    svc: ContentService = Depends(get_content_service),
) -> UserRead:
    user = svc.create_user(payload.username, payload.first_name, payload.last_name)
    return UserRead.model_validate(user)
