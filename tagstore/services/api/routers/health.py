# tagstore/services/api/routers/health.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from tagstore.common.settings import get_settings
from tagstore.domain.errors import StorageFailure
from tagstore.services.api.deps import get_content_service
from tagstore.services.content.service import ContentService

router = APIRouter()


@router.get("/healthz")
def healthz(svc: ContentService = Depends(get_content_service)):
    s = get_settings()
    try:
        svc.ping()
    except StorageFailure:
        return JSONResponse(
            status_code=HTTPStatus.SERVICE_UNAVAILABLE,
            content={"ok": False, "app": s.app_name, "env": s.app_env, "db": False},
        )
    return {"ok": True, "app": s.app_name, "env": s.app_env, "db": True}
