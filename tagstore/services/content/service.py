# tagstore/services/content/service.py
from __future__ import annotations

from typing import Any, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy import text
from sqlalchemy.orm import Session, sessionmaker

from tagstore.common.logging import get_logger
from tagstore.common.settings import Settings, get_settings
from tagstore.database.core.transaction import storage_errors, transactional
from tagstore.database.repos.association_repo import AssociationManager
from tagstore.database.repos.post_repo import PostRepo
from tagstore.database.repos.tag_repo import TagRegistry
from tagstore.database.repos.user_repo import UserRepo
from tagstore.domain.dataclasses.pages import PostPage
from tagstore.domain.entities.post import PostWithTags
from tagstore.domain.entities.user import User
from tagstore.domain.errors import ValidationFailure
from tagstore.domain.policies.pagination import compute_pagination, normalize_page_args, page_offset
from tagstore.services.schemas.posts import PostCreate
from tagstore.services.schemas.users import UserCreate

logger = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


def _validate(model: Type[M], **data: Any) -> M:
    try:
        return model(**data)
    except ValidationError as exc:
        raise ValidationFailure(f"invalid {model.__name__}", errors=exc.errors(include_url=False)) from exc


class ContentService:
    """
    High-level orchestrator over the post, tag and association repos.

    Each call opens its own Session from ``session_factory``; the engine and
    its connection pool are owned by whoever built the factory.
    """

    def __init__(self, session_factory: sessionmaker[Session], settings: Optional[Settings] = None) -> None:
        self.session_factory = session_factory
        self.cfg = settings or get_settings()

    # ---------- Users ----------

    def create_user(self, username: str, first_name: str, last_name: Optional[str] = None) -> User:
        payload = _validate(UserCreate, username=username, first_name=first_name, last_name=last_name)
        with self.session_factory() as db, transactional(db, "create_user"):
            user = UserRepo(db).create(
                username=payload.username,
                first_name=payload.first_name,
                last_name=payload.last_name,
            )
        logger.info("created user %s (%s)", user.id, user.username)
        return user

    # ---------- Posts ----------

    def create_post_with_tags(
        self,
        creator_id: Optional[int],
        title: str,
        body: str,
        tags: Sequence[str] = (),
    ) -> PostWithTags:
        """
        Post insert, tag upserts and link inserts commit together or not at
        all: a failure in any step leaves no post row behind.
        """
        payload = _validate(PostCreate, created_by=creator_id, title=title, body=body, tags=list(tags))
        with self.session_factory() as db, transactional(db, "create_post_with_tags"):
            associations = AssociationManager(db)
            posts = PostRepo(db, associations)

            post = posts.create(payload.created_by, payload.title, payload.body)
            tag_ids = TagRegistry(db).ensure_tags(payload.tags)
            associations.link(post.id, tag_ids.values())
            created = posts.attach_tags([post])[0]

        logger.info("created post %s with %d tag(s)", created.id, len(created.tags))
        return created

    def get_post(self, post_id: int) -> Optional[PostWithTags]:
        with self.session_factory() as db, storage_errors("get_post"):
            posts = PostRepo(db)
            post = posts.get(post_id)
            if post is None:
                return None
            return posts.attach_tags([post])[0]

    def list_posts(
        self,
        search: Optional[str] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PostPage:
        """
        One page of posts matching ``search`` with their tags and pagination
        metadata. Out-of-range page/limit are normalized, never rejected.
        """
        page, limit = normalize_page_args(
            page,
            limit,
            default_limit=self.cfg.pagination.default_limit,
            max_limit=self.cfg.pagination.max_limit,
        )
        with self.session_factory() as db, storage_errors("list_posts"):
            posts = PostRepo(db)
            rows, total = posts.search(search, offset=page_offset(page, limit), limit=limit)
            records = posts.attach_tags(rows)

        meta = compute_pagination(page, limit, total_count=total, returned_count=len(records))
        return PostPage(meta=meta, records=records)

    # ---------- Health ----------

    def ping(self) -> None:
        """Round-trip to the database; raises StorageFailure when unreachable."""
        with self.session_factory() as db, storage_errors("ping"):
            db.execute(text("SELECT 1"))
