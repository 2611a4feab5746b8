# tagstore/database/repos/association_repo.py
from __future__ import annotations

from typing import Dict, Iterable, List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tagstore.common.logging import get_logger
from tagstore.database.core.upsert import insert_ignore
from tagstore.database.models import PostTag as DBPostTag, Tag as DBTag
from tagstore.database.repos._mapping import to_domain_link
from tagstore.domain.entities.links.post_tag_link import PostTagLink

logger = get_logger(__name__)


class AssociationManager:
    """
    Post <-> Tag links. (post_id, tag_id) is the primary key of posts_tags,
    so linking an existing pair is a no-op rather than an error.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def link(self, post_id: int, tag_ids: Iterable[int]) -> None:
        """
        Insert one row per new (post_id, tag_id) pair in a single statement.
        Anything other than a duplicate pair (unknown post, unknown tag,
        lost connection) propagates so the enclosing transaction rolls back.
        """
        ids = list(dict.fromkeys(tag_ids))
        if not ids:
            return

        start = self.db.execute(
            select(func.coalesce(func.max(DBPostTag.position), -1)).where(DBPostTag.post_id == post_id)
        ).scalar_one() + 1

        rows = [{"post_id": post_id, "tag_id": tid, "position": start + i} for i, tid in enumerate(ids)]
        # insert in key order; position still records the caller's order
        rows.sort(key=lambda r: r["tag_id"])
        stmt = insert_ignore(self.db, DBPostTag, ["post_id", "tag_id"]).values(rows)
        result = self.db.execute(stmt)
        if result.rowcount is not None and 0 <= result.rowcount < len(ids):
            logger.debug("link: post %s already had %d of %d tags", post_id, len(ids) - result.rowcount, len(ids))

    def list_links(self, post_id: int) -> List[PostTagLink]:
        stmt = (
            select(DBPostTag)
            .where(DBPostTag.post_id == post_id)
            .order_by(DBPostTag.position.asc(), DBPostTag.tag_id.asc())
        )
        return [to_domain_link(r) for r in self.db.execute(stmt).scalars().all()]

    def tag_names_for_posts(self, post_ids: Iterable[int]) -> Dict[int, List[str]]:
        """
        Map of post_id -> [tag name] for exactly ``post_ids``, in link order.
        One query; cost is bounded by the number of ids, not the corpus.
        Posts without links are absent from the map.
        """
        ids = list(post_ids)
        if not ids:
            return {}
        stmt = (
            select(DBPostTag.post_id, DBTag.name)
            .join(DBTag, DBTag.id == DBPostTag.tag_id)
            .where(DBPostTag.post_id.in_(ids))
            .order_by(DBPostTag.post_id.asc(), DBPostTag.position.asc(), DBPostTag.tag_id.asc())
        )
        out: Dict[int, List[str]] = {}
        for pid, name in self.db.execute(stmt).all():
            out.setdefault(pid, []).append(name)
        return out
