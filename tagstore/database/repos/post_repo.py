# tagstore/database/repos/post_repo.py
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from tagstore.database.models import Post as DBPost
from tagstore.database.repos._mapping import to_domain_post
from tagstore.database.repos.association_repo import AssociationManager
from tagstore.domain.entities.post import Post, PostWithTags


class PostRepo:
    """
    Post writes and the filtered, paginated read path.
    Returns domain entities; ORM rows never leave this module.
    """

    def __init__(self, db: Session, associations: Optional[AssociationManager] = None) -> None:
        self.db = db
        self.associations = associations or AssociationManager(db)

    def create(self, creator_id: Optional[int], title: str, body: str) -> Post:
        # title/body are stored verbatim; emptiness checks belong to the caller
        obj = DBPost(created_by=creator_id, title=title, body=body)
        self.db.add(obj)
        self.db.flush()  # ensure id
        self.db.refresh(obj)
        return to_domain_post(obj)

    def get(self, post_id: int) -> Optional[Post]:
        row = self.db.get(DBPost, post_id)
        return to_domain_post(row) if row else None

    @staticmethod
    def _search_filter(search_term: Optional[str]) -> list:
        """
        WHERE clauses shared by the page query and the count query.
        Missing or empty term matches everything; otherwise case-insensitive
        substring on title OR body. The term is used as given (whitespace
        included) and LIKE wildcards in it are taken literally.
        """
        if not search_term:
            return []
        term = search_term.lower()
        return [
            or_(
                func.lower(DBPost.title).contains(term, autoescape=True),
                func.lower(DBPost.body).contains(term, autoescape=True),
            )
        ]

    def search(self, search_term: Optional[str], offset: int, limit: int) -> Tuple[List[Post], int]:
        """
        Return (page, total_matching). Page is ordered by id ascending so the
        same parameters over unchanged data always give the same slice.
        """
        if offset < 0:
            raise ValueError("offset must be >= 0")
        if limit < 1:
            raise ValueError("limit must be >= 1")

        where = self._search_filter(search_term)

        count_stmt = select(func.count()).select_from(DBPost).where(*where)
        total = int(self.db.execute(count_stmt).scalar_one())
        if offset >= total:
            # past the end: nothing to fetch, and the offset may not fit a BIGINT
            return [], total

        page_stmt = (
            select(DBPost)
            .where(*where)
            .order_by(DBPost.id.asc())
            .offset(offset)
            .limit(limit)
        )
        rows = self.db.execute(page_stmt).scalars().all()
        return [to_domain_post(r) for r in rows], total

    def attach_tags(self, posts: Sequence[Post]) -> List[PostWithTags]:
        """
        Attach current tag names to each post with one aggregation query over
        exactly these ids. Untagged posts get an empty list.
        """
        names = self.associations.tag_names_for_posts(p.id for p in posts)
        return [PostWithTags(post=p, tags=list(names.get(p.id, []))) for p in posts]
