# tagstore/database/repos/tag_repo.py
from __future__ import annotations

from typing import Dict, Iterable, List, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from tagstore.common.logging import get_logger
from tagstore.database.core.upsert import insert_ignore
from tagstore.database.models import Tag as DBTag
from tagstore.database.repos._mapping import to_domain_tag
from tagstore.domain.entities.tag import Tag
from tagstore.domain.errors import StorageFailure

logger = get_logger(__name__)


def _distinct(names: Iterable[str]) -> List[str]:
    """First-occurrence order, duplicates dropped."""
    return list(dict.fromkeys(names))


class TagRegistry:
    """
    Makes sure each tag name exists exactly once and resolves names to ids.
    Runs inside the caller's transaction; never commits.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def ensure_tags(self, names: Sequence[str]) -> Dict[str, int]:
        """
        Upsert-or-ignore every distinct name, then resolve all of them with a
        single lookup. Names that already exist (or that a concurrent writer
        inserted first) are absorbed by the unique constraint on ``tags.name``.

        Returns name -> id in first-occurrence order of ``names``.
        """
        wanted = _distinct(names)
        if not wanted:
            return {}

        # sorted so concurrent writers take the unique-index locks in the same order
        stmt = insert_ignore(self.db, DBTag, ["name"]).values([{"name": n} for n in sorted(wanted)])
        result = self.db.execute(stmt)
        inserted = result.rowcount if result.rowcount is not None and result.rowcount >= 0 else None
        if inserted is not None and inserted < len(wanted):
            logger.debug("ensure_tags: %d of %d names already existed", len(wanted) - inserted, len(wanted))

        rows = self.db.execute(select(DBTag.name, DBTag.id).where(DBTag.name.in_(wanted))).all()
        found = {name: tag_id for (name, tag_id) in rows}

        missing = [n for n in wanted if n not in found]
        if missing:
            logger.error("ensure_tags: %d tag(s) not resolvable after upsert", len(missing))
            raise StorageFailure("ensure_tags", message="tag lookup incomplete")

        return {n: found[n] for n in wanted}

    def get_by_names(self, names: Iterable[str]) -> List[Tag]:
        """Existing tags for ``names`` (no inserts), ordered by id."""
        wanted = _distinct(names)
        if not wanted:
            return []
        stmt = select(DBTag).where(DBTag.name.in_(wanted)).order_by(DBTag.id.asc())
        return [to_domain_tag(r) for r in self.db.execute(stmt).scalars().all()]
