# tagstore/database/core/upsert.py
from __future__ import annotations

from typing import Sequence

from sqlalchemy.orm import Session


def insert_ignore(db: Session, model, conflict_columns: Sequence[str]):
    """
    Dialect-specific ``INSERT ... ON CONFLICT (<cols>) DO NOTHING`` for ``model``.
    The unique constraint on ``conflict_columns`` arbitrates concurrent writers;
    the losing insert becomes a no-op instead of an IntegrityError.
    """
    dialect = db.get_bind().dialect.name
    if dialect == "postgresql":
        from sqlalchemy.dialects.postgresql import insert
    elif dialect == "sqlite":
        from sqlalchemy.dialects.sqlite import insert
    else:
        raise ValueError(f"unsupported dialect for insert_ignore: {dialect!r}")
    return insert(model).on_conflict_do_nothing(index_elements=list(conflict_columns))
