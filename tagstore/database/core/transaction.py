# tagstore/database/core/transaction.py
from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError, TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from tagstore.common.logging import get_logger
from tagstore.domain.errors import ResourceUnavailable, StorageFailure

logger = get_logger(__name__)


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """
    Translate SQLAlchemy errors raised inside the block into the opaque
    StorageFailure kinds. The original exception stays chained as __cause__.
    """
    try:
        yield
    except PoolTimeoutError as exc:
        logger.warning("%s: connection pool exhausted: %s", operation, exc)
        raise ResourceUnavailable(operation) from exc
    except SQLAlchemyError as exc:
        logger.exception("%s: storage error", operation)
        raise StorageFailure(operation) from exc


@contextmanager
def transactional(db: Session, operation: str = "transaction") -> Iterator[Session]:
    """
    COMMIT on normal exit, ROLLBACK if anything escapes the block.
    """
    with storage_errors(operation):
        with db.begin():
            yield db
