# tagstore/domain/entities/user.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class User:
    """
    An account that can author posts. Created once and immutable afterwards.
    """
    id: int
    username: str
    first_name: str
    last_name: Optional[str] = None
    date_created: Optional[datetime] = None

    def as_dict(self):
        return asdict(self)
