# tagstore/database/repos/user_repo.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from tagstore.database.models import User as DBUser
from tagstore.database.repos._mapping import to_domain_user
from tagstore.domain.entities.user import User


class UserRepo:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, *, username: str, first_name: str, last_name: Optional[str] = None) -> User:
        # uniqueness of username is enforced by uq_users_username
        obj = DBUser(username=username, first_name=first_name, last_name=last_name)
        self.db.add(obj)
        self.db.flush()
        self.db.refresh(obj)
        return to_domain_user(obj)

    def get(self, user_id: int) -> Optional[User]:
        row = self.db.get(DBUser, user_id)
        return to_domain_user(row) if row else None

    def get_by_username(self, username: str) -> Optional[User]:
        stmt = select(DBUser).where(DBUser.username == username).limit(1)
        row = self.db.execute(stmt).scalars().first()
        return to_domain_user(row) if row else None
