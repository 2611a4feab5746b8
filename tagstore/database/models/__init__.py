# tagstore/database/models/__init__.py

from tagstore.database.core.main import Base
from tagstore.database.models.content import (
    User,
    Post,
    Tag,
    PostTag,
)

__all__ = [
    "Base",
    "User",
    "Post",
    "Tag",
    "PostTag",
]
