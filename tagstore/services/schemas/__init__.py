from tagstore.services.schemas.users import (
    UserCreate,
    UserRead,
)
from tagstore.services.schemas.posts import (
    PostCreate,
    PostRead,
    PostWithTagsRead,
)
from tagstore.services.schemas.pagination import (
    PaginationMetaRead,
    PostPageRead,
)

__all__ = [
    "UserCreate",
    "UserRead",
    "PostCreate",
    "PostRead",
    "PostWithTagsRead",
    "PaginationMetaRead",
    "PostPageRead",
]
