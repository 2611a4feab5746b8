# tagstore/database/repos/_mapping.py
from __future__ import annotations

from tagstore.database.models import (
    Post as DBPost,
    PostTag as DBPostTag,
    Tag as DBTag,
    User as DBUser,
)
from tagstore.domain.entities.links.post_tag_link import PostTagLink
from tagstore.domain.entities.post import Post as DomainPost
from tagstore.domain.entities.tag import Tag as DomainTag
from tagstore.domain.entities.user import User as DomainUser


def to_domain_user(row: DBUser) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        first_name=row.first_name,
        last_name=row.last_name,
        date_created=getattr(row, "date_created", None),
    )


def to_domain_post(row: DBPost) -> DomainPost:
    return DomainPost(
        id=row.id,
        created_by=row.created_by,
        title=row.title,
        body=row.body,
        date_created=getattr(row, "date_created", None),
    )


def to_domain_tag(row: DBTag) -> DomainTag:
    return DomainTag(id=row.id, name=row.name)


def to_domain_link(row: DBPostTag) -> PostTagLink:
    return PostTagLink(post_id=row.post_id, tag_id=row.tag_id, position=row.position)
