import pytest

from tagstore.database.repos.association_repo import AssociationManager
from tagstore.database.repos.post_repo import PostRepo
from tagstore.database.repos.tag_repo import TagRegistry
from tagstore.database.repos.user_repo import UserRepo


def test_create_echoes_stored_fields(db):
    author = UserRepo(db).create(username="writer", first_name="Wren")
    post = PostRepo(db).create(author.id, "Title", "Body text")
    assert post.id is not None
    assert (post.created_by, post.title, post.body) == (author.id, "Title", "Body text")


def test_create_without_creator_and_empty_values(db):
    # emptiness is checked by callers, not here
    post = PostRepo(db).create(None, "", "")
    assert post.created_by is None
    assert post.title == "" and post.body == ""


def test_search_matches_title_or_body_case_insensitively(db):
    repo = PostRepo(db)
    hello = repo.create(None, "Hello World", "unrelated")
    body_hit = repo.create(None, "Other", "well, HELLO there")
    repo.create(None, "Nothing", "to see")

    for term in ("hello", "HELLO", "hElLo"):
        page, total = repo.search(term, offset=0, limit=10)
        assert [p.id for p in page] == [hello.id, body_hit.id]
        assert total == 2

    page, total = repo.search("xyz", offset=0, limit=10)
    assert page == [] and total == 0


def test_empty_or_missing_term_matches_everything(db):
    repo = PostRepo(db)
    ids = [repo.create(None, f"Post {i}", "b").id for i in range(3)]
    for term in (None, ""):
        page, total = repo.search(term, offset=0, limit=10)
        assert [p.id for p in page] == ids
        assert total == 3


def test_like_wildcards_are_literal(db):
    repo = PostRepo(db)
    pct = repo.create(None, "100% done", "b")
    repo.create(None, "1000 done", "b")
    page, total = repo.search("100%", offset=0, limit=10)
    assert [p.id for p in page] == [pct.id]
    assert total == 1

    page, total = repo.search("_", offset=0, limit=10)
    assert total == 0


def test_search_pages_are_stable_and_counted_from_same_filter(db):
    repo = PostRepo(db)
    matching = [repo.create(None, f"match {i}", "b").id for i in range(5)]
    repo.create(None, "other", "b")

    first, total = repo.search("match", offset=0, limit=2)
    second, _ = repo.search("match", offset=2, limit=2)
    last, _ = repo.search("match", offset=4, limit=2)
    beyond, total_beyond = repo.search("match", offset=10, limit=2)

    assert total == 5 and total_beyond == 5
    assert [p.id for p in first + second + last] == matching
    assert beyond == []
    assert repo.search("match", offset=0, limit=2)[0] == first


def test_search_rejects_bad_window(db):
    repo = PostRepo(db)
    with pytest.raises(ValueError):
        repo.search(None, offset=-1, limit=10)
    with pytest.raises(ValueError):
        repo.search(None, offset=0, limit=0)


def test_attach_tags_gives_empty_list_for_untagged(db):
    repo = PostRepo(db)
    tagged = repo.create(None, "tagged", "b")
    bare = repo.create(None, "bare", "b")
    ids = TagRegistry(db).ensure_tags(["one", "two"])
    AssociationManager(db).link(tagged.id, ids.values())

    out = repo.attach_tags([tagged, bare])
    assert [r.post.id for r in out] == [tagged.id, bare.id]
    assert out[0].tags == ["one", "two"]
    assert out[1].tags == []


def test_get(db):
    repo = PostRepo(db)
    post = repo.create(None, "find me", "b")
    assert repo.get(post.id) == post
    assert repo.get(post.id + 1000) is None


def test_whitespace_in_term_is_significant(db):
    repo = PostRepo(db)
    joined = repo.create(None, "HelloWorld", "nospace")
    spaced = repo.create(None, "Hello there", "b")

    page, total = repo.search("hello ", offset=0, limit=10)
    assert [p.id for p in page] == [spaced.id]
    assert total == 1

    page, total = repo.search(" ", offset=0, limit=10)
    assert joined.id not in [p.id for p in page]
    assert total == 1


def test_whitespace_only_term_does_not_match_everything(db):
    repo = PostRepo(db)
    repo.create(None, "HelloWorld", "nospace")
    page, total = repo.search(" ", offset=0, limit=10)
    assert page == [] and total == 0


def test_search_folds_non_ascii_case(db):
    repo = PostRepo(db)
    post = repo.create(None, "Élan Vital", "Straße")
    assert [p.id for p in repo.search("élan", offset=0, limit=10)[0]] == [post.id]
    assert [p.id for p in repo.search("ÉLAN", offset=0, limit=10)[0]] == [post.id]


def test_offset_beyond_any_integer_column_returns_empty_page(db):
    repo = PostRepo(db)
    repo.create(None, "only", "b")
    page, total = repo.search(None, offset=10**20, limit=10)
    assert page == []
    assert total == 1
