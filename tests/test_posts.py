from datetime import date, datetime

import pytest
from sqlalchemy.exc import NoResultFound

from blog_data.db.models import Post, PostTag, Tag
from blog_data.repositories import PostRepository, PostTagRepository, TagRepository
from blog_data.schemas import ArchiveRead


def test_insert_then_get_by_id(session, make_post):
    post = make_post("hello", datetime(2023, 3, 4, 5, 6, 7), body="*hi*", view=9)

    session.expunge_all()
    loaded = PostRepository(session).get_by_id(str(post.id))
    assert loaded.title == "hello"
    assert loaded.body == "*hi*"
    assert loaded.view == 9
    assert loaded.is_published is True
    assert loaded.created_at.replace(tzinfo=None) == datetime(2023, 3, 4, 5, 6, 7)


def test_update_leaves_view_count_alone(session, make_post):
    repo = PostRepository(session)
    post = make_post("draft", published=False, view=7)

    edited = Post(id=post.id, title="final", body="text", is_published=True, view=0)
    updated = repo.update(edited)

    assert (updated.title, updated.body, updated.is_published) == ("final", "text", True)
    assert updated.view == 7


def test_update_discards_other_pending_changes(session, make_post):
    repo = PostRepository(session)
    post = make_post("draft", view=7)

    post.title = "renamed"
    post.view = 1000
    repo.update(post)

    session.expunge_all()
    assert repo.get_by_id(post.id).view == 7
    assert repo.get_by_id(post.id).title == "renamed"


def test_list_published_newest_first(session, make_post):
    t1 = make_post("t1", datetime(2023, 1, 1))
    make_post("t2", datetime(2023, 1, 2), published=False)
    t3 = make_post("t3", datetime(2023, 1, 3))

    repo = PostRepository(session)
    assert [p.id for p in repo.list_published()] == [t3.id, t1.id]
    assert [p.title for p in repo.list()] == ["t3", "t2", "t1"]


def test_list_filtered_by_tag(session, make_post):
    a = make_post("a", datetime(2023, 1, 1))
    b = make_post("b", datetime(2023, 1, 2))
    hidden = make_post("hidden", datetime(2023, 1, 3), published=False)
    make_post("other", datetime(2023, 1, 4))

    tag = TagRepository(session).insert(Tag(name="python"))
    links = PostTagRepository(session)
    for post in (a, b, hidden):
        links.insert(PostTag(post_id=post.id, tag_id=tag.id))

    repo = PostRepository(session)
    assert [p.title for p in repo.list(str(tag.id), True)] == ["b", "a"]
    assert [p.title for p in repo.list_published(str(tag.id))] == ["b", "a"]
    assert [p.title for p in repo.list(str(tag.id), False)] == ["hidden", "b", "a"]


def test_list_with_malformed_tag_id(session):
    with pytest.raises(ValueError):
        PostRepository(session).list("python", True)


def test_archives_bucket_by_month(session, make_post):
    make_post("jan-1", datetime(2023, 1, 5))
    make_post("jan-2", datetime(2023, 1, 25))
    make_post("feb-1", datetime(2023, 2, 1))
    make_post("feb-draft", datetime(2023, 2, 2), published=False)

    archives = PostRepository(session).list_archives()

    assert archives == [
        ArchiveRead(archive_date=date(2023, 2, 1), year=2023, month=2, total=1),
        ArchiveRead(archive_date=date(2023, 1, 1), year=2023, month=1, total=2),
    ]


def test_archives_order_across_years(session, make_post):
    make_post("old", datetime(2022, 12, 31))
    make_post("new", datetime(2023, 1, 1))

    archives = PostRepository(session).list_archives()
    assert [(a.year, a.month) for a in archives] == [(2023, 1), (2022, 12)]


def test_archives_or_empty_swallows_failure(session, monkeypatch, caplog):
    repo = PostRepository(session)

    def boom():
        raise RuntimeError("db down")

    monkeypatch.setattr(repo, "list_archives", boom)
    assert repo.list_archives_or_empty() == []
    assert "Listing post archives failed" in caplog.text


def test_list_by_archive_pads_month(session, make_post):
    make_post("early", datetime(2023, 2, 1))
    make_post("late", datetime(2023, 2, 28))
    make_post("draft", datetime(2023, 2, 15), published=False)
    make_post("march", datetime(2023, 3, 1))

    repo = PostRepository(session)
    assert [p.title for p in repo.list_by_archive("2023", "2")] == ["late", "early"]
    assert [p.title for p in repo.list_by_archive("2023", "02")] == ["late", "early"]
    assert repo.list_by_archive("2024", "2") == []


def test_list_by_archive_rejects_bad_input(session):
    repo = PostRepository(session)
    with pytest.raises(ValueError):
        repo.list_by_archive("2023", "13")
    with pytest.raises(ValueError):
        repo.list_by_archive("year", "1")


def test_count_after_inserts_and_deletes(session, make_post):
    repo = PostRepository(session)
    first = make_post("1")
    make_post("2", published=False)
    make_post("3")
    assert repo.count() == 3

    repo.delete(first)
    assert repo.count() == 2
    with pytest.raises(NoResultFound):
        repo.get_by_id(first.id)


def test_excerpt_strips_markup_and_truncates(session, make_post):
    body = "# Title\n\nSome **bold** text with <span class='x'>inline html</span>. " + "word " * 200
    post = make_post("long", body=body)

    excerpt = post.excerpt()

    assert "<" not in excerpt and ">" not in excerpt
    assert excerpt.endswith("...")
    assert len(excerpt) == 300 + len("...")
    assert excerpt.startswith("Title")
    assert "inline html" in excerpt
