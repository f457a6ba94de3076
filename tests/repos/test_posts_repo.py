from types import SimpleNamespace

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from app.models.post import Post
from app.repos.posts_repo import SUMMARY_COLUMNS, PostsRepo
from tests.conftest import FakeResult, FakeSession


def _sql(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


def test_list_summaries_projects_without_content_and_orders_newest_first():
    row = SimpleNamespace(_mapping={"id": "p1", "title": "T"})
    session = FakeSession(rows=[row])
    repo = PostsRepo(session)

    result = repo.list_summaries()

    assert result == [{"id": "p1", "title": "T"}]
    assert "content" not in [col.key for col in session.queried_columns]
    assert session.queried_columns == SUMMARY_COLUMNS
    (order,) = session.last_query.ordered_by
    assert "created_at DESC" in str(order)


def test_get_returns_row_or_none():
    post = Post(id="p1", title="T", content="<p>x</p>")
    repo = PostsRepo(FakeSession(record_map={"p1": post}))

    assert repo.get("p1") is post
    assert repo.get("missing") is None


def test_upsert_executes_on_conflict_update_and_commits():
    row = {"id": "p1", "title": "T", "content": "<p>x</p>"}
    session = FakeSession(execute_result=FakeResult(row=row))
    repo = PostsRepo(session)

    result = repo.upsert(
        id="p1", title="T", content="<p>x</p>", excerpt="x", tags=["a"]
    )

    assert result == row
    assert session.committed is True
    sql = _sql(session.executed_stmt)
    assert "INSERT INTO posts" in sql
    assert "ON CONFLICT (id) DO UPDATE SET" in sql
    assert "RETURNING" in sql


def test_upsert_never_overwrites_created_at():
    session = FakeSession(execute_result=FakeResult(row={}))
    PostsRepo(session).upsert(id="p1", title="T", content="c", excerpt="", tags=[])

    update_clause = _sql(session.executed_stmt).split("DO UPDATE SET", 1)[1]
    assert "created_at" not in update_clause.split("RETURNING", 1)[0]
    assert "updated_at = now()" in update_clause


def test_upsert_rolls_back_and_reraises_on_failure():
    error = OperationalError("INSERT", {}, Exception("connection lost"))
    session = FakeSession(fail_with=error)
    repo = PostsRepo(session)

    with pytest.raises(OperationalError):
        repo.upsert(id="p1", title="T", content="c", excerpt="", tags=[])

    assert session.rolled_back is True
    assert session.committed is False


def test_delete_returns_deleted_id():
    session = FakeSession(execute_result=FakeResult(value="p1"))
    repo = PostsRepo(session)

    assert repo.delete("p1") == "p1"
    assert session.committed is True
    assert _sql(session.executed_stmt).startswith("DELETE FROM posts")


def test_delete_returns_none_when_nothing_matched():
    session = FakeSession(execute_result=FakeResult(value=None))

    assert PostsRepo(session).delete("nope") is None
