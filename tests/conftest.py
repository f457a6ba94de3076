import copy
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from fastapi import FastAPI

from app import dependencies as deps
from app.errors import register_error_handlers
from app.routers import posts
from app.security import get_admin_check, secret_matches
from app.services.posts_service import PostsService

ADMIN_SECRET = "secret"


class FakeClock:
    """Returns a strictly increasing timestamp on every call."""

    def __init__(self, start=None):
        self.current = start or datetime(2025, 1, 5, 12, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.current = self.current + timedelta(seconds=1)
        return self.current


class FakePostsRepo:
    """
    In-memory posts table with the same upsert/delete semantics as PostsRepo.
    """

    def __init__(self, rows=None, clock=None):
        self.clock = clock or FakeClock()
        self.rows = {row["id"]: dict(row) for row in (rows or [])}

    def list_summaries(self):
        ordered = sorted(self.rows.values(), key=lambda r: r["created_at"], reverse=True)
        return [
            {k: v for k, v in row.items() if k != "content"} for row in ordered
        ]

    def get(self, post_id):
        row = self.rows.get(post_id)
        return SimpleNamespace(**row) if row else None

    def upsert(self, *, id, title, content, excerpt, tags):
        now = self.clock()
        existing = self.rows.get(id)
        row = {
            "id": id,
            "title": title,
            "content": content,
            "excerpt": excerpt,
            "tags": list(tags),
            "created_at": existing["created_at"] if existing else now,
            "updated_at": now,
        }
        self.rows[id] = row
        return dict(row)

    def delete(self, post_id):
        return post_id if self.rows.pop(post_id, None) else None

    def snapshot(self):
        return copy.deepcopy(self.rows)


class FakeResult:
    def __init__(self, value=None, row=None):
        self.value = value
        self.row = row

    def scalar_one_or_none(self):
        return self.value

    def mappings(self):
        return self

    def one(self):
        return self.row


class FakeQuery:
    def __init__(self, rows):
        self.rows = rows
        self.ordered_by = None

    def order_by(self, *clauses):
        self.ordered_by = clauses
        return self

    def all(self):
        return self.rows


class FakeSession:
    """
    Lightweight SQLAlchemy Session stand-in for repository tests.
    """

    def __init__(self, rows=None, record_map=None, execute_result=None, fail_with=None):
        self.rows = rows or []
        self.record_map = record_map or {}
        self.execute_result = execute_result or FakeResult()
        self.fail_with = fail_with
        self.executed_stmt = None
        self.committed = False
        self.rolled_back = False
        self.last_query = None
        self.queried_columns = None

    def query(self, *cols):
        self.queried_columns = cols
        self.last_query = FakeQuery(self.rows)
        return self.last_query

    def get(self, model, key):
        return self.record_map.get(key)

    def execute(self, stmt):
        self.executed_stmt = stmt
        if self.fail_with:
            raise self.fail_with
        return self.execute_result

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True


class FakePostsService:
    """
    Posts service stand-in that raises a chosen error from every method.
    """

    def __init__(self, error):
        self.error = error

    def list_posts(self):
        raise self.error

    def get_post(self, post_id):
        raise self.error

    def save_post(self, payload):
        raise self.error

    def delete_post(self, post_id):
        raise self.error


def make_row(post_id, title="Title", content="<p>Body</p>", minutes=0, **extra):
    created = datetime(2025, 1, 1, tzinfo=timezone.utc) + timedelta(minutes=minutes)
    row = {
        "id": post_id,
        "title": title,
        "content": content,
        "excerpt": "Body",
        "tags": [],
        "created_at": created,
        "updated_at": created,
    }
    row.update(extra)
    return row


def make_app(service=None, repo=None, admin_check=None):
    app = FastAPI()
    register_error_handlers(app)
    if service is None:
        service = PostsService(repo=repo if repo is not None else FakePostsRepo())
    app.dependency_overrides[deps.get_posts_service] = lambda: service
    app.dependency_overrides[get_admin_check] = lambda: (
        admin_check or secret_matches(ADMIN_SECRET)
    )
    app.include_router(posts.router)
    return app
