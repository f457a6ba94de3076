from typing import List, Optional

from sqlalchemy import delete, func
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.orm import Session

from app.models.post import Post

SUMMARY_COLUMNS = (
    Post.id,
    Post.title,
    Post.excerpt,
    Post.tags,
    Post.created_at,
    Post.updated_at,
)


class PostsRepo:
    """SQL access for the posts table. Every write commits before returning."""

    def __init__(self, db: Session):
        self.db = db

    def list_summaries(self) -> List[dict]:
        rows = self.db.query(*SUMMARY_COLUMNS).order_by(Post.created_at.desc()).all()
        return [dict(row._mapping) for row in rows]

    def get(self, post_id: str) -> Optional[Post]:
        return self.db.get(Post, post_id)

    def upsert(
        self, *, id: str, title: str, content: str, excerpt: str, tags: List[str]
    ) -> dict:
        stmt = insert(Post).values(
            id=id,
            title=title,
            content=content,
            excerpt=excerpt,
            tags=tags,
            created_at=func.now(),
            updated_at=func.now(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[Post.id],
            set_={
                "title": stmt.excluded.title,
                "content": stmt.excluded.content,
                "excerpt": stmt.excluded.excerpt,
                "tags": stmt.excluded.tags,
                "updated_at": func.now(),
            },
        ).returning(*Post.__table__.columns)

        try:
            row = self.db.execute(stmt).mappings().one()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return dict(row)

    def delete(self, post_id: str) -> Optional[str]:
        """Remove a post, returning its id or None when nothing matched."""
        stmt = delete(Post).where(Post.id == post_id).returning(Post.id)
        try:
            deleted_id = self.db.execute(stmt).scalar_one_or_none()
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        return deleted_id
