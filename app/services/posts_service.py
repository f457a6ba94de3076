import logging
from typing import List, Optional

from app.schemas.blog import PostDetail, PostSummary, PostUpsert

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_posts(self) -> List[PostSummary]:
        return [PostSummary.model_validate(row) for row in self.repo.list_summaries()]

    def get_post(self, post_id: str) -> Optional[PostDetail]:
        post = self.repo.get(post_id)
        if post is None:
            return None
        return PostDetail.model_validate(post)

    def save_post(self, payload: PostUpsert) -> PostDetail:
        row = self.repo.upsert(
            id=payload.id,
            title=payload.title,
            content=payload.content,
            excerpt=payload.excerpt or "",
            tags=payload.tags,
        )
        logger.info(f"Saved post {payload.id}")
        return PostDetail.model_validate(row)

    def delete_post(self, post_id: str) -> bool:
        deleted_id = self.repo.delete(post_id)
        if deleted_id is None:
            return False
        logger.info(f"Deleted post {post_id}")
        return True
