import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app import dependencies as deps
from app.db.postgres.base import handle_db_fault
from app.schemas.blog import DeleteResult, PostDetail, PostSummary, PostUpsert
from app.security import require_admin
from app.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


def _storage_error(error: Exception, message: str) -> HTTPException:
    handle_db_fault(error)
    return HTTPException(status_code=500, detail=message)


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts without their content, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise _storage_error(e, "Failed to fetch posts")


@router.get("/posts/{post_id}", response_model=PostDetail)
def get_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by id."""
    try:
        post = service.get_post(post_id)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        raise _storage_error(e, "Failed to fetch post")


@router.post(
    "/posts", response_model=PostDetail, dependencies=[Depends(require_admin)]
)
def save_post(
    payload: PostUpsert,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Create a post, or overwrite the one with the same id."""
    try:
        return service.save_post(payload)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error saving post {payload.id}: {e}")
        raise _storage_error(e, "Failed to save post")


@router.delete(
    "/posts/{post_id}",
    response_model=DeleteResult,
    dependencies=[Depends(require_admin)],
)
def delete_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        if not service.delete_post(post_id):
            raise HTTPException(status_code=404, detail="Post not found")
        return DeleteResult(id=post_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error deleting post {post_id}: {e}")
        raise _storage_error(e, "Failed to delete post")
