from fastapi import Depends

from app.db.postgres.base import get_db
from app.repos.posts_repo import PostsRepo
from app.services.posts_service import PostsService


def get_posts_repo(db=Depends(get_db)):
    return PostsRepo(db)


def get_posts_service(repo=Depends(get_posts_repo)):
    return PostsService(repo=repo)
