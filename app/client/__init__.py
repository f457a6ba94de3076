from app.client.credentials import AdminCredentials
from app.client.models import BlogPost
from app.client.posts_client import PostsClient

__all__ = ["AdminCredentials", "BlogPost", "PostsClient"]
