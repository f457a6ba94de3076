from dataclasses import dataclass, field
from typing import List, Optional

from app.client.posts_client import PostsClient
from app.utils import calculate_reading_time, format_date

DEFAULT_READ_TIME = "1 min read"


@dataclass
class PostCard:
    id: str
    title: str
    date: str
    read_time: str
    excerpt: str = ""
    tags: List[str] = field(default_factory=list)


@dataclass
class PostView:
    id: str
    title: str
    date: str
    read_time: str
    content: str
    tags: List[str] = field(default_factory=list)

    @property
    def page_title(self) -> str:
        return f"{self.title} - Void Blog"


def list_cards(client: PostsClient) -> List[PostCard]:
    """Cards for the listing page; an empty list means show the empty state."""
    return [
        PostCard(
            id=post.id,
            title=post.title,
            date=format_date(post.created_at),
            # summaries carry no content, so the estimate falls back
            read_time=(
                calculate_reading_time(post.content)
                if post.content
                else DEFAULT_READ_TIME
            ),
            excerpt=post.excerpt,
            tags=post.tags,
        )
        for post in client.get_posts()
    ]


def load_post_view(client: PostsClient, post_id: Optional[str]) -> Optional[PostView]:
    if not post_id:
        return None
    post = client.get_post(post_id)
    if post is None:
        return None
    content = post.content or ""
    return PostView(
        id=post.id,
        title=post.title,
        date=format_date(post.created_at),
        read_time=calculate_reading_time(content),
        content=content,
        tags=post.tags,
    )
