import logging
from typing import List, Optional

from app.client.posts_client import PostsClient
from app.utils import generate_excerpt, generate_post_id

logger = logging.getLogger(__name__)

EMPTY_CONTENT = {"", "<br>"}


class PostEditor:
    """State behind the post editor screen: title, HTML body and tag pills."""

    def __init__(self, client: PostsClient, edit_id: Optional[str] = None):
        self.client = client
        self.edit_id = edit_id
        self.title = ""
        self.content = ""
        self.tags: List[str] = []

    @classmethod
    def open(cls, client: PostsClient, post_id: Optional[str] = None) -> "PostEditor":
        editor = cls(client)
        if not post_id:
            return editor
        # Editing an id that can't be loaded still saves under that id
        editor.edit_id = post_id
        post = client.get_post(post_id)
        if post:
            editor.title = post.title
            editor.content = post.content or ""
            editor.tags = list(post.tags)
        return editor

    @property
    def can_delete(self) -> bool:
        return self.edit_id is not None

    def add_tag(self, raw: str) -> bool:
        tag = raw.strip().replace(",", "")
        if not tag or tag in self.tags:
            return False
        self.tags.append(tag)
        return True

    def pop_tag(self) -> Optional[str]:
        return self.tags.pop() if self.tags else None

    def remove_tag(self, index: int) -> None:
        if 0 <= index < len(self.tags):
            del self.tags[index]

    def validate(self) -> Optional[str]:
        if not self.title.strip():
            return "Please enter a title"
        if self.content.strip() in EMPTY_CONTENT:
            return "Please write some content"
        return None

    def build_payload(self) -> dict:
        content = self.content.strip()
        return {
            "id": self.edit_id or generate_post_id(),
            "title": self.title.strip(),
            "content": content,
            "excerpt": generate_excerpt(content),
            "tags": list(self.tags),
        }

    def save(self) -> bool:
        problem = self.validate()
        if problem:
            self.client.notify(problem)
            return False

        payload = self.build_payload()
        if not self.client.save_post(payload):
            return False
        # Later saves from the same editor update the same post
        self.edit_id = payload["id"]
        self.client.notify("Post saved successfully")
        return True

    def delete(self) -> bool:
        if not self.can_delete:
            return False
        if not self.client.delete_post(self.edit_id):
            return False
        logger.info(f"Deleted post {self.edit_id} from editor")
        self.client.notify("Post deleted")
        return True
