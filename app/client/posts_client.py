import logging
import urllib.parse
from typing import Callable, List, Optional

import httpx

from app.client.credentials import AdminCredentials
from app.client.models import BlogPost
from app.security import API_KEY_NAME

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = httpx.Timeout(10.0, connect=5.0)


def log_notice(message: str) -> None:
    logger.warning(message)


def _post_path(post_id: str) -> str:
    return f"/posts/{urllib.parse.quote(post_id, safe='')}"


class PostsClient:
    """HTTP client for the posts API.

    Reads never raise: a failed list is ``[]`` and a failed get is ``None``.
    Writes return ``True``/``False`` and report problems through ``notify``.
    """

    def __init__(
        self,
        base_url: str,
        credentials: Optional[AdminCredentials] = None,
        *,
        notify: Callable[[str], None] = log_notice,
        http_client: Optional[httpx.Client] = None,
    ):
        self.credentials = credentials or AdminCredentials()
        self.notify = notify
        self.http = http_client or httpx.Client(
            base_url=base_url.rstrip("/"), timeout=DEFAULT_TIMEOUT
        )

    def close(self) -> None:
        self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def get_posts(self) -> List[BlogPost]:
        try:
            res = self.http.get("/posts")
            res.raise_for_status()
            return [BlogPost.from_wire(record) for record in res.json()]
        except Exception as e:
            logger.error(f"Failed to fetch posts: {e}")
            return []

    def get_post(self, post_id: str) -> Optional[BlogPost]:
        try:
            res = self.http.get(_post_path(post_id))
            if not res.is_success:
                return None
            return BlogPost.from_wire(res.json())
        except Exception as e:
            logger.error(f"Failed to fetch post {post_id}: {e}")
            return None

    def save_post(self, post: dict) -> bool:
        return self._send_admin("POST", "/posts", "save", json=post)

    def delete_post(self, post_id: str) -> bool:
        return self._send_admin("DELETE", _post_path(post_id), "delete")

    def _send_admin(self, method: str, url: str, action: str, **kwargs) -> bool:
        key = self.credentials.ensure()
        if not key:
            self.notify(f"Admin key required to {action}")
            return False

        try:
            res = self.http.request(
                method, url, headers={API_KEY_NAME: key}, **kwargs
            )
        except httpx.HTTPError as e:
            logger.error(f"{method} {url} failed: {e}")
            self.notify(f"Failed to {action} post")
            return False

        if res.status_code == 403:
            self.credentials.clear()
            self.notify("Invalid admin key")
            return False
        if not res.is_success:
            logger.error(f"{method} {url} returned {res.status_code}")
            self.notify(f"Failed to {action} post")
            return False
        return True
