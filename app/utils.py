import math
import random
import string
import time
from datetime import datetime
from typing import Optional

from bs4 import BeautifulSoup

EXCERPT_LENGTH = 180
EXCERPT_MARKER = "..."
WORDS_PER_MINUTE = 200

_ID_ALPHABET = string.digits + string.ascii_lowercase


def html_to_text(html: str) -> str:
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text()


def generate_excerpt(html: str) -> str:
    text = html_to_text(html).strip()
    if len(text) > EXCERPT_LENGTH:
        return text[:EXCERPT_LENGTH] + EXCERPT_MARKER
    return text


def calculate_reading_time(html: str) -> str:
    words = html_to_text(html).split()
    minutes = math.ceil(len(words) / WORDS_PER_MINUTE) or 1
    return f"{minutes} min read"


def generate_post_id(now_ms: Optional[int] = None) -> str:
    """Time-based id with a random suffix; not collision-proof."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    suffix = "".join(random.choices(_ID_ALPHABET, k=7))
    return f"post_{now_ms}_{suffix}"


def format_date(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return f"{value:%b} {value.day}, {value.year}"
