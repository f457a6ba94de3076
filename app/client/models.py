from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


def _parse_timestamp(value) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value).replace("Z", "+00:00"))


@dataclass
class BlogPost:
    id: str
    title: str
    excerpt: str = ""
    tags: List[str] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    content: Optional[str] = None  # absent on list results

    @classmethod
    def from_wire(cls, record: dict) -> "BlogPost":
        return cls(
            id=record["id"],
            title=record.get("title") or "",
            excerpt=record.get("excerpt") or "",
            tags=list(record.get("tags") or []),
            created_at=_parse_timestamp(record.get("createdAt")),
            updated_at=_parse_timestamp(record.get("updatedAt")),
            content=record.get("content"),
        )
