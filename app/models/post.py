from sqlalchemy import Column, DateTime, String, Text, func, text
from sqlalchemy.dialects.postgresql import ARRAY

from app.db.postgres.base import Base


class Post(Base):
    __tablename__ = "posts"

    id = Column(String(64), primary_key=True)
    title = Column(String(500), nullable=False)
    content = Column(Text, nullable=False)
    excerpt = Column(Text)
    tags = Column(ARRAY(Text), server_default=text("'{}'"))
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
