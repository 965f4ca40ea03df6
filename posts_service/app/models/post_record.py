"""SQLAlchemy ORM model for the posts table."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from posts_service.app.db.base import Base


class PostRecord(Base):
    """Persistent storage for posts."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str | None] = mapped_column(Text, nullable=True)
