from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blogful.database import Base

# Labels the editors use today. Only presence of ``style`` is enforced; the
# column stays a free string so new labels need no migration.
ARTICLE_STYLES: tuple[str, ...] = ("Listicle", "How-to", "News", "Interview", "Story")


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------
class User(Base):
    __tablename__ = "blogful_users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    fullname: Mapped[str] = mapped_column(Text, nullable=False)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    nickname: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date_created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # lazy="raise": the article store joins explicitly
    articles: Mapped[List["Article"]] = relationship(
        "Article", back_populates="author", lazy="raise"
    )


# ---------------------------------------------------------------------------
# Article
# ---------------------------------------------------------------------------
class Article(Base):
    __tablename__ = "blogful_articles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    style: Mapped[str] = mapped_column(String(50), nullable=False)
    date_published: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Foreign key
    author_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("blogful_users.id", ondelete="SET NULL"), nullable=True
    )

    author: Mapped[Optional["User"]] = relationship(
        "User", back_populates="articles", lazy="raise"
    )
    comments: Mapped[List["Comment"]] = relationship(
        "Comment", back_populates="article", lazy="raise", passive_deletes=True
    )


# ---------------------------------------------------------------------------
# Comment
# ---------------------------------------------------------------------------
class Comment(Base):
    __tablename__ = "blogful_comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    date_commented: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    # Foreign keys; comments go away with their article or their user
    article_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("blogful_articles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("blogful_users.id", ondelete="CASCADE"), nullable=False
    )

    article: Mapped["Article"] = relationship("Article", back_populates="comments", lazy="raise")
