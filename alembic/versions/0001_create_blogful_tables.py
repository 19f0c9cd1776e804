"""Create blogful users, articles and comments tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "blogful_users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("fullname", sa.Text(), nullable=False),
        sa.Column("username", sa.Text(), nullable=False, unique=True),
        sa.Column("password", sa.Text(), nullable=True),
        sa.Column("nickname", sa.Text(), nullable=True),
        sa.Column(
            "date_created", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_table(
        "blogful_articles",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("style", sa.String(50), nullable=False),
        sa.Column(
            "date_published", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "author_id",
            sa.Integer(),
            sa.ForeignKey("blogful_users.id", ondelete="SET NULL"),
            nullable=True,
        ),
    )
    op.create_table(
        "blogful_comments",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "date_commented", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "article_id",
            sa.Integer(),
            sa.ForeignKey("blogful_articles.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("blogful_users.id", ondelete="CASCADE"),
            nullable=False,
        ),
    )
    op.create_index("ix_blogful_comments_article_id", "blogful_comments", ["article_id"])


def downgrade() -> None:
    op.drop_index("ix_blogful_comments_article_id", table_name="blogful_comments")
    op.drop_table("blogful_comments")
    op.drop_table("blogful_articles")
    op.drop_table("blogful_users")
