"""Development seeder: fills the blogful tables with users, articles and comments."""
import argparse
import asyncio
import logging
import random
import time
from datetime import datetime, timezone, timedelta

from blogful.database import engine, async_session, Base
from blogful.logging_config import setup_logging
from blogful.models import ARTICLE_STYLES, Article, Comment, User

logger = logging.getLogger("blogful.seed")

AUTHORS = [
    ("Dunder Mifflin", "dunder", "Dundy"),
    ("Bodeep Deboop", "b.deboop", "Bo"),
    ("Charlie Bloggs", "c.bloggs", "Charlie"),
    ("Sam Smith", "s.smith", "Sam"),
    ("Alex Taylor", "lexlor", "Lex"),
    ("Ping Won In", "wippy", "Ping"),
]

TOPICS = ["gardening", "sourdough", "bicycles", "tide pools", "typewriters", "knots"]


async def seed(num_articles: int, max_comments: int, reset: bool) -> None:
    start = time.perf_counter()

    async with engine.begin() as conn:
        if reset:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        users = [
            User(fullname=fullname, username=username, nickname=nickname)
            for fullname, username, nickname in AUTHORS
        ]
        session.add_all(users)
        await session.flush()
        logger.info("Created %d users", len(users))

        articles = []
        for i in range(num_articles):
            topic = random.choice(TOPICS)
            articles.append(
                Article(
                    title=f"Article {i}: notes on {topic}",
                    content=f"Everything I learned this week about {topic}. " * 10,
                    style=random.choice(ARTICLE_STYLES),
                    date_published=datetime.now(timezone.utc) - timedelta(days=random.randint(0, 365)),
                    author_id=random.choice(users).id,
                )
            )
        session.add_all(articles)
        await session.flush()
        logger.info("Created %d articles", len(articles))

        total_comments = 0
        for article in articles:
            for _ in range(random.randint(0, max_comments)):
                session.add(
                    Comment(
                        text=f"Thanks for writing about {article.title.split(': ')[-1]}!",
                        article_id=article.id,
                        user_id=random.choice(users).id,
                    )
                )
                total_comments += 1
        await session.commit()
        logger.info("Created %d comments", total_comments)

    await engine.dispose()
    logger.info("Seeding complete in %.1fs", time.perf_counter() - start)


def main():
    parser = argparse.ArgumentParser(description="Seed the blogful database")
    parser.add_argument("--articles", type=int, default=20, help="Number of articles to create")
    parser.add_argument("--max-comments", type=int, default=3, help="Max comments per article")
    parser.add_argument("--reset", action="store_true", help="Drop all tables before seeding")
    args = parser.parse_args()

    setup_logging()
    asyncio.run(seed(args.articles, args.max_comments, args.reset))


if __name__ == "__main__":
    main()
