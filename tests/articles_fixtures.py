"""
Seed rows shared by the store, service and endpoint tests.

Ids are fixed so tests can address rows directly; timestamps are
timezone-aware so they compare equal to what the API returns.
"""
from datetime import datetime, timezone


def make_users() -> list[dict]:
    return [
        {"id": 1, "fullname": "Sam Gamgee", "username": "sam.gamgee", "nickname": "Sam"},
        {"id": 2, "fullname": "Peregrin Took", "username": "peregrin.took", "nickname": "Pippin"},
        {"id": 3, "fullname": "Bilbo Baggins", "username": "bilbo.baggins", "nickname": "Bill"},
    ]


def make_articles() -> list[dict]:
    return [
        {
            "id": 1,
            "title": "First test post!",
            "style": "How-to",
            "content": "Lorem ipsum dolor sit amet, consectetur adipisicing elit.",
            "date_published": datetime(2029, 1, 22, 16, 28, 32, 615000, tzinfo=timezone.utc),
            "author_id": 1,
        },
        {
            "id": 2,
            "title": "Second test post!",
            "style": "News",
            "content": "Natus consequuntur deserunt commodi, nobis qui inventore corrupti.",
            "date_published": datetime(2100, 5, 22, 16, 28, 32, 615000, tzinfo=timezone.utc),
            "author_id": 2,
        },
        {
            "id": 3,
            "title": "Third test post!",
            "style": "Listicle",
            "content": "Possimus, voluptate? Necessitatibus dolores iure porro provident.",
            "date_published": datetime(1919, 12, 22, 16, 28, 32, 615000, tzinfo=timezone.utc),
            "author_id": 3,
        },
        {
            "id": 4,
            "title": "Fourth test post!",
            "style": "Story",
            "content": "Ipsum dolor sit amet consectetur adipisicing elit. Earum molestiae.",
            "date_published": datetime(1919, 12, 22, 16, 28, 32, 615000, tzinfo=timezone.utc),
            "author_id": None,
        },
    ]


MALICIOUS_ARTICLE = {
    "id": 911,
    "style": "How-to",
    "date_published": datetime(2030, 6, 1, 12, 0, 0, tzinfo=timezone.utc),
    "title": 'Naughty naughty very naughty <script>alert("xss");</script>',
    "content": (
        'Bad image <img src="https://url.to.file.which/does-not.exist" '
        'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
    ),
}

EXPECTED_SANITIZED_TITLE = (
    'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;'
)


def author_name_for(article: dict) -> str | None:
    names = {u["id"]: u["fullname"] for u in make_users()}
    return names.get(article.get("author_id"))


def assert_article_matches(actual: dict, expected: dict) -> None:
    """Compare a serialised article with a seed dict (timestamps by value)."""
    assert actual["id"] == expected["id"]
    assert actual["title"] == expected["title"]
    assert actual["content"] == expected["content"]
    assert actual["style"] == expected["style"]
    assert actual["author_name"] == author_name_for(expected)
    published = datetime.fromisoformat(actual["date_published"].replace("Z", "+00:00"))
    assert published == expected["date_published"]
    assert set(actual) == {"id", "title", "content", "style", "date_published", "author_name"}

