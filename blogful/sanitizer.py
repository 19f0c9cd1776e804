"""
HTML sanitisation for free-text article fields.

Tags outside the allow-list are escaped rather than dropped, so a
``<script>`` block survives as readable text (``&lt;script&gt;...``) but can
never execute. Attributes outside the allow-list (``onerror``, ``onclick``,
``style`` ...) are removed from the tags that are kept. Running the result
through ``sanitize`` again returns it unchanged.
"""
import bleach

ALLOWED_TAGS: frozenset[str] = frozenset(
    {
        "a", "abbr", "b", "blockquote", "br", "code", "em", "h1", "h2", "h3",
        "h4", "h5", "h6", "hr", "i", "img", "li", "ol", "p", "pre", "s",
        "strong", "sub", "sup", "u", "ul",
    }
)

ALLOWED_ATTRIBUTES: dict[str, list[str]] = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

ALLOWED_PROTOCOLS: frozenset[str] = frozenset({"http", "https", "mailto"})


def sanitize(text: str | None) -> str:
    """Return *text* with executable markup neutralised."""
    if not text:
        return ""
    return bleach.clean(
        text,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=False,
        strip_comments=True,
    )
