"""
Sanitiser tests — script tags are escaped, event-handler attributes are
dropped, harmless formatting survives, and a second pass changes nothing.
"""
import pytest

from blogful.sanitizer import sanitize

from articles_fixtures import EXPECTED_SANITIZED_TITLE, MALICIOUS_ARTICLE


def test_script_tag_is_escaped():
    assert sanitize(MALICIOUS_ARTICLE["title"]) == EXPECTED_SANITIZED_TITLE


def test_event_handler_attribute_is_removed():
    cleaned = sanitize(MALICIOUS_ARTICLE["content"])
    assert "onerror" not in cleaned
    assert "document.cookie" not in cleaned
    assert '<img src="https://url.to.file.which/does-not.exist">' in cleaned
    assert "<strong>all</strong>" in cleaned


def test_plain_text_is_untouched():
    text = "Lorem ipsum dolor sit amet, consectetur adipisicing elit."
    assert sanitize(text) == text


def test_javascript_links_lose_their_href():
    cleaned = sanitize('<a href="javascript:alert(1)">click</a>')
    assert "javascript:" not in cleaned
    assert "click" in cleaned


def test_none_and_empty_yield_empty_string():
    assert sanitize(None) == ""
    assert sanitize("") == ""


@pytest.mark.parametrize(
    "text",
    [
        MALICIOUS_ARTICLE["title"],
        MALICIOUS_ARTICLE["content"],
        "Fish & chips <3",
        "<p onclick=\"steal()\">para</p><iframe src='x'></iframe>",
        "<!-- hidden --> visible",
    ],
)
def test_sanitize_is_idempotent(text):
    once = sanitize(text)
    assert sanitize(once) == once
