"""Unit tests for input sanitization."""
import pytest

from app.core.sanitization import (
    sanitize_text,
    sanitize_topic,
    sanitize_username,
    sanitize_message,
    MAX_TOPIC_LENGTH,
    MAX_MESSAGE_LENGTH,
)


@pytest.mark.unit
class TestSanitizeText:
    """Test generic text sanitization."""

    def test_strips_html_tags(self):
        assert sanitize_text("<b>Bold</b> topic") == "Bold topic"

    def test_normalizes_whitespace(self):
        assert sanitize_text("  many   spaces\nhere ") == "many spaces here"

    def test_rejects_leftover_brackets(self):
        with pytest.raises(ValueError, match="invalid HTML-like"):
            sanitize_text("a < b")

    def test_max_length(self):
        with pytest.raises(ValueError, match="maximum length"):
            sanitize_text("x" * 11, max_length=10)

    def test_non_string(self):
        with pytest.raises(ValueError):
            sanitize_text(42)


@pytest.mark.unit
class TestFieldSanitizers:
    """Test field-specific sanitizers."""

    def test_topic(self):
        assert sanitize_topic("  Intro to <i>Python</i> ") == "Intro to Python"

    def test_topic_empty(self):
        with pytest.raises(ValueError, match="Topic cannot be empty"):
            sanitize_topic("<p></p>")

    def test_topic_too_long(self):
        with pytest.raises(ValueError):
            sanitize_topic("t" * (MAX_TOPIC_LENGTH + 1))

    def test_username_empty(self):
        with pytest.raises(ValueError, match="Username cannot be empty"):
            sanitize_username("   ")

    def test_message_keeps_brackets_and_newlines(self):
        assert sanitize_message("  if a < b:\n    return b > a  ") == "if a < b:\n    return b > a"

    def test_message_too_long(self):
        with pytest.raises(ValueError):
            sanitize_message("m" * (MAX_MESSAGE_LENGTH + 1))
