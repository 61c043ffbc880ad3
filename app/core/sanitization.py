"""Input sanitization utilities."""
import re
from typing import Optional


# Maximum length constraints
MAX_TOPIC_LENGTH = 200
MAX_USERNAME_LENGTH = 50
MAX_MESSAGE_LENGTH = 2000
MAX_URL_LENGTH = 500


def sanitize_text(text: str, max_length: Optional[int] = None, strip_html: bool = True) -> str:
    """
    Sanitize text input to prevent XSS attacks.

    Note: This function strips HTML tags and normalizes whitespace, but does NOT
    escape HTML entities because the frontend escapes output when rendering.

    Args:
        text: The input text to sanitize
        max_length: Optional maximum length to enforce
        strip_html: Whether to strip HTML tags (default True)

    Returns:
        Sanitized text with HTML tags removed and whitespace normalized

    Raises:
        ValueError: If text exceeds max_length or contains dangerous patterns
    """
    if not isinstance(text, str):
        raise ValueError("Input must be a string")

    sanitized = text.strip()

    if max_length and len(sanitized) > max_length:
        raise ValueError(f"Input exceeds maximum length of {max_length} characters")

    if strip_html:
        sanitized = re.sub(r'<[^>]*>', '', sanitized)

    # Reject inputs that still contain HTML-like patterns after stripping
    if '<' in sanitized or '>' in sanitized:
        raise ValueError("Input contains invalid HTML-like patterns")

    sanitized = re.sub(r'\s+', ' ', sanitized)

    return sanitized


def sanitize_topic(topic: str) -> str:
    """
    Sanitize a lecture topic.

    Raises:
        ValueError: If the topic is empty or too long
    """
    sanitized = sanitize_text(topic, max_length=MAX_TOPIC_LENGTH)

    if not sanitized:
        raise ValueError("Topic cannot be empty")

    return sanitized


def sanitize_username(username: str) -> str:
    """
    Sanitize a username.

    Raises:
        ValueError: If the username is empty or too long
    """
    sanitized = sanitize_text(username, max_length=MAX_USERNAME_LENGTH)

    if not sanitized:
        raise ValueError("Username cannot be empty")

    return sanitized


def sanitize_message(content: str, max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """
    Trim free-form text such as discussion posts and feedback comments.

    Unlike sanitize_text, angle brackets and line breaks are kept so that
    messages like "a < b" survive intact.
    """
    if not isinstance(content, str):
        raise ValueError("Input must be a string")

    sanitized = content.strip()

    if len(sanitized) > max_length:
        raise ValueError(f"Input exceeds maximum length of {max_length} characters")

    return sanitized
