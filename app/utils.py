import math
import re

WORDS_PER_MINUTE = 200
EXCERPT_LENGTH = 200

_TAG_PATTERN = re.compile(r"<[^>]*>")
_NON_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def strip_tags(html: str) -> str:
    """Drop markup tags and any stray angle brackets. Entities are left as-is."""
    text = _TAG_PATTERN.sub("", html or "")
    return text.replace("<", "").replace(">", "")


def slugify(title: str) -> str:
    slug = _NON_SLUG_PATTERN.sub("-", (title or "").lower())
    return slug.strip("-")


def extract_excerpt(html: str, max_length: int = EXCERPT_LENGTH) -> str:
    # Cuts at the character boundary, so the excerpt may end mid-word.
    text = strip_tags(html).strip()
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def calculate_reading_time(html: str) -> str:
    words = strip_tags(html).split()
    minutes = max(1, math.ceil(len(words) / WORDS_PER_MINUTE))
    return f"{minutes} min read"
