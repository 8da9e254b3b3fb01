import logging
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence

from dateutil import parser as dtparse

from app.schemas.blog import BlogPost
from app.services.html_rules import DEFAULT_RULES, ImageRules
from app.services.image_extractor import extract_valid_image
from app.utils import calculate_reading_time, extract_excerpt, slugify

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Untitled Post"
DEFAULT_TAGS = ["Blog"]


def normalize_item(
    item: dict,
    index: int,
    *,
    source: str = "medium",
    rules: ImageRules = DEFAULT_RULES,
) -> BlogPost:
    """Turn one raw feed item into a BlogPost."""
    content = item.get("content:encoded") or item.get("content") or ""
    title = item.get("title") or ""

    return BlogPost(
        id=item.get("guid") or f"{source}-{index}",
        title=title or DEFAULT_TITLE,
        slug=_derive_slug(title, index),
        date=_convert_date(item.get("pubDate") or item.get("isoDate")),
        excerpt=extract_excerpt(content),
        content=content,
        tags=_normalize_tags(item.get("categories")),
        readTime=calculate_reading_time(content),
        imageUrl=extract_valid_image(content, rules),
        mediumUrl=item.get("link") or item.get("guid") or None,
    )


def normalize_items(
    items: Iterable[dict],
    *,
    source: str = "medium",
    rules: ImageRules = DEFAULT_RULES,
) -> List[BlogPost]:
    posts = []
    for index, item in enumerate(items):
        try:
            posts.append(normalize_item(item, index, source=source, rules=rules))
        except Exception as e:
            logger.warning(f"Failed to normalize feed item {index}: {e}")
    return assign_unique_slugs(posts)


def assign_unique_slugs(posts: Sequence[BlogPost]) -> List[BlogPost]:
    """
    Keep the first post's slug and suffix later duplicates with -2, -3, ...
    Order of the input decides who keeps the bare slug.
    """
    taken = set()
    unique = []
    for post in posts:
        slug = post.slug
        if slug in taken:
            n = 2
            while f"{post.slug}-{n}" in taken:
                n += 1
            slug = f"{post.slug}-{n}"
            logger.info(f"Slug collision for '{post.slug}', using '{slug}'")
            post = post.model_copy(update={"slug": slug})
        taken.add(slug)
        unique.append(post)
    return unique


def sort_by_date(posts: Iterable[BlogPost]) -> List[BlogPost]:
    return sorted(posts, key=lambda p: parse_date(p.date) or _EPOCH, reverse=True)


def parse_date(value) -> Optional[datetime]:
    if not value:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = dtparse.parse(str(value))
        except (ValueError, OverflowError):
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _convert_date(value) -> str:
    dt = parse_date(value)
    if dt is None:
        if value:
            logger.warning(f"Unparseable publish date {value!r}, using current time")
        dt = datetime.now(timezone.utc)
    return dt.isoformat()


def _derive_slug(title: str, index: int) -> str:
    if not title:
        return f"untitled-post-{index}"
    return slugify(title) or f"post-{index}"


def _normalize_tags(value) -> List[str]:
    if not value:
        return list(DEFAULT_TAGS)
    if isinstance(value, str):
        return [value]
    tags = [str(tag) for tag in value if tag]
    return tags or list(DEFAULT_TAGS)


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
