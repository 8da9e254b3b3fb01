import logging
import re
from typing import Iterator, Optional

from app.services.html_rules import DEFAULT_RULES, TRACKING_GIF_MARKER, ImageRules

logger = logging.getLogger(__name__)

# Matches an <img> tag and captures its src, double or single quoted.
IMG_TAG_PATTERN = re.compile(
    r"""<img\b[^>]*?(?<![\w-])src\s*=\s*(?:"([^"]*)"|'([^']*)')[^>]*>""",
    re.IGNORECASE,
)


def iter_image_sources(html: str) -> Iterator[str]:
    for match in IMG_TAG_PATTERN.finditer(html or ""):
        src = match.group(1) if match.group(1) is not None else match.group(2)
        if src:
            yield src


def is_tracking_source(src: str, rules: ImageRules = DEFAULT_RULES) -> bool:
    if any(signature in src for signature in rules.tracking_signatures):
        return True
    return src.lower().endswith(".gif") and TRACKING_GIF_MARKER in src


def _has_image_extension(src: str, rules: ImageRules) -> bool:
    pattern = r"\.(?:" + "|".join(map(re.escape, rules.extensions)) + r")(?:\?|$)"
    return re.search(pattern, src, re.IGNORECASE) is not None


def is_content_image(src: str, rules: ImageRules = DEFAULT_RULES) -> bool:
    return (
        any(host in src for host in rules.content_hosts)
        or _has_image_extension(src, rules)
        or any(host in src for host in rules.stock_hosts)
    )


def extract_valid_image(html: str, rules: ImageRules = DEFAULT_RULES) -> Optional[str]:
    """
    Return the first <img> source that looks like a real article image.

    Feed bodies embed invisible view beacons as <img> tags, so the first image
    is usually a 1x1 pixel. Sources are checked in document order: tracking
    signatures reject, known hosts or image extensions accept, anything else
    is skipped. None means the post has no usable image.
    """
    for src in iter_image_sources(html):
        if is_tracking_source(src, rules):
            logger.debug(f"Skipping tracking image: {src}")
            continue
        if is_content_image(src, rules):
            return src
    return None
