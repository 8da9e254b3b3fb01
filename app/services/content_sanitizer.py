import logging
import re

from app.services.html_rules import DEFAULT_RULES, ImageRules
from app.services.image_extractor import IMG_TAG_PATTERN, is_tracking_source

logger = logging.getLogger(__name__)

NOSCRIPT_PATTERN = re.compile(r"<noscript\b[^>]*>.*?</noscript\s*>", re.IGNORECASE | re.DOTALL)
OPEN_TAG_PATTERN = re.compile(r"<([a-zA-Z][\w:-]*)([^>]*)>")
# One attribute per match, quoted values consumed whole
ATTRIBUTE_PATTERN = re.compile(r"""\s+([^\s=>]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>]+))?""")
PROTOCOL_RELATIVE_SRC_PATTERN = re.compile(r"""((?<![\w-])src\s*=\s*["'])//""", re.IGNORECASE)
CLASS_ATTR_PATTERN = re.compile(r"""(\bclass\s*=\s*)(["'])(.*?)\2""", re.IGNORECASE | re.DOTALL)
WHITESPACE_PATTERN = re.compile(r"\s+")


def _remove_tracking_images(html: str, rules: ImageRules) -> str:
    def replace(match: re.Match) -> str:
        src = match.group(1) if match.group(1) is not None else match.group(2)
        return "" if is_tracking_source(src or "", rules) else match.group(0)

    return IMG_TAG_PATTERN.sub(replace, html)


def _drop_data_attribute(match: re.Match) -> str:
    return "" if match.group(1).lower().startswith("data-") else match.group(0)


def _strip_data_attributes(html: str) -> str:
    def replace(match: re.Match) -> str:
        attributes = ATTRIBUTE_PATTERN.sub(_drop_data_attribute, match.group(2))
        return f"<{match.group(1)}{attributes}>"

    return OPEN_TAG_PATTERN.sub(replace, html)


def _add_class(attributes: str, classes: str) -> str:
    if CLASS_ATTR_PATTERN.search(attributes):
        return CLASS_ATTR_PATTERN.sub(
            lambda m: f"{m.group(1)}{m.group(2)}{(m.group(3) + ' ' + classes).strip()}{m.group(2)}",
            attributes,
            count=1,
        )
    return f'{attributes} class="{classes}"'


def _inject_classes(html: str, tag: str, classes: str) -> str:
    pattern = re.compile(rf"<({tag})(?=[\s/>])([^>]*)>", re.IGNORECASE)

    def replace(match: re.Match) -> str:
        name, attributes = match.group(1), match.group(2)
        closing = ""
        stripped = attributes.rstrip()
        if stripped.endswith("/"):
            attributes, closing = stripped[:-1].rstrip(), " /"
        return f"<{name}{_add_class(attributes, classes)}{closing}>"

    return pattern.sub(replace, html)


def sanitize_for_display(html: str, rules: ImageRules = DEFAULT_RULES) -> str:
    """
    Clean feed HTML for rendering.

    Steps run in order: drop tracking <img> tags, drop <noscript> blocks,
    strip data-* attributes, force https on protocol-relative sources, add
    presentation classes, collapse whitespace. Regex based and best effort:
    malformed markup comes back partially transformed, never as an error.
    """
    if not html:
        return ""

    content = _remove_tracking_images(html, rules)
    content = NOSCRIPT_PATTERN.sub("", content)
    content = _strip_data_attributes(content)
    content = PROTOCOL_RELATIVE_SRC_PATTERN.sub(r"\1https://", content)
    for tag, classes in rules.classes.items():
        content = _inject_classes(content, tag, classes)
    content = WHITESPACE_PATTERN.sub(" ", content).strip()

    logger.debug(f"Sanitized content from {len(html)} to {len(content)} chars")
    return content
