"""
Heuristic tables used to tell real article images from tracking beacons and
to style feed HTML. They were tuned against Medium's RSS output; treat them as
data and extend them through settings rather than editing the matching code.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple

# Substrings that mark an image URL as a view/analytics beacon.
TRACKING_SIGNATURES: Tuple[str, ...] = (
    "/_/stat",
    "?event=",
    "analytics",
    "tracking",
    "pixel",
    "1x1",
    "transparent",
    "medium.com/_/stat",
    "referrerSource=full_rss",
)

# A .gif whose URL also mentions "stat" is a beacon even without the other markers.
TRACKING_GIF_MARKER = "stat"

CONTENT_IMAGE_HOSTS: Tuple[str, ...] = (
    "cdn-images-1.medium.com",
    "miro.medium.com",
    "medium.com/max/",
)

STOCK_PHOTO_HOSTS: Tuple[str, ...] = (
    "unsplash.com",
    "pexels.com",
    "pixabay.com",
)

IMAGE_EXTENSIONS: Tuple[str, ...] = ("jpg", "jpeg", "png", "webp", "gif")

PRESENTATION_CLASSES: Dict[str, str] = {
    "img": "blog-image",
    "p": "mb-4 leading-relaxed",
    "h1": "text-3xl font-bold mt-8 mb-4",
    "h2": "text-2xl font-bold mt-6 mb-3",
    "h3": "text-xl font-bold mt-5 mb-2",
    "a": "text-cyan-600 hover:text-cyan-800 underline",
    "blockquote": "border-l-4 border-cyan-400 pl-4 italic my-4",
    "code": "bg-gray-100 text-cyan-700 px-1 py-0.5 rounded text-sm",
    "pre": "bg-gray-900 text-gray-100 p-4 rounded-lg overflow-x-auto my-4",
}


@dataclass(frozen=True)
class ImageRules:
    tracking_signatures: Tuple[str, ...] = TRACKING_SIGNATURES
    content_hosts: Tuple[str, ...] = CONTENT_IMAGE_HOSTS
    stock_hosts: Tuple[str, ...] = STOCK_PHOTO_HOSTS
    extensions: Tuple[str, ...] = IMAGE_EXTENSIONS
    classes: Dict[str, str] = field(default_factory=lambda: dict(PRESENTATION_CLASSES))

    def extended(self, tracking=(), content_hosts=()) -> "ImageRules":
        return ImageRules(
            tracking_signatures=self.tracking_signatures + tuple(tracking),
            content_hosts=self.content_hosts + tuple(content_hosts),
            stock_hosts=self.stock_hosts,
            extensions=self.extensions,
            classes=dict(self.classes),
        )


DEFAULT_RULES = ImageRules()


def rules_from_settings(current_settings) -> ImageRules:
    return DEFAULT_RULES.extended(
        tracking=current_settings.TRACKING_SIGNATURES_EXTRA,
        content_hosts=current_settings.CONTENT_IMAGE_HOSTS_EXTRA,
    )
