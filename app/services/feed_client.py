"""Outbound access to the blog's syndication feed.

Medium answers server-side requests with 403, so by default the feed is
read through the rss2json conversion service. Direct mode fetches the RSS
document and parses it with feedparser.
"""

import logging
from typing import List, Optional

import feedparser
import httpx

from app.schemas.blog import BlogPost
from app.services.html_rules import ImageRules, rules_from_settings
from app.services.post_normalizer import normalize_items, sort_by_date
from app.settings import Settings

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """Base class for feed retrieval failures."""


class FeedUnavailableError(FeedError):
    """The feed could not be reached or answered with a non-2xx status."""


class FeedFormatError(FeedError):
    """The feed answered but the payload had an unexpected shape."""


class FeedClient:
    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rules: Optional[ImageRules] = None,
    ):
        self.settings = settings
        self.transport = transport
        self.rules = rules or rules_from_settings(settings)

    async def fetch_posts(self) -> List[BlogPost]:
        items = await self.fetch_items()
        posts = normalize_items(
            items, source=self.settings.FEED_SOURCE_NAME, rules=self.rules
        )
        logger.info(f"Fetched {len(posts)} posts from {self.settings.FEED_URL}")
        return sort_by_date(posts)

    async def fetch_items(self) -> List[dict]:
        if self.settings.FEED_USE_PROXY:
            return await self._fetch_via_proxy()
        return await self._fetch_direct()

    async def _get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        async with httpx.AsyncClient(
            transport=self.transport,
            follow_redirects=True,
            timeout=httpx.Timeout(self.settings.FEED_TIMEOUT_SECONDS),
            headers={"User-Agent": self.settings.FEED_USER_AGENT},
        ) as client:
            try:
                response = await client.get(url, params=params)
            except httpx.HTTPError as e:
                raise FeedUnavailableError(f"Request to {url} failed: {e}") from e

        if response.status_code >= 400:
            raise FeedUnavailableError(f"{url} returned status: {response.status_code}")
        return response

    async def _fetch_via_proxy(self) -> List[dict]:
        response = await self._get(
            self.settings.FEED_PROXY_URL, params={"rss_url": self.settings.FEED_URL}
        )
        try:
            data = response.json()
        except ValueError as e:
            raise FeedFormatError("Feed proxy returned invalid JSON") from e

        if not isinstance(data, dict) or data.get("status") != "ok":
            raise FeedFormatError("Feed proxy returned error status")

        items = data.get("items")
        if not isinstance(items, list):
            raise FeedFormatError("Feed proxy payload has no items list")

        return [_from_proxy_item(item) for item in items if isinstance(item, dict)]

    async def _fetch_direct(self) -> List[dict]:
        response = await self._get(self.settings.FEED_URL)
        feed = feedparser.parse(response.text)

        if feed.bozo and not feed.entries:
            raise FeedFormatError(f"Feed parsing error: {feed.get('bozo_exception')}")

        return [_from_feed_entry(entry) for entry in feed.entries]


def _from_proxy_item(item: dict) -> dict:
    # rss2json puts the full body in "content" and the publish date in "pubDate"
    return {
        "guid": item.get("guid"),
        "title": item.get("title"),
        "pubDate": item.get("pubDate"),
        "isoDate": item.get("pubDate"),
        "link": item.get("link"),
        "categories": item.get("categories") or [],
        "content:encoded": item.get("content") or item.get("description"),
    }


def _from_feed_entry(entry) -> dict:
    content = ""
    if entry.get("content"):
        content = entry["content"][0].get("value", "")
    return {
        "guid": entry.get("id"),
        "title": entry.get("title"),
        "pubDate": entry.get("published") or entry.get("updated"),
        "link": entry.get("link"),
        "categories": [tag.get("term") for tag in entry.get("tags", []) if tag.get("term")],
        "content:encoded": content or entry.get("summary", ""),
    }
