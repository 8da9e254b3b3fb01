import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional
from xml.etree import ElementTree as ET

from app.schemas.blog import BlogPost
from app.services.post_normalizer import parse_date

logger = logging.getLogger(__name__)

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    last_modified: datetime
    change_frequency: str
    priority: float


STATIC_PAGES = (
    ("", "weekly", 1.0),
    ("/blog", "daily", 0.8),
    ("/projects", "monthly", 0.8),
    ("/resources", "monthly", 0.7),
)


class SitemapService:
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def build_entries(
        self, posts: Iterable[BlogPost], now: Optional[datetime] = None
    ) -> List[SitemapEntry]:
        now = now or datetime.now(timezone.utc)
        entries = [
            SitemapEntry(f"{self.base_url}{path}", now, frequency, priority)
            for path, frequency, priority in STATIC_PAGES
        ]
        for post in posts:
            entries.append(
                SitemapEntry(
                    url=f"{self.base_url}/blog/{post.slug}",
                    last_modified=parse_date(post.date) or now,
                    change_frequency="monthly",
                    priority=0.6,
                )
            )
        return entries

    def render(self, entries: Iterable[SitemapEntry]) -> str:
        urlset = ET.Element("urlset", xmlns=SITEMAP_NAMESPACE)
        for entry in entries:
            url = ET.SubElement(urlset, "url")
            ET.SubElement(url, "loc").text = entry.url
            ET.SubElement(url, "lastmod").text = entry.last_modified.isoformat()
            ET.SubElement(url, "changefreq").text = entry.change_frequency
            ET.SubElement(url, "priority").text = f"{entry.priority:.1f}"
        body = ET.tostring(urlset, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
