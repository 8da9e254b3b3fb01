from datetime import datetime, timezone
from xml.etree import ElementTree as ET

from app.services.sitemap_service import SITEMAP_NAMESPACE, SitemapService
from tests.conftest import make_post

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def test_build_entries_lists_static_pages_then_posts():
    service = SitemapService("https://kevinbm.com/")
    posts = [make_post("hello-world", "2024-01-01T00:00:00+00:00")]

    entries = service.build_entries(posts, now=NOW)

    assert [e.url for e in entries] == [
        "https://kevinbm.com",
        "https://kevinbm.com/blog",
        "https://kevinbm.com/projects",
        "https://kevinbm.com/resources",
        "https://kevinbm.com/blog/hello-world",
    ]
    assert entries[0].priority == 1.0
    assert entries[1].change_frequency == "daily"
    assert entries[-1].last_modified == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_render_produces_valid_sitemap_xml():
    service = SitemapService("http://localhost:3000")
    xml = service.render(service.build_entries([], now=NOW))

    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    root = ET.fromstring(xml.split("\n", 1)[1])
    ns = {"s": SITEMAP_NAMESPACE}
    locs = [el.text for el in root.findall("s:url/s:loc", ns)]
    assert locs[0] == "http://localhost:3000"
    assert root.find("s:url/s:priority", ns).text == "1.0"
