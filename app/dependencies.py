from functools import lru_cache, partial

from fastapi import Depends

from app.security import get_settings
from app.services.contact_service import ContactService, LoggingNotifier, WebhookNotifier
from app.services.content_sanitizer import sanitize_for_display
from app.services.feed_client import FeedClient
from app.services.html_rules import rules_from_settings
from app.services.posts_cache import PostsCache
from app.services.posts_service import PostsService
from app.services.sitemap_service import SitemapService
from app.services.video_service import VideoService
from app.settings import settings


@lru_cache(maxsize=1)
def get_posts_cache() -> PostsCache:
    """One cache per process, shared by every request."""
    client = FeedClient(settings)
    return PostsCache(client.fetch_posts, ttl_seconds=settings.CACHE_TTL_SECONDS)


def get_posts_service(cache=Depends(get_posts_cache), current_settings=Depends(get_settings)):
    # Same tracking rules the feed client uses for cover images
    sanitizer = partial(sanitize_for_display, rules=rules_from_settings(current_settings))
    return PostsService(cache=cache, sanitizer=sanitizer)


def get_contact_service(current_settings=Depends(get_settings)):
    if current_settings.CONTACT_WEBHOOK_URL:
        notifier = WebhookNotifier(
            current_settings.CONTACT_WEBHOOK_URL,
            timeout=current_settings.FEED_TIMEOUT_SECONDS,
        )
    else:
        notifier = LoggingNotifier()
    return ContactService(notifier)


def get_video_service(current_settings=Depends(get_settings)):
    return VideoService(current_settings)


def get_sitemap_service(current_settings=Depends(get_settings)):
    return SitemapService(current_settings.public_site_url)
