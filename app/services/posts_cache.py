import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional

from app.schemas.blog import BlogPost
from app.services.fallback_posts import get_fallback_posts
from app.services.post_normalizer import sort_by_date

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 300

COLD = "cold"
WARM = "warm"
STALE = "stale"


class PostsCache:
    """
    Single-slot TTL cache in front of the blog feed.

    Failed refreshes never surface to callers: a stale cache keeps being
    served, and when nothing was ever cached the static fallback posts are
    returned instead (without being cached, so the next call retries).
    Refreshes are single-flight; callers queued behind an in-flight refresh
    reuse its outcome.
    """

    def __init__(
        self,
        fetch_posts: Callable[[], Awaitable[List[BlogPost]]],
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        wall_clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
        fallback: Callable[[], List[BlogPost]] = get_fallback_posts,
    ):
        self.fetch_posts = fetch_posts
        self.ttl_seconds = ttl_seconds
        self.clock = clock
        self.wall_clock = wall_clock
        self.fallback = fallback

        self._entries: List[BlogPost] = []
        self._fetched_at: Optional[float] = None
        self._generation = 0
        self._lock = asyncio.Lock()
        self.last_updated: Optional[datetime] = None
        self.last_error: Optional[Exception] = None

    def state(self, now: Optional[float] = None) -> str:
        if not self._entries:
            return COLD
        if self._fetched_at is None:
            return STALE
        now = self.clock() if now is None else now
        if now - self._fetched_at < self.ttl_seconds:
            return WARM
        return STALE

    def invalidate(self) -> None:
        """Expire the cached entries so the next read refreshes. Entries stay as a stale fallback."""
        self._fetched_at = None
        logger.info("Blog posts cache invalidated")

    async def get_posts(self, force_refresh: bool = False) -> List[BlogPost]:
        if force_refresh:
            return await self._refresh(self._generation)
        return await self.get_or_refresh()

    async def get_or_refresh(self, now: Optional[float] = None) -> List[BlogPost]:
        if self.state(now) == WARM:
            return list(self._entries)
        return await self._refresh(self._generation, now)

    async def _refresh(self, seen_generation: int, now: Optional[float] = None) -> List[BlogPost]:
        async with self._lock:
            if self._generation != seen_generation:
                # Another caller refreshed while we waited.
                return self._serve()

            try:
                posts = await self.fetch_posts()
                if not posts:
                    raise ValueError("feed returned no posts")
            except Exception as e:
                self.last_error = e
                self._generation += 1
                logger.warning(f"Blog feed refresh failed: {e}")
                return self._serve()

            self._entries = sort_by_date(posts)
            # Same time base as state(now)
            self._fetched_at = self.clock() if now is None else now
            self.last_updated = self.wall_clock()
            self.last_error = None
            self._generation += 1
            logger.info(f"Blog posts cache refreshed with {len(self._entries)} posts")
            return self._serve()

    def _serve(self) -> List[BlogPost]:
        if self._entries:
            if self.last_error is not None:
                logger.warning("Serving stale blog posts")
            return list(self._entries)

        logger.warning("No cached blog posts, serving fallback posts")
        return sort_by_date(self.fallback())
