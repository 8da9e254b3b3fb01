import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from app.schemas.blog import AdjacentPosts, BlogFeedResponse, BlogPost, BlogPostDetail
from app.services.content_sanitizer import sanitize_for_display
from app.services.posts_cache import PostsCache

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        cache: PostsCache,
        sanitizer: Callable[[str], str] = sanitize_for_display,
    ):
        self.cache = cache
        self.sanitizer = sanitizer

    async def list_posts(self, force_refresh: bool = False) -> List[BlogPost]:
        """All posts, newest first."""
        return await self.cache.get_posts(force_refresh=force_refresh)

    async def get_feed(self, force_refresh: bool = False) -> BlogFeedResponse:
        posts = await self.list_posts(force_refresh=force_refresh)
        last_updated = self.cache.last_updated or datetime.now(timezone.utc)
        return BlogFeedResponse(
            success=True,
            posts=posts,
            totalPosts=len(posts),
            lastUpdated=last_updated.isoformat(),
        )

    async def get_post(self, slug: str) -> Optional[BlogPost]:
        posts = await self.list_posts()
        return next((post for post in posts if post.slug == slug), None)

    async def get_adjacent_posts(self, slug: str) -> Optional[AdjacentPosts]:
        posts = await self.list_posts()
        return find_adjacent(posts, slug)

    async def get_post_detail(self, slug: str) -> Optional[BlogPostDetail]:
        posts = await self.list_posts()
        adjacent = find_adjacent(posts, slug)
        if adjacent is None:
            return None
        post = next(post for post in posts if post.slug == slug)
        return BlogPostDetail(
            post=post,
            html=self.sanitizer(post.content),
            prev=adjacent.prev,
            next=adjacent.next,
        )


def find_adjacent(posts: List[BlogPost], slug: str) -> Optional[AdjacentPosts]:
    """
    Neighbours of a post in a newest-first list: prev is the newer post,
    next the older one. None when the slug is unknown.
    """
    index = next((i for i, post in enumerate(posts) if post.slug == slug), None)
    if index is None:
        return None
    return AdjacentPosts(
        prev=posts[index - 1] if index > 0 else None,
        next=posts[index + 1] if index < len(posts) - 1 else None,
    )
