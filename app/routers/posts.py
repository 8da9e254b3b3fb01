import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from app import dependencies as deps
from app.schemas.blog import AdjacentPosts, BlogErrorResponse, BlogPostDetail
from app.security import get_api_key, get_settings
from app.services.posts_service import PostsService
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/blog", tags=["blog"])

FEED_ERROR_MESSAGE = "Failed to fetch Medium posts"


async def _feed_response(
    service: PostsService, current_settings: Settings, force_refresh: bool = False
) -> JSONResponse:
    try:
        feed = await service.get_feed(force_refresh=force_refresh)
    except Exception as e:
        logger.error(f"Error fetching blog posts: {e}")
        return JSONResponse(
            status_code=500,
            content=BlogErrorResponse(error=FEED_ERROR_MESSAGE).model_dump(),
            headers={"Cache-Control": "no-store"},
        )
    return JSONResponse(
        content=feed.model_dump(), headers=current_settings.blog_cache_headers
    )


@router.get("")
async def list_posts(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """All posts, newest first."""
    return await _feed_response(service, current_settings)


@router.post("/refresh", dependencies=[Depends(get_api_key)])
async def refresh_posts(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(get_settings),
):
    """Bypass the cache TTL and re-read the feed."""
    return await _feed_response(service, current_settings, force_refresh=True)


@router.get("/{slug}", response_model=BlogPostDetail)
async def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug, with its sanitized body and neighbours."""
    try:
        detail = await service.get_post_detail(slug)
        if not detail:
            raise HTTPException(status_code=404, detail="Post not found")
        return detail
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/{slug}/adjacent", response_model=AdjacentPosts)
async def get_adjacent_posts(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        adjacent = await service.get_adjacent_posts(slug)
        if adjacent is None:
            raise HTTPException(status_code=404, detail="Post not found")
        return adjacent
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving neighbours of {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
