import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app import dependencies as deps
from app.services.posts_service import PostsService
from app.services.sitemap_service import SitemapService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml")
async def get_sitemap(
    posts_service: PostsService = Depends(deps.get_posts_service),
    sitemap_service: SitemapService = Depends(deps.get_sitemap_service),
):
    posts = await posts_service.list_posts()
    entries = sitemap_service.build_entries(posts)
    logger.debug(f"Rendering sitemap with {len(entries)} entries")
    return Response(content=sitemap_service.render(entries), media_type="application/xml")
