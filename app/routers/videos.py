import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app import dependencies as deps
from app.schemas.videos import VideoListResponse
from app.security import get_settings
from app.services.video_service import VideoService
from app.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["videos"])


@router.get("/youtube")
async def list_videos(
    service: VideoService = Depends(deps.get_video_service),
    current_settings: Settings = Depends(get_settings),
):
    """Latest uploads from the configured channel."""
    try:
        videos = await service.list_videos()
    except Exception as e:
        logger.error(f"Error fetching YouTube feed: {e}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch videos", "items": []},
        )

    max_age = current_settings.VIDEO_CACHE_MAX_AGE
    return JSONResponse(
        content=VideoListResponse(items=videos).model_dump(exclude_none=True),
        headers={
            "Cache-Control": f"public, s-maxage={max_age}, stale-while-revalidate={max_age * 2}"
        },
    )
