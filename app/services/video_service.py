import logging
from typing import List, Optional
from urllib.parse import parse_qs, urlparse

import feedparser
import httpx

from app.schemas.videos import Video, VideoId, VideoSnippet, VideoThumbnail, VideoThumbnails
from app.settings import Settings

logger = logging.getLogger(__name__)

THUMBNAIL_URL = "https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"


class VideoService:
    """Reads a YouTube channel's public Atom feed. No API key needed."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    async def list_videos(self) -> List[Video]:
        url = self.settings.youtube_feed_url
        async with httpx.AsyncClient(
            transport=self.transport,
            follow_redirects=True,
            timeout=httpx.Timeout(self.settings.FEED_TIMEOUT_SECONDS),
        ) as client:
            response = await client.get(url)
            response.raise_for_status()

        feed = feedparser.parse(response.text)
        if feed.bozo and not feed.entries:
            raise ValueError(f"Video feed parsing error: {feed.get('bozo_exception')}")

        videos = [to_video(entry) for entry in feed.entries]
        logger.info(f"Fetched {len(videos)} videos from channel {self.settings.YOUTUBE_CHANNEL_ID}")
        return videos


def extract_video_id(entry) -> str:
    # feedparser exposes <yt:videoId> as "yt_videoid"
    video_id = entry.get("yt_videoid")
    if video_id:
        return video_id
    link = entry.get("link") or ""
    return parse_qs(urlparse(link).query).get("v", [""])[0]


def to_video(entry) -> Video:
    video_id = extract_video_id(entry)
    return Video(
        id=VideoId(videoId=video_id),
        snippet=VideoSnippet(
            title=entry.get("title") or "",
            thumbnails=VideoThumbnails(
                medium=VideoThumbnail(url=THUMBNAIL_URL.format(video_id=video_id))
            ),
            publishedAt=entry.get("published") or entry.get("updated") or "",
        ),
    )
