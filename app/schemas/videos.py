from typing import List, Optional

from pydantic import BaseModel


class VideoId(BaseModel):
    videoId: str


class VideoThumbnail(BaseModel):
    url: str


class VideoThumbnails(BaseModel):
    medium: VideoThumbnail


class VideoSnippet(BaseModel):
    title: str
    thumbnails: VideoThumbnails
    publishedAt: str


class Video(BaseModel):
    id: VideoId
    snippet: VideoSnippet


class VideoListResponse(BaseModel):
    items: List[Video]
    error: Optional[str] = None
