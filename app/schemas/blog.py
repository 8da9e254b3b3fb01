from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlogPost(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    slug: str
    date: str
    excerpt: str
    content: str
    tags: List[str] = Field(default_factory=lambda: ["Blog"])
    readTime: str
    imageUrl: Optional[str] = None
    mediumUrl: Optional[str] = None


class BlogFeedResponse(BaseModel):
    success: bool = True
    posts: List[BlogPost]
    totalPosts: int
    lastUpdated: str


class BlogErrorResponse(BaseModel):
    success: bool = False
    error: str
    posts: List[BlogPost] = Field(default_factory=list)


class AdjacentPosts(BaseModel):
    prev: Optional[BlogPost] = None
    next: Optional[BlogPost] = None


class BlogPostDetail(AdjacentPosts):
    post: BlogPost
    html: str  # sanitized body, ready to render
