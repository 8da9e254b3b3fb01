import logging

from fastapi import FastAPI

from app.routers import contact, posts, sitemap, videos
from app.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Portfolio API", description="Blog feed, contact and media for the portfolio site")

app.include_router(posts.router)
app.include_router(contact.router)
app.include_router(videos.router)
app.include_router(sitemap.router)


@app.get("/")
async def root():
    return {"message": "Portfolio API is running"}
