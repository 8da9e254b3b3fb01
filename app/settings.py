from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Runtime
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"
    SITE_URL: str = "https://kevinbm.com"

    # Blog feed
    FEED_URL: str = "https://medium.com/feed/@kevinmartinez7616"
    FEED_PROXY_URL: str = "https://api.rss2json.com/v1/api.json"
    FEED_USE_PROXY: bool = True
    FEED_SOURCE_NAME: str = "medium"
    FEED_TIMEOUT_SECONDS: float = 5.0
    FEED_USER_AGENT: str = "portfolio-api/1.0"
    CACHE_TTL_SECONDS: int = 300
    BLOG_CACHE_MAX_AGE: int = 120

    # Extra heuristics on top of the built-in tables
    TRACKING_SIGNATURES_EXTRA: List[str] = []
    CONTENT_IMAGE_HOSTS_EXTRA: List[str] = []

    # Our own API Key
    ADMIN_API_KEY: str = ""

    # Contact
    CONTACT_WEBHOOK_URL: str = ""

    # Videos
    YOUTUBE_CHANNEL_ID: str = "UC7Z1nRz8lN2fnOh_qnB3wSw"
    VIDEO_CACHE_MAX_AGE: int = 3600

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def public_site_url(self) -> str:
        if self.is_development:
            return "http://localhost:3000"
        return self.SITE_URL.rstrip("/")

    @property
    def youtube_feed_url(self) -> str:
        return f"https://www.youtube.com/feeds/videos.xml?channel_id={self.YOUTUBE_CHANNEL_ID}"

    @property
    def blog_cache_headers(self) -> dict:
        if self.is_development:
            return {
                "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
                "Pragma": "no-cache",
                "Expires": "0",
            }
        max_age = self.BLOG_CACHE_MAX_AGE
        return {"Cache-Control": f"public, max-age={max_age}, s-maxage={max_age}"}


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
