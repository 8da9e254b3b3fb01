from datetime import datetime, timezone
from typing import List

from app.schemas.blog import BlogPost

WELCOME_CONTENT = """
<h1>Welcome to My Blog</h1>
<p>I'm excited to share my thoughts and experiences with you. This blog covers topics including:</p>
<ul>
<li>Web Development</li>
<li>Design Principles</li>
<li>Technology Trends</li>
<li>Programming Tips</li>
</ul>
<p>Check back regularly for new content, or follow me on
<a href="https://medium.com/@kevinmartinez7616">Medium</a> for the latest posts.</p>
"""


def get_fallback_posts() -> List[BlogPost]:
    """Static posts served when the feed has never been fetched successfully."""
    today = datetime.now(timezone.utc).replace(hour=0, minute=0, second=0, microsecond=0)
    return [
        BlogPost(
            id="fallback-1",
            title="Welcome to My Blog",
            slug="welcome-to-my-blog",
            date=today.isoformat(),
            excerpt="Welcome to my blog! I share thoughts on web development, design, and technology.",
            content=WELCOME_CONTENT,
            tags=["Welcome", "Blog"],
            readTime="1 min read",
            imageUrl=None,
            mediumUrl="https://medium.com/@kevinmartinez7616",
        )
    ]
