from app.schemas.blog import BlogPost


def make_post(slug: str, date: str = "2024-01-01T00:00:00+00:00", **overrides) -> BlogPost:
    fields = {
        "id": f"id-{slug}",
        "title": slug.replace("-", " ").title(),
        "slug": slug,
        "date": date,
        "excerpt": "",
        "content": f"<p>{slug}</p>",
        "tags": ["Blog"],
        "readTime": "1 min read",
    }
    fields.update(overrides)
    return BlogPost(**fields)


class FakeClock:
    """
    Manually advanced monotonic clock.
    """

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeFetcher:
    """
    Scripted stand-in for FeedClient.fetch_posts.
    Each call pops the next outcome; exceptions are raised, lists returned.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return list(outcome)


class FakeCache:
    """
    Minimal PostsCache stand-in for service tests.
    """

    def __init__(self, posts, last_updated=None):
        self.posts = posts
        self.last_updated = last_updated
        self.force_calls = []

    async def get_posts(self, force_refresh: bool = False):
        self.force_calls.append(force_refresh)
        return list(self.posts)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, feed=None, detail=None, adjacent=None, posts=None):
        self._feed = feed
        self._detail = detail
        self._adjacent = adjacent
        self._posts = posts or []
        self.force_calls = []

    async def get_feed(self, force_refresh: bool = False):
        self.force_calls.append(force_refresh)
        return self._feed

    async def get_post_detail(self, slug: str):
        return self._detail

    async def get_adjacent_posts(self, slug: str):
        return self._adjacent

    async def list_posts(self, force_refresh: bool = False):
        return list(self._posts)


class FakeNotifier:
    """
    Records contact submissions instead of delivering them.
    """

    def __init__(self, error: Exception | None = None):
        self.sent = []
        self.error = error

    async def send(self, submission):
        if self.error is not None:
            raise self.error
        self.sent.append(submission)
