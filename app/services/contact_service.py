import logging
import re
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class ContactValidationError(ValueError):
    pass


class ContactDeliveryError(Exception):
    pass


@dataclass(frozen=True)
class ContactSubmission:
    email: str
    message: str
    timestamp: str


class LoggingNotifier:
    """Records submissions in the server log only. Nothing is delivered."""

    async def send(self, submission: ContactSubmission) -> None:
        logger.info(
            f"Contact form submission: email={submission.email} "
            f"timestamp={submission.timestamp} message={submission.message!r}"
        )


class WebhookNotifier:
    """Posts submissions as JSON to a transactional mail/webhook endpoint."""

    def __init__(
        self,
        url: str,
        timeout: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def send(self, submission: ContactSubmission) -> None:
        async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
            try:
                response = await client.post(self.url, json=asdict(submission))
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise ContactDeliveryError(f"Failed to deliver contact message: {e}") from e
        logger.info(f"Contact submission from {submission.email} delivered")


class ContactService:
    def __init__(self, notifier):
        self.notifier = notifier

    async def submit(self, email: Optional[str], message: Optional[str]) -> ContactSubmission:
        submission = validate_submission(email, message)
        await self.notifier.send(submission)
        return submission


def validate_submission(email: Optional[str], message: Optional[str]) -> ContactSubmission:
    email = (email or "").strip()
    message = (message or "").strip()
    if not email or not message:
        raise ContactValidationError("Email and message are required")
    if not EMAIL_PATTERN.match(email):
        raise ContactValidationError("Please enter a valid email address")
    return ContactSubmission(
        email=email,
        message=message,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
