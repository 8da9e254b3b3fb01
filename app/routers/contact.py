import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app import dependencies as deps
from app.schemas.contact import ContactErrorResponse, ContactRequest, ContactResponse
from app.services.contact_service import (
    ContactDeliveryError,
    ContactService,
    ContactValidationError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ContactErrorResponse(error=message).model_dump(),
    )


def parse_contact_payload(payload) -> ContactRequest:
    """Validate a decoded JSON body, reporting bad field types as form errors."""
    try:
        return ContactRequest.model_validate(payload)
    except ValidationError as e:
        fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        if "email" in fields:
            raise ContactValidationError("Please enter a valid email address")
        raise ContactValidationError("Email and message are required")


# The body is read by hand so malformed input still gets the contact error shape
@router.post(
    "/contact",
    response_model=ContactResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ContactRequest.model_json_schema()}},
        }
    },
)
async def submit_contact(
    request: Request,
    service: ContactService = Depends(deps.get_contact_service),
):
    try:
        contact = parse_contact_payload(await request.json())
        await service.submit(contact.email, contact.message)
        return ContactResponse()
    except ContactValidationError as e:
        return _error(400, str(e))
    except ContactDeliveryError as e:
        logger.error(f"Contact delivery failed: {e}")
        return _error(502, "Failed to deliver message")
    except Exception as e:
        logger.error(f"Contact form error: {e}")
        return _error(500, "Internal server error")
