from typing import Optional

from pydantic import BaseModel


class ContactRequest(BaseModel):
    # Optional so blank/missing fields get our 400 rather than a 422
    email: Optional[str] = None
    message: Optional[str] = None


class ContactResponse(BaseModel):
    success: bool = True
    message: str = "Message sent successfully"


class ContactErrorResponse(BaseModel):
    success: bool = False
    error: str
