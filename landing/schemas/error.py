from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    error: str = Field(description="Short description of the error")
    details: str | None = Field(None, description="Additional details, e.g. the email provider's error")
