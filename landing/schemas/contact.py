from pydantic import BaseModel, Field

from ..utils.docs import example


EMAIL_REGEX = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"


class ContactSubmission(BaseModel):
    name: str | None = Field(None, description="Full name of the sender")
    email: str | None = Field(None, description="Email address of the sender")
    company: str | None = Field(None, description="Company of the sender")
    message: str | None = Field(None, description="Content of the message")

    model_config = example(
        name="Jane Doe", email="jane@example.com", company="Acme", message="Hi,\nwe would like to talk."
    )


class ContactResponse(BaseModel):
    success: bool = Field(True, description="Whether the message has been sent")
    message: str = Field("Form submitted successfully", description="Human readable status")
