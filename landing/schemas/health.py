from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field("ok", description="Always `ok` if the service is up")
    email_configured: bool = Field(description="Whether an API key for the email provider is configured")
