"""Status API schemas."""

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Live connectivity report."""

    server: bool = Field(True, description="The API process is up")
    model: bool = Field(..., description="A language-model credential is configured")
    database: bool = Field(..., description="The project store answers a ping")
