"""Common response wrapper schemas for API responses."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str


class ServiceInfoResponse(BaseModel):
    """Service banner returned by the root endpoint."""

    message: str
    version: str


class HealthResponse(BaseModel):
    status: str
