"""Common Pydantic schemas used across the API."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard API error response.

    ``error`` is a short human-readable message; ``code`` names the failure
    kind so a database outage and a provider outage stay distinguishable.
    """

    error: str
    code: str
