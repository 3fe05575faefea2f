"""Shared response bodies."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Error body used for not-found and storage failures."""

    message: str
