"""Pydantic models for the /api/generate wire format."""
from __future__ import annotations

from pydantic import BaseModel, StrictBool


class GenerationRequest(BaseModel):
    """Body of a non-streaming generation request."""
    model: str
    prompt: str
    stream: bool = False


class GenerationResponse(BaseModel):
    """Body returned by the server once generation has finished.

    Only `response` and `done` are consumed; `model` and `context` are
    accepted so that complete server replies validate. `done` must be a
    JSON boolean; truthy strings or numbers are rejected.
    """
    model: str | None = None
    response: str
    done: StrictBool
    context: list[int] | None = None
