"""FastAPI proxy in front of a local inference server.

Endpoints:
- GET /health
- POST /generate  { "input": "..." }
"""
from __future__ import annotations
import logging
import time

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from local_inference_client.client.errors import GenerationFailure, TransportError
from local_inference_client.client.generation import GenerationClient
from local_inference_client.common.config import load_settings
from local_inference_client.common.logging_setup import setup_logging

LOGGER = logging.getLogger("local_inference.serve")

class GenerateIn(BaseModel):
    input: str

class GenerateOut(BaseModel):
    text: str
    latency_ms: int

app = FastAPI()

_client: GenerationClient | None = None

def get_generation_client() -> GenerationClient:
    """Return the process-wide client, creating it on first use."""
    global _client
    if _client is None:
        _client = GenerationClient.from_settings(load_settings())
        LOGGER.info("Generation client ready: endpoint=%s model=%s", _client.endpoint, _client.model)
    return _client

@app.on_event("startup")
def _configure_logging() -> None:
    setup_logging()

@app.on_event("shutdown")
async def _close_client() -> None:
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None

@app.get("/health")
def health(client: GenerationClient = Depends(get_generation_client)) -> dict[str, str]:
    return {"status": "ok", "model": client.model, "endpoint": client.endpoint}

@app.post("/generate", response_model=GenerateOut)
async def generate(
    body: GenerateIn,
    client: GenerationClient = Depends(get_generation_client),
) -> GenerateOut:
    start = time.time()
    try:
        text = await client.generate(body.input)
    except TransportError as e:
        LOGGER.error("Inference request failed: %s", e)
        raise HTTPException(status_code=502, detail=str(e))
    except GenerationFailure as e:
        LOGGER.error("Unusable inference response: %s", e)
        raise HTTPException(status_code=500, detail=str(e))

    latency = int((time.time() - start) * 1000)
    return GenerateOut(text=text, latency_ms=latency)
