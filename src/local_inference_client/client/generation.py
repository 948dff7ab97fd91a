"""Async client for a local inference server's /api/generate endpoint."""
from __future__ import annotations
import json
import logging

import httpx
from pydantic import ValidationError

from local_inference_client.client.errors import GenerationFailure, TransportError
from local_inference_client.common.config import ClientSettings
from local_inference_client.common.schema import GenerationRequest, GenerationResponse

LOGGER = logging.getLogger("local_inference.client")

GENERATE_PATH = "/api/generate"
INCOMPLETE_MESSAGE = "Incomplete response from inference server"
JSON_HEADERS = {"Content-Type": "application/json"}


class GenerationClient:
    """Sends non-streaming generation requests to one model on one server.

    The underlying httpx.AsyncClient is created once and reused by every
    call; `generate` may be awaited concurrently on the same instance.
    """

    def __init__(
        self,
        endpoint: str,
        model: str,
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not endpoint:
            raise ValueError("endpoint must be a non-empty base URL")
        if not model:
            raise ValueError("model must be a non-empty identifier")
        if isinstance(timeout_seconds, bool) or not isinstance(timeout_seconds, (int, float)):
            raise ValueError(f"timeout_seconds must be a number, got {timeout_seconds!r}")
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")

        self._endpoint = endpoint
        self._model = model
        self._timeout_seconds = timeout_seconds
        self._url = f"{endpoint}{GENERATE_PATH}"
        self._http = httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "GenerationClient":
        return cls(settings.endpoint, settings.model, settings.timeout_seconds, transport=transport)

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def model(self) -> str:
        return self._model

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    async def generate(self, prompt: str) -> str:
        """
        Generate a completion for `prompt` and wait for the full result.

        Args:
            prompt: Text sent as-is; no length checks are made here.

        Returns:
            The generated text.

        Raises:
            TransportError: The request could not be sent or the reply not
                read in time.
            GenerationFailure: The prompt could not be encoded, the reply
                did not parse, or the server reported the generation as
                not done.
        """
        try:
            body = GenerationRequest(model=self._model, prompt=prompt, stream=False)
            content = json.dumps(body.model_dump(), ensure_ascii=False).encode("utf-8")
        except (UnicodeEncodeError, ValidationError) as e:
            raise GenerationFailure(f"Failed to encode generation request: {e}", cause=e) from e

        LOGGER.info("Sending generation request to %s (prompt_chars=%d)", self._url, len(prompt))

        try:
            resp = await self._http.post(self._url, content=content, headers=JSON_HEADERS)
        except httpx.RequestError as e:
            raise TransportError(f"Generation request failed: {e!r}", cause=e) from e

        try:
            parsed = GenerationResponse.model_validate_json(resp.content)
        except ValidationError as e:
            raise GenerationFailure(
                f"Failed to parse generation response (HTTP {resp.status_code}): {e}",
                cause=e,
            ) from e

        if not parsed.done:
            raise GenerationFailure(INCOMPLETE_MESSAGE)

        LOGGER.info("Received generation response (response_chars=%d)", len(parsed.response))
        return parsed.response

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> "GenerationClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()
