# fifufa/services/inference_client.py
import asyncio
import logging
import time
from typing import Any, Dict, Optional

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions
from pydantic import BaseModel, Field

from fifufa.core.config import Settings
from fifufa.core.errors import (
    UpstreamAuthError,
    UpstreamError,
    UpstreamRateLimitedError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
    UpstreamUnknownError,
)

logger = logging.getLogger("fifufa.services.inference_client")


class SamplingParameters(BaseModel):
    top_k: int = Field(40, ge=1)
    top_p: float = Field(0.9, ge=0.0, le=1.0)
    temperature: float = Field(0.6, ge=0.0, le=2.0)
    max_tokens: int = Field(180, ge=1)
    presence_penalty: float = 0.0
    frequency_penalty: float = 0.0

    model_config = {"frozen": True}

    def to_generation_config(self) -> Dict[str, Any]:
        # Plain dict is accepted by GenerativeModel.generate_content_async
        return {
            "top_k": self.top_k,
            "top_p": self.top_p,
            "temperature": self.temperature,
            "max_output_tokens": self.max_tokens,
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
        }


FACTS_SAMPLING = SamplingParameters(
    top_k=40, top_p=0.9, temperature=0.6, max_tokens=180, presence_penalty=0.3, frequency_penalty=0.3
)
# Second batch: looser sampling so it does not repeat the popular facts
MORE_FACTS_SAMPLING = SamplingParameters(
    top_k=50, top_p=0.95, temperature=0.8, max_tokens=200, presence_penalty=0.6, frequency_penalty=0.6
)
RANDOM_WORDS_SAMPLING = SamplingParameters(
    top_k=40, top_p=0.9, temperature=0.8, max_tokens=80, presence_penalty=0.5, frequency_penalty=0.5
)


def classify_inference_error(exc: BaseException) -> UpstreamError:
    """Maps a provider/transport failure onto the closed set of upstream error kinds."""
    if isinstance(exc, UpstreamError):
        return exc
    detail = str(exc) or exc.__class__.__name__

    if isinstance(exc, (asyncio.TimeoutError, google_exceptions.DeadlineExceeded, google_exceptions.GatewayTimeout)):
        return UpstreamTimeoutError(detail)
    if isinstance(exc, (google_exceptions.ResourceExhausted, google_exceptions.TooManyRequests)):
        return UpstreamRateLimitedError(detail)
    if isinstance(exc, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)):
        return UpstreamAuthError(detail)
    if isinstance(exc, google_exceptions.InvalidArgument) and "api key" in detail.lower():
        # Gemini answers a bad key with 400 INVALID_ARGUMENT "API key not valid"
        return UpstreamAuthError(detail)
    if isinstance(exc, (google_exceptions.NotFound, google_exceptions.ServiceUnavailable)):
        return UpstreamUnavailableError(detail)
    return UpstreamUnknownError(detail)


class InferenceClient:
    """One Gemini call per `generate`, bounded by a timeout. No retries."""

    def __init__(self, api_key: str, model_name: str, timeout_seconds: float, configured: bool = True):
        self.api_key = api_key
        self.model_name = model_name
        self.timeout_seconds = timeout_seconds
        self.configured = configured and bool(api_key)
        self._model: Optional[genai.GenerativeModel] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "InferenceClient":
        return cls(
            api_key=settings.GEMINI_API_KEY,
            model_name=settings.GEMINI_MODEL,
            timeout_seconds=settings.INFERENCE_TIMEOUT_SECONDS,
            configured=settings.gemini_configured,
        )

    def _get_model(self) -> genai.GenerativeModel:
        if self._model is None:
            genai.configure(api_key=self.api_key)
            self._model = genai.GenerativeModel(self.model_name)
        return self._model

    async def generate(self, prompt: str, sampling: SamplingParameters, timeout: Optional[float] = None) -> str:
        if not self.configured:
            logger.error("GEMINI_API_KEY is not configured. Refusing to call the model.")
            raise UpstreamAuthError("GEMINI_API_KEY is not configured")

        timeout = self.timeout_seconds if timeout is None else timeout
        start_time = time.monotonic()
        try:
            model = self._get_model()
            response = await asyncio.wait_for(
                model.generate_content_async(prompt, generation_config=sampling.to_generation_config()),
                timeout=timeout,
            )
            text = response.text
        except Exception as e:
            error = classify_inference_error(e)
            logger.error(
                f"Gemini call failed after {(time.monotonic() - start_time) * 1000:.0f}ms: {error.detail}",
                extra={"kind": error.kind.value, "status_code": error.status_code},
            )
            raise error from e

        latency_ms = int((time.monotonic() - start_time) * 1000)
        if not text or not text.strip():
            logger.error(f"Gemini returned an empty response after {latency_ms}ms.")
            raise UpstreamUnavailableError("Empty response from model")

        logger.info(f"Gemini responded in {latency_ms}ms ({len(text)} chars).", extra={"latency_ms": latency_ms})
        return text
