import random
from typing import List, Optional, Union

import pytest
import logging
from fastapi.testclient import TestClient

from fifufa.main import app
from fifufa.api.deps import get_inference_client, get_word_cache
from fifufa.services.inference_client import SamplingParameters
from fifufa.services.word_cache import WordCache


class FakeInferenceClient:
    """Stands in for the Gemini client. Each queued item is returned (str) or raised (exception) in order."""

    def __init__(self, responses: Optional[List[Union[str, Exception]]] = None, default: Union[str, Exception] = ""):
        self.responses = list(responses or [])
        self.default = default
        self.calls: List[tuple] = []

    async def generate(self, prompt: str, sampling: SamplingParameters, timeout: Optional[float] = None) -> str:
        self.calls.append((prompt, sampling))
        outcome = self.responses.pop(0) if self.responses else self.default
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def fake_inference_client() -> FakeInferenceClient:
    return FakeInferenceClient()

@pytest.fixture
def word_cache(fake_inference_client) -> WordCache:
    return WordCache(fake_inference_client, rng=random.Random(1234))

@pytest.fixture(autouse=True)
def override_dependencies(fake_inference_client, word_cache):
    """Every test gets its own fake model client and an empty word cache."""
    app.dependency_overrides[get_inference_client] = lambda: fake_inference_client
    app.dependency_overrides[get_word_cache] = lambda: word_cache
    yield
    app.dependency_overrides.clear()

@pytest.fixture(scope="module")
def client() -> TestClient:
    """Provides a TestClient for making API requests."""
    return TestClient(app)

def pytest_configure(config):
    """
    Hook to configure logging levels before tests are run.
    This silences noisy third-party libraries.
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)

