# fifufa/api/deps.py
from fastapi import Request

from fifufa.services.inference_client import InferenceClient
from fifufa.services.word_cache import WordCache

# Both objects are created once in fifufa.main and live on app.state;
# tests swap them through app.dependency_overrides.

def get_inference_client(request: Request) -> InferenceClient:
    return request.app.state.inference_client

def get_word_cache(request: Request) -> WordCache:
    """The process-wide word cache."""
    return request.app.state.word_cache
