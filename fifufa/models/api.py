# fifufa/models/api.py
from datetime import datetime
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from fifufa.models.enums import WordSource

class FactsRequest(BaseModel):
    # Untyped: a missing or non-string topic maps to TOPIC_REQUIRED, unknown languages become "en"
    topic: Any = None
    language: Any = "en"
    more: Optional[bool] = False  # null counts as the popular batch

class FactsResponse(BaseModel):
    facts: List[str]
    language: str

class RandomWordResponse(BaseModel):
    word: str
    language: str
    remaining: int = Field(ge=0, description="Words left in the cached batch for this language.")
    source: WordSource

class HealthResponse(BaseModel):
    status: str
    message: str
    timestamp: datetime
    stats: Dict[str, int] = Field(default_factory=dict)

class IndexResponse(BaseModel):
    message: str
    endpoints: Dict[str, str]
    version: str
    platform: str

class ErrorResponse(BaseModel):
    error: str
