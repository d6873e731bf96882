# fifufa/models/validation.py
from typing import Optional
from pydantic import BaseModel

from fifufa.models.enums import TopicErrorKind

class TopicValidationResult(BaseModel):
    is_valid: bool
    sanitized_topic: Optional[str] = None  # Trimmed topic, set only when valid
    error: Optional[TopicErrorKind] = None
