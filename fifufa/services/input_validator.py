# fifufa/services/input_validator.py
from typing import Any

from fifufa.models.enums import DEFAULT_LANGUAGE, Language, TopicErrorKind
from fifufa.models.validation import TopicValidationResult

TOPIC_MIN_LENGTH = 2
TOPIC_MAX_LENGTH = 50

SUPPORTED_LANGUAGES = frozenset(lang.value for lang in Language)


def validate_topic(topic: Any) -> TopicValidationResult:
    """Checks the facts topic. Length limits apply to the trimmed value."""
    if not topic or not isinstance(topic, str):
        return TopicValidationResult(is_valid=False, error=TopicErrorKind.TOPIC_REQUIRED)

    sanitized_topic = topic.strip()
    if len(sanitized_topic) < TOPIC_MIN_LENGTH:
        return TopicValidationResult(is_valid=False, error=TopicErrorKind.TOPIC_TOO_SHORT)
    if len(sanitized_topic) > TOPIC_MAX_LENGTH:
        return TopicValidationResult(is_valid=False, error=TopicErrorKind.TOPIC_TOO_LONG)

    return TopicValidationResult(is_valid=True, sanitized_topic=sanitized_topic)


def normalize_language(language: Any) -> str:
    """Unsupported or missing languages silently become English."""
    if isinstance(language, str) and language in SUPPORTED_LANGUAGES:
        return language
    return DEFAULT_LANGUAGE.value
