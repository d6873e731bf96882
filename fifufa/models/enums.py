from enum import Enum

class Language(str, Enum):
    EN = "en"
    ID = "id"

DEFAULT_LANGUAGE = Language.EN

class FactsVariant(str, Enum):
    POPULAR = "popular"
    UNPOPULAR = "unpopular"  # Second batch, requested with more=true

class TopicErrorKind(str, Enum):
    TOPIC_REQUIRED = "TOPIC_REQUIRED"
    TOPIC_TOO_SHORT = "TOPIC_TOO_SHORT"
    TOPIC_TOO_LONG = "TOPIC_TOO_LONG"

class InferenceErrorKind(str, Enum):
    TIMEOUT = "timeout"
    RATE_LIMITED = "rate_limited"
    AUTH = "auth"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"  # Fallback kind for anything the client cannot classify

class WordSource(str, Enum):
    GENERATED = "generated"
    FALLBACK = "fallback"
