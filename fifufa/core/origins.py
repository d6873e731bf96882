# fifufa/core/origins.py
from typing import Dict, Iterable, Optional

# Shared by CORSMiddleware and the preflight answers built in OriginGuard
CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type", "Authorization"]
CORS_MAX_AGE = 86400


class OriginGuard:
    """Decides whether a request's declared Origin may use the API."""

    def __init__(self, allowed_origins: Iterable[str]):
        self.allowed_origins = frozenset(o.rstrip("/") for o in allowed_origins if o)

    def is_allowed(self, origin: Optional[str]) -> bool:
        # No Origin header means server-to-server or same-origin tooling
        if not origin:
            return True
        return origin.rstrip("/") in self.allowed_origins

    def preflight_headers(self, origin: Optional[str]) -> Dict[str, str]:
        """Headers for the empty 200 answer to OPTIONS. The origin is only reflected when it is allowed."""
        headers = {
            "Access-Control-Allow-Methods": ", ".join(CORS_ALLOW_METHODS),
            "Access-Control-Allow-Headers": ", ".join(CORS_ALLOW_HEADERS),
            "Access-Control-Max-Age": str(CORS_MAX_AGE),
        }
        if origin and self.is_allowed(origin):
            headers["Access-Control-Allow-Origin"] = origin
            headers["Vary"] = "Origin"
        return headers
