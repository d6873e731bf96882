# fifufa/core/metrics.py
import logging
import time
from fastapi import Request

logger = logging.getLogger("fifufa.core.metrics")

api_stats = {"total_requests": 0, "errors_5xx": 0}

async def metrics_middleware(request: Request, call_next):
    api_stats["total_requests"] += 1
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception:
        # Rendered and logged by the catch-all exception handler in fifufa.main
        api_stats["errors_5xx"] += 1
        raise
    if response.status_code >= 500:
        api_stats["errors_5xx"] += 1
    logger.debug(
        f"{request.method} {request.url.path} -> {response.status_code} in {(time.time() - start_time) * 1000:.0f}ms"
    )
    return response
