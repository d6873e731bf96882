# fifufa/api/system.py
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from fifufa.api import deps
from fifufa.core.config import settings
from fifufa.core.metrics import api_stats
from fifufa.models.api import HealthResponse, IndexResponse
from fifufa.services.word_cache import WordCache

logger = logging.getLogger("fifufa.api.system")
router = APIRouter()

@router.get("/health", response_model=HealthResponse, tags=["Health Check"])
async def health_check(word_cache: WordCache = Depends(deps.get_word_cache)):
    logger.info(f"{settings.PROJECT_NAME} is running. Supported languages: English (en), Indonesian (id)")
    return HealthResponse(
        status="OK",
        message=f"{settings.PROJECT_NAME} is running!",
        timestamp=datetime.now(timezone.utc),
        stats={**api_stats, **word_cache.stats},
    )

@router.get("/", response_model=IndexResponse)
async def index():
    prefix = settings.API_PREFIX
    return IndexResponse(
        message="Welcome to the FiFuFa Backend API!",
        endpoints={
            "health": f"GET {prefix}/health",
            "facts": f"POST {prefix}/facts",
            "randomWords": f"GET {prefix}/random-words",
        },
        version=settings.VERSION,
        platform=settings.PLATFORM,
    )
