# fifufa/api/random_words.py
import logging
from fastapi import APIRouter, Depends, Query

from fifufa.api import deps
from fifufa.models.api import ErrorResponse, RandomWordResponse
from fifufa.services.input_validator import normalize_language
from fifufa.services.word_cache import WordCache

logger = logging.getLogger("fifufa.api.random_words")  # Logger for this module
router = APIRouter()

@router.get("/random-words", response_model=RandomWordResponse, responses={403: {"model": ErrorResponse}})
async def get_random_word(
    language: str | None = Query("en", description="'en' or 'id'; anything else falls back to 'en'."),
    word_cache: WordCache = Depends(deps.get_word_cache),
) -> RandomWordResponse:
    """Serves the next topic suggestion from the language's cached batch."""
    draw = await word_cache.next_word(normalize_language(language))
    return RandomWordResponse(**draw.model_dump())
