# fifufa/api/facts.py
import logging
from fastapi import APIRouter, Depends

from fifufa.api import deps
from fifufa.core.errors import TopicValidationError, UpstreamError
from fifufa.models.api import ErrorResponse, FactsRequest, FactsResponse
from fifufa.services.inference_client import FACTS_SAMPLING, MORE_FACTS_SAMPLING, InferenceClient
from fifufa.services.input_validator import normalize_language, validate_topic
from fifufa.services.prompt_builder import build_facts_prompt
from fifufa.services.response_parser import parse_facts

logger = logging.getLogger("fifufa.api.facts")  # Logger for this module
router = APIRouter()

@router.post(
    "/facts",
    response_model=FactsResponse,
    responses={code: {"model": ErrorResponse} for code in (400, 401, 403, 429, 500, 504)},
)
async def get_facts(
    facts_request: FactsRequest | None = None,
    inference_client: InferenceClient = Depends(deps.get_inference_client),
) -> FactsResponse:
    """
    Generates five facts about a topic.
    `more=true` asks for the less known second batch with looser sampling.
    """
    facts_request = facts_request or FactsRequest()
    validation = validate_topic(facts_request.topic)
    if not validation.is_valid:
        error = TopicValidationError(validation.error)
        logger.warning(f"API request failed: {error.message}", extra={"kind": validation.error.value})
        raise error

    language = normalize_language(facts_request.language)
    topic = validation.sanitized_topic
    more = bool(facts_request.more)
    logger.info(f"Facts requested [{language}] for topic: \"{topic}\" {'(unpopular)' if more else '(popular)'}")

    prompt = build_facts_prompt(topic, language, more=more)
    try:
        text = await inference_client.generate(prompt, MORE_FACTS_SAMPLING if more else FACTS_SAMPLING)
    except UpstreamError as e:
        logger.error(f"Facts API Error [{language}]: {e.detail or e.message}", extra={"kind": e.kind.value})
        raise

    facts = parse_facts(text)
    logger.info(f"[{language}] ({len(facts)} facts): Generated successfully")
    return FactsResponse(facts=facts, language=language)
