# fifufa/services/word_cache.py
import logging
import random
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from fifufa.core.errors import UpstreamError, UpstreamUnavailableError
from fifufa.models.enums import DEFAULT_LANGUAGE, InferenceErrorKind, WordSource
from fifufa.services.fallback_words import FALLBACK_WORDS
from fifufa.services.inference_client import RANDOM_WORDS_SAMPLING, InferenceClient
from fifufa.services.prompt_builder import build_random_words_prompt
from fifufa.services.response_parser import parse_words

logger = logging.getLogger("fifufa.services.word_cache")


@dataclass
class WordCacheState:
    words: List[str] = field(default_factory=list)
    cursor: int = 0
    source: WordSource = WordSource.GENERATED

    @property
    def exhausted(self) -> bool:
        return self.cursor >= len(self.words)

    @property
    def remaining(self) -> int:
        return len(self.words) - self.cursor


class WordDraw(BaseModel):
    word: str
    language: str
    remaining: int
    source: WordSource


class WordCache:
    """
    Serves one topic word per call for a language, generating them in batches.

    A batch is requested from the model when the language's buffer is empty or
    fully served. If the model call fails or yields nothing usable, a shuffled
    copy of the language's fallback list becomes the batch instead, so callers
    never see an inference error from here.
    """

    def __init__(
        self,
        inference_client: InferenceClient,
        fallback_words: Mapping[str, Sequence[str]] = FALLBACK_WORDS,
        rng: Optional[random.Random] = None,
    ):
        self.inference_client = inference_client
        self.fallback_words = fallback_words
        self.rng = rng or random.Random()
        self._states: Dict[str, WordCacheState] = {}
        self.stats = {"generated_batches": 0, "fallback_batches": 0, "words_served": 0}

    def state_for(self, language: str) -> WordCacheState:
        return self._states.setdefault(language, WordCacheState())

    def seed(self, language: str, words: Sequence[str], source: WordSource = WordSource.GENERATED) -> None:
        """Replaces the language's batch, e.g. to warm the cache."""
        self._states[language] = WordCacheState(words=list(words), cursor=0, source=source)

    def _fallback_list(self, language: str) -> List[str]:
        return list(self.fallback_words.get(language) or [])

    def _shuffled_fallback(self, language: str) -> List[str]:
        words = self._fallback_list(language)
        self.rng.shuffle(words)
        return words

    async def _refill(self, language: str) -> WordCacheState:
        logger.info(f"Generating new batch of random words [{language}]...", extra={"language": language})
        try:
            text = await self.inference_client.generate(build_random_words_prompt(language), RANDOM_WORDS_SAMPLING)
            words = parse_words(text)
            if not words:
                raise UpstreamUnavailableError("Model output contained no usable words")
        except Exception as e:
            words = self._shuffled_fallback(language)
            state = WordCacheState(words=words, cursor=0, source=WordSource.FALLBACK)
            self.stats["fallback_batches"] += 1
            kind = getattr(e, "kind", InferenceErrorKind.UNKNOWN)
            logger.warning(
                f"Word generation failed, using fallback words [{language}]: {getattr(e, 'detail', None) or e}",
                exc_info=not isinstance(e, UpstreamError),
                extra={"language": language, "kind": kind.value},
            )
        else:
            state = WordCacheState(words=words, cursor=0, source=WordSource.GENERATED)
            self.stats["generated_batches"] += 1
            logger.info(f"Generated word cache [{language}]: [{', '.join(words)}]", extra={"language": language})

        # A concurrent refill for the same language may land first; the later batch wins.
        self._states[language] = state
        return state

    async def next_word(self, language: str) -> WordDraw:
        state = self.state_for(language)
        if state.exhausted:
            state = await self._refill(language)

        if state.exhausted:
            # Nothing to batch for this language: pick straight from a fallback list, bypassing the cache
            fallback = self._fallback_list(language) or self._fallback_list(DEFAULT_LANGUAGE.value)
            if not fallback:
                raise UpstreamUnavailableError(f"No words available for language '{language}'")
            word = self.rng.choice(fallback)
            logger.warning(f"Cache empty, using fallback word [{language}]: \"{word}\"", extra={"language": language})
            self.stats["words_served"] += 1
            return WordDraw(word=word, language=language, remaining=0, source=WordSource.FALLBACK)

        word = state.words[state.cursor]
        state.cursor += 1
        self.stats["words_served"] += 1
        logger.info(
            f"Served random word [{language}] {state.cursor}/{len(state.words)}: \"{word}\" ({state.remaining} remaining)",
            extra={"language": language, "source": state.source.value, "remaining": state.remaining},
        )
        return WordDraw(word=word, language=language, remaining=state.remaining, source=state.source)
