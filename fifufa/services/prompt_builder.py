# fifufa/services/prompt_builder.py
from types import MappingProxyType
from typing import Mapping

from fifufa.models.enums import DEFAULT_LANGUAGE, FactsVariant, Language

FACTS_PROMPT_TEMPLATES: Mapping[Language, Mapping[FactsVariant, str]] = MappingProxyType({
    Language.EN: MappingProxyType({
        FactsVariant.POPULAR: "List 5 popular facts about {topic}. Each <35 words & give relevant emojis",
        FactsVariant.UNPOPULAR: "(facts 6-10) List 5 unpopular facts about {topic}. Each <35 word & give relevant emojis. Be Unique",
    }),
    Language.ID: MappingProxyType({
        FactsVariant.POPULAR: (
            "Beri 5 fakta ringkas umum soal {topic}. Per fakta beri emoji relevan per fakta SINGKAT AJA. "
            "Each <15 words. Pakai Bahasa Indonesia"
        ),
        FactsVariant.UNPOPULAR: (
            "Beri 5 fakta ringkas unpopular soal {topic}. Each <15 words. "
            "Per fakta beri emoji relevan per fakta SINGKAT AJA. Pakai Bahasa Indonesia"
        ),
    }),
})

RANDOM_WORDS_PROMPT_TEMPLATES: Mapping[Language, str] = MappingProxyType({
    Language.EN: (
        "Say 7 specific topics from countries, history, pop culture, hobbies, etc. "
        "Separated commas, NOT list, max 2 terms each."
    ),
    Language.ID: (
        "Sebut 7 topik spesifik dari Indonesia soal sejarah, budaya pop, hobi, dll. "
        "Dipisah koma, BUKAN list, maks 2 kata per topik."
    ),
})


def _as_language(language: str) -> Language:
    try:
        return Language(language)
    except ValueError:
        return DEFAULT_LANGUAGE


def build_facts_prompt(topic: str, language: str, more: bool = False) -> str:
    """Prompt for five facts about `topic`; `more` asks for the less known second batch."""
    templates = FACTS_PROMPT_TEMPLATES[_as_language(language)]
    variant = FactsVariant.UNPOPULAR if more else FactsVariant.POPULAR
    return templates[variant].format(topic=topic)


def build_random_words_prompt(language: str) -> str:
    return RANDOM_WORDS_PROMPT_TEMPLATES[_as_language(language)]
