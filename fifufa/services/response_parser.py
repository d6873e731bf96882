# fifufa/services/response_parser.py
"""
Turns loosely formatted model output into clean lists.

The model does not reliably follow the requested format: facts come back
numbered, bulleted or run together on one line, and topic words sometimes
arrive numbered even when asked for a comma separated line. Both parsers are
pure functions of the input text.
"""
import re
from typing import List

# A numeral followed by a period, or a bullet, each followed by whitespace
FACT_BOUNDARY_RE = re.compile(r"\s*(?:\d+\.\s+|[-*]\s+)")
LEADING_NUMBER_RE = re.compile(r"^\d+\.\s*")

INLINE_NUMBER_RE = re.compile(r"\d+\.\s*")
WORD_SEPARATOR_RE = re.compile(r"[,\n]")

MAX_WORD_LENGTH = 25  # Exclusive
MAX_WORDS_PER_BATCH = 10


def parse_facts(text: str) -> List[str]:
    """List mode: split on enumerators, keep order. Callers must accept fewer items than requested."""
    facts = []
    for fragment in FACT_BOUNDARY_RE.split(text or ""):
        if not fragment:
            continue
        fact = LEADING_NUMBER_RE.sub("", fragment.strip(), count=1)
        if fact:
            facts.append(fact)
    return facts


def parse_words(text: str) -> List[str]:
    """Word mode: strip numbering anywhere, split on commas/newlines, lowercase, cap the batch."""
    words = []
    for fragment in WORD_SEPARATOR_RE.split(INLINE_NUMBER_RE.sub("", text or "")):
        word = fragment.strip().lower()
        if 0 < len(word) < MAX_WORD_LENGTH:
            words.append(word)
    return words[:MAX_WORDS_PER_BATCH]
