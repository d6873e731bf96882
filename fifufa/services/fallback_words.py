"""
Fallback topic words for when the Gemini API is unavailable.
Hand-picked, one list per supported language.
"""
from types import MappingProxyType
from typing import Mapping, Tuple

FALLBACK_WORDS: Mapping[str, Tuple[str, ...]] = MappingProxyType({
    "en": (
        "ninja", "einstein", "pizza", "dolphins", "aurora", "chocolate", "robots", "space", "ocean", "mountains",
        "dragons", "crystals", "volcanoes", "antarctica", "pyramids", "sakura", "thunder", "diamonds", "galaxies", "rainbows",
    ),
    "id": (
        "rendang", "borobudur", "komodo", "batik", "gamelan", "wayang", "angklung", "raisa", "sunda", "java",
        "bali", "lombok", "sulawesi", "kalimantan", "sumatra", "papua", "maluku", "nusantara", "majapahit", "sriwijaya",
    ),
})
