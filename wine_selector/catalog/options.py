"""
Selectable tag options, one list per category.

These are static configuration, not derived from the catalog: an option may
appear on no wine, and a wine may carry tags that are not offered here.
"""
from __future__ import annotations


class UnknownTagError(ValueError):
    """A tag outside the declared option list for its category."""


WORD_OPTIONS: tuple[str, ...] = (
    "bold", "crisp", "light", "rich", "fresh", "vibrant", "smooth", "elegant",
    "zesty", "tropical", "sophisticated", "balanced", "intense", "clean",
    "bright", "buttery", "robust", "delicate", "energetic", "refined",
)

FOOD_OPTIONS: tuple[str, ...] = (
    "red meat", "seafood", "chicken", "pasta", "salads", "cheese", "chocolate",
    "sushi", "grilled foods", "vegetables", "fruit", "fish", "herbs",
    "mushrooms", "lobster", "oysters", "lamb", "steak",
)

MOOD_OPTIONS: tuple[str, ...] = (
    "romantic", "casual", "sophisticated", "energetic", "relaxed", "confident",
    "social", "elegant", "healthy", "celebratory", "refreshing", "balanced",
    "uplifting", "comfortable", "carefree", "evening", "daytime",
)

# Keyed by category value; TagCategory members hash equal to these strings.
OPTIONS: dict[str, tuple[str, ...]] = {
    "words": WORD_OPTIONS,
    "foods": FOOD_OPTIONS,
    "moods": MOOD_OPTIONS,
}


def is_known_tag(category: str, tag: str) -> bool:
    return tag in OPTIONS.get(category, ())


def validate_tag(category: str, tag: str) -> str:
    """Return *tag* unchanged, or raise ``UnknownTagError``."""
    if category not in OPTIONS:
        raise UnknownTagError(f"Unknown tag category: {category!r}")
    if not is_known_tag(category, tag):
        raise UnknownTagError(f"{tag!r} is not a selectable {category} option")
    return tag
