"""
Wine matching engine.

Responsibilities:
- Score a wine by the share of selected tags it carries.
- Rank the catalog for a selection, dropping wines that match nothing.
- Apply toggle / reset transitions to an immutable ``Selection``.

Everything here is a pure function of its arguments: nothing is cached and
no input is mutated, so callers recompute after every selection change.
"""
from __future__ import annotations

from collections.abc import Iterable

from .models import (
    RecommendationResult,
    ResultState,
    ScoredWine,
    Selection,
    TagCategory,
    Wine,
)


def score(wine: Wine, selection: Selection) -> float:
    """
    Percentage of selected tags (across all categories) present on *wine*.

    Containment is one-directional: selected tags are looked up in the wine's
    tags, so extra tags on the wine cost nothing. The denominator counts
    selections, so the same string picked in two categories counts twice.
    An empty selection scores 0.
    """
    total_selected = selection.total_selected
    if total_selected == 0:
        return 0.0

    total_matches = sum(
        sum(1 for tag in selection.tags(category) if tag in wine.tags(category))
        for category in TagCategory
    )
    return total_matches / total_selected * 100


def recommend(catalog: Iterable[Wine], selection: Selection) -> list[ScoredWine]:
    """Score every wine, drop zero scores, highest first.

    Equal scores keep catalog order (``sorted`` is stable, also with
    ``reverse=True``).
    """
    if selection.is_empty:
        return []

    scored = [ScoredWine(wine=wine, match_score=score(wine, selection)) for wine in catalog]
    matched = [s for s in scored if s.match_score > 0]
    return sorted(matched, key=lambda s: s.match_score, reverse=True)


def toggle(tag: str, selected: frozenset[str]) -> frozenset[str]:
    """Return a copy of *selected* with *tag* removed if present, else added."""
    if tag in selected:
        return selected - {tag}
    return selected | {tag}


def toggle_selection(selection: Selection, category: TagCategory | str, tag: str) -> Selection:
    category = TagCategory(category)
    return selection.model_copy(
        update={category.value: toggle(tag, selection.tags(category))}
    )


def reset_selection() -> Selection:
    return Selection()


def result_state(selection: Selection, results: list[ScoredWine]) -> ResultState:
    if selection.is_empty:
        return ResultState.idle
    if not results:
        return ResultState.no_matches
    return ResultState.matches


def evaluate(catalog: Iterable[Wine], selection: Selection) -> RecommendationResult:
    """Rank *catalog* for *selection* and tag the outcome with its view state."""
    results = recommend(catalog, selection)
    return RecommendationResult(
        state=result_state(selection, results),
        selection=selection,
        results=results,
    )
