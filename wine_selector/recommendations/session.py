from __future__ import annotations

import logging
from collections.abc import Sequence

from ..catalog.options import UnknownTagError, validate_tag
from .matching import evaluate, reset_selection, toggle_selection
from .models import RecommendationResult, Selection, TagCategory, Wine

logger = logging.getLogger(__name__)


class SelectionSession:
    """Holds one user's selection and re-ranks the catalog after every change.

    Tags are checked against the option lists here, before the engine sees
    them. ``toggle`` and ``reset`` swap in a new ``Selection`` and return the
    freshly evaluated result; the previous selection is never modified.
    """

    def __init__(self, catalog: Sequence[Wine], selection: Selection | None = None) -> None:
        self._catalog = tuple(catalog)
        self._selection = selection if selection is not None else Selection()

    @property
    def selection(self) -> Selection:
        return self._selection

    def current(self) -> RecommendationResult:
        return evaluate(self._catalog, self._selection)

    def toggle(self, category: TagCategory | str, tag: str) -> RecommendationResult:
        try:
            category = TagCategory(category)
        except ValueError as exc:
            raise UnknownTagError(f"Unknown tag category: {category!r}") from exc
        validate_tag(category.value, tag)
        self._selection = toggle_selection(self._selection, category, tag)
        logger.debug("Toggled %s/%s, %d tags selected", category.value, tag,
                     self._selection.total_selected)
        return self.current()

    def reset(self) -> RecommendationResult:
        self._selection = reset_selection()
        logger.debug("Selection reset")
        return self.current()
