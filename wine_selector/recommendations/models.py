from __future__ import annotations

import math
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    computed_field,
    field_serializer,
    field_validator,
)

from ..catalog.options import validate_tag


class TagCategory(str, Enum):
    words = "words"
    foods = "foods"
    moods = "moods"


class ResultState(str, Enum):
    idle = "idle"
    no_matches = "no_matches"
    matches = "matches"


class Wine(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str = Field(..., min_length=1)
    collection: str
    description: str
    color: str
    calories: str
    words: frozenset[str] = frozenset()
    foods: frozenset[str] = frozenset()
    moods: frozenset[str] = frozenset()

    def tags(self, category: TagCategory) -> frozenset[str]:
        return getattr(self, category.value)

    @field_serializer("words", "foods", "moods")
    def _sorted_tags(self, tags: frozenset[str]) -> list[str]:
        return sorted(tags)


class Selection(BaseModel):
    """The tags a user currently has switched on, one set per category."""

    model_config = ConfigDict(frozen=True)

    words: frozenset[str] = frozenset()
    foods: frozenset[str] = frozenset()
    moods: frozenset[str] = frozenset()

    def tags(self, category: TagCategory) -> frozenset[str]:
        return getattr(self, category.value)

    @property
    def total_selected(self) -> int:
        # Not deduplicated across categories.
        return len(self.words) + len(self.foods) + len(self.moods)

    @property
    def is_empty(self) -> bool:
        return self.total_selected == 0

    @field_serializer("words", "foods", "moods")
    def _sorted_tags(self, tags: frozenset[str]) -> list[str]:
        return sorted(tags)


class ScoredWine(BaseModel):
    model_config = ConfigDict(frozen=True)

    wine: Wine
    match_score: float = Field(..., ge=0.0, le=100.0)

    @computed_field
    @property
    def display_score(self) -> int:
        """Whole percentage shown on the wine card, rounded half-up."""
        return int(math.floor(self.match_score + 0.5))


class RecommendationResult(BaseModel):
    state: ResultState
    selection: Selection
    results: list[ScoredWine] = Field(default_factory=list)

    @computed_field
    @property
    def has_selection(self) -> bool:
        return self.state != ResultState.idle


# ── Request bodies ──────────────────────────────────────────────────────


class ToggleRequest(BaseModel):
    category: TagCategory
    tag: str = Field(..., min_length=1)

    @field_validator("tag")
    @classmethod
    def _known_tag(cls, tag: str, info: ValidationInfo) -> str:
        category = info.data.get("category")
        if category is not None:
            validate_tag(category.value, tag)
        return tag


class SelectionRequest(BaseModel):
    words: list[str] = Field(default_factory=list)
    foods: list[str] = Field(default_factory=list)
    moods: list[str] = Field(default_factory=list)

    @field_validator("words", "foods", "moods")
    @classmethod
    def _known_tags(cls, tags: list[str], info: ValidationInfo) -> list[str]:
        for tag in tags:
            validate_tag(info.field_name, tag)
        return tags

    def to_selection(self) -> Selection:
        return Selection(
            words=frozenset(self.words),
            foods=frozenset(self.foods),
            moods=frozenset(self.moods),
        )
