"""
Rank the catalog from the command line.

Usage:
    python -m wine_selector.recommendations.cli --word bold --food chocolate --mood evening
"""
from __future__ import annotations

import argparse
import sys

from ..catalog.data_store import get_catalog
from ..catalog.options import OPTIONS, UnknownTagError
from .models import RecommendationResult, ResultState, TagCategory
from .session import SelectionSession


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find your Black Box wine match.")
    parser.add_argument("--word", action="append", default=[], dest="words")
    parser.add_argument("--food", action="append", default=[], dest="foods")
    parser.add_argument("--mood", action="append", default=[], dest="moods")
    parser.add_argument("--list-options", action="store_true", help="print selectable tags and exit")
    return parser


def format_result(result: RecommendationResult) -> str:
    if result.state == ResultState.idle:
        return "Select your preferences to find your perfect wine."
    if result.state == ResultState.no_matches:
        return "No matches found. Try selecting different preferences."

    lines = []
    for scored in result.results:
        wine = scored.wine
        lines.append(
            f"{scored.display_score:>3}%  {wine.name} ({wine.collection}, {wine.calories} calories)"
        )
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.list_options:
        for category, tags in OPTIONS.items():
            print(f"{category}: {', '.join(tags)}")
        return 0

    session = SelectionSession(get_catalog())
    result = session.current()
    try:
        for category in TagCategory:
            # Repeating a tag on the command line toggles it back off.
            for tag in getattr(args, category.value):
                result = session.toggle(category, tag)
    except UnknownTagError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
