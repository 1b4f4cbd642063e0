from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from ..recommendations.models import Wine
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: list[str] = [
    "id",
    "name",
    "collection",
    "description",
    "words",
    "foods",
    "moods",
    "color",
    "calories",
]
TAG_COLUMNS: list[str] = ["words", "foods", "moods"]

_catalog: tuple[Wine, ...] | None = None


class CatalogError(Exception):
    """Raised when the catalog file is missing columns or holds malformed rows."""


def _split_tags(raw: str, separator: str) -> list[str]:
    return [t.strip() for t in raw.split(separator) if t.strip()]


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> tuple[Wine, ...]:
    """
    Read the catalog CSV and validate every row into a ``Wine``.

    Empty tag cells become empty tag sets. Any other missing value, a missing
    column, or a repeated id rejects the whole file.
    """
    path = Path(config.catalog_path)
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        df = pd.read_csv(path, dtype=str)
    except pd.errors.EmptyDataError as exc:
        raise CatalogError(f"Catalog file is empty: {path}") from exc

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"Catalog is missing columns: {', '.join(missing)}")

    df[TAG_COLUMNS] = df[TAG_COLUMNS].fillna("")
    for col in TAG_COLUMNS:
        df[col] = df[col].apply(lambda s: _split_tags(s, config.tag_separator))

    incomplete = df[REQUIRED_COLUMNS].isna().any(axis=1)
    if incomplete.any():
        rows = [int(i) + 1 for i in df.index[incomplete]]
        raise CatalogError(f"Catalog rows with missing values: {rows}")

    wines: list[Wine] = []
    for record in df[REQUIRED_COLUMNS].to_dict(orient="records"):
        try:
            wines.append(Wine(**record))
        except ValidationError as exc:
            raise CatalogError(f"Invalid catalog row {record.get('id')!r}: {exc}") from exc

    # Compared after int coercion so "7" and "07" collide.
    id_counts = Counter(w.id for w in wines)
    dupes = sorted(i for i, n in id_counts.items() if n > 1)
    if dupes:
        raise CatalogError(f"Duplicate wine ids in catalog: {dupes}")

    logger.info("Loaded %d wines from %s", len(wines), path)
    return tuple(wines)


def get_catalog() -> tuple[Wine, ...]:
    """Return the in-memory wine catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def get_collections(catalog: tuple[Wine, ...] | None = None) -> list[str]:
    """Collection names in the order they first appear in the catalog."""
    wines = catalog if catalog is not None else get_catalog()
    return list(dict.fromkeys(w.collection for w in wines))
