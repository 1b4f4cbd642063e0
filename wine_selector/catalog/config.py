from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "wines.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the wine catalog lives and how its tag columns are encoded.
    """

    catalog_path: Path = field(
        default_factory=lambda: Path(os.getenv("WINE_CATALOG_PATH", str(_DEFAULT_CATALOG_PATH)))
    )
    tag_separator: str = ","


DEFAULT_CATALOG_CONFIG = CatalogConfig()
