from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


@dataclass(frozen=True)
class AppConfig:
    title: str = "Black Box Wine Selector"
    version: str = "1.0.0"
    session_secret: str = field(
        default_factory=lambda: os.getenv("SESSION_SECRET", "wine-selector-secret-change-in-production")
    )
    session_key: str = "selection"


DEFAULT_APP_CONFIG = AppConfig()
