from __future__ import annotations

import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    lexicon: str = "vader"
    label_threshold: float = 0.05
    nltk_download: bool = False
    log_level: str = "WARNING"


def check_threshold(value: float, name: str = "TEXTSENTIMENT_LABEL_THRESHOLD") -> float:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite number >= 0, got {value!r}")
    return value


def load_settings() -> Settings:
    load_dotenv()
    lexicon = (os.getenv("TEXTSENTIMENT_LEXICON") or "").strip() or Settings.lexicon

    raw_threshold = (os.getenv("TEXTSENTIMENT_LABEL_THRESHOLD") or "").strip()
    threshold = Settings.label_threshold
    if raw_threshold:
        try:
            threshold = float(raw_threshold)
        except ValueError:
            raise ValueError(f"TEXTSENTIMENT_LABEL_THRESHOLD must be a number, got {raw_threshold!r}")
        check_threshold(threshold)

    download = (os.getenv("TEXTSENTIMENT_NLTK_DOWNLOAD") or "").strip().lower() in _TRUTHY
    log_level = (os.getenv("TEXTSENTIMENT_LOG_LEVEL") or "").strip().upper() or Settings.log_level
    if log_level not in LOG_LEVELS:
        raise ValueError(f"TEXTSENTIMENT_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")
    return Settings(lexicon=lexicon, label_threshold=threshold, nltk_download=download, log_level=log_level)
