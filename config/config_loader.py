"""Load settings.yaml into typed dataclasses. Applies GEOQUIZ_* environment overrides."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

_SETTINGS_PATH = Path(__file__).parent / "settings.yaml"

SCORE_FORMATS = ("record", "totals")


@dataclass
class DefaultsConfig:
    data_dir: Path
    score_file: Path
    score_format: str = "record"
    seed: int | None = None


@dataclass
class AppConfig:
    defaults: DefaultsConfig


def _env_override(name: str, current: str | None) -> str | None:
    value = os.environ.get(name, "").strip()
    if value:
        logger.info("Using %s from environment: %s", name, value)
        return value
    return current


def load_config(settings_path: Path = _SETTINGS_PATH) -> AppConfig:
    """Load and validate configuration from settings.yaml.

    GEOQUIZ_DATA_DIR, GEOQUIZ_SCORE_FILE and GEOQUIZ_SEED take precedence over
    the file when set. Call load_dotenv() first to pick them up from .env.

    Raises:
        FileNotFoundError: If the settings file is missing.
        ValueError: If score_format is unknown or seed is not an integer.
    """
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")

    with settings_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    defaults_raw = raw.get("defaults", {})

    data_dir = _env_override("GEOQUIZ_DATA_DIR", defaults_raw.get("data_dir", "./data/countries"))
    score_file = _env_override("GEOQUIZ_SCORE_FILE", defaults_raw.get("score_file", "./score.txt"))
    seed_raw = _env_override("GEOQUIZ_SEED", defaults_raw.get("seed"))

    score_format = str(defaults_raw.get("score_format", "record"))
    if score_format not in SCORE_FORMATS:
        raise ValueError(f"Unknown score_format '{score_format}', expected one of {SCORE_FORMATS}")

    defaults = DefaultsConfig(
        data_dir=Path(data_dir),
        score_file=Path(score_file),
        score_format=score_format,
        seed=int(seed_raw) if seed_raw is not None else None,
    )
    return AppConfig(defaults=defaults)
