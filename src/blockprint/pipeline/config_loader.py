"""Load and validate blockprint.yaml settings."""

from __future__ import annotations

from pathlib import Path

import yaml

from blockprint.config import DEFAULT_BLOCK_SIZE, DEFAULT_WORKERS
from blockprint.pipeline.models import ChunkerSettings
from blockprint.utils.logging import get_logger

log = get_logger(__name__)

VALID_TOP_LEVEL_KEYS = {"chunker", "workers"}


def _positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"'{name}' must be >= 1, got {value}")
    return value


def load_settings(config_path: str | Path) -> ChunkerSettings:
    """Load chunker settings from a YAML file. Missing keys fall back to defaults."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    unknown = set(raw.keys()) - VALID_TOP_LEVEL_KEYS
    if unknown:
        raise ValueError(f"Config file has unknown keys: {unknown}. Valid keys: {VALID_TOP_LEVEL_KEYS}")

    chunker = raw.get("chunker") or {}
    if not isinstance(chunker, dict):
        raise ValueError(f"'chunker' must be a mapping: {config_path}")

    settings = ChunkerSettings(
        block_size=_positive_int(chunker.get("block_size", DEFAULT_BLOCK_SIZE), "chunker.block_size"),
        workers=_positive_int(raw.get("workers", DEFAULT_WORKERS), "workers"),
    )
    log.info("settings_loaded", path=str(config_path), block_size=settings.block_size, workers=settings.workers)
    return settings
