"""Block fingerprinting pipeline."""

from blockprint.pipeline.config_loader import load_settings
from blockprint.pipeline.runner import ChunkRunner

__all__ = ["ChunkRunner", "load_settings"]
