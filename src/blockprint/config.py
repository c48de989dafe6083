"""Defaults for the block fingerprinting engine."""

from pathlib import Path

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_SETTINGS_YAML = CONFIG_DIR / "blockprint.yaml"

# Chunking
DEFAULT_BLOCK_SIZE = 10  # statements per window
PRIME_BASE = 31

# Fingerprint encoding: 8 bytes, two's complement, most significant byte first
HASH_BYTE_ORDER = "big"
HASH_BYTES = 8

# Workers
DEFAULT_WORKERS = 1
