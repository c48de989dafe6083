"""Data models for the block fingerprinting pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockprint.config import DEFAULT_BLOCK_SIZE, DEFAULT_WORKERS, HASH_BYTES
from blockprint.utils.hashing import bytes_to_fingerprint


@dataclass(frozen=True)
class Statement:
    """A normalized unit of source content, as produced by a tokenizer."""

    value: str
    start_line: int
    end_line: int


@dataclass(frozen=True)
class Block:
    """A window of consecutive statements tagged with its 64-bit fingerprint.

    ``hash`` holds the fingerprint as 8 big-endian bytes, so blocks persisted
    by one process compare equal to blocks built by another.
    """

    resource_id: str
    hash: bytes
    index_in_file: int
    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        if len(self.hash) != HASH_BYTES:
            raise ValueError(f"Block hash must be {HASH_BYTES} bytes, got {len(self.hash)}")

    @property
    def fingerprint(self) -> int:
        return bytes_to_fingerprint(self.hash)

    @property
    def hash_hex(self) -> str:
        return self.hash.hex()

    def to_payload(self) -> dict:
        """Convert to a JSON-ready dict (one line of block JSONL output)."""
        return {
            "resource_id": self.resource_id,
            "hash": self.hash_hex,
            "index_in_file": self.index_in_file,
            "start_line": self.start_line,
            "end_line": self.end_line,
        }


@dataclass
class ResourceStatements:
    """All statements of one resource (file, component) in source order."""

    resource_id: str
    statements: list[Statement] = field(default_factory=list)


@dataclass
class ChunkerSettings:
    """Settings loaded from blockprint.yaml."""

    block_size: int = DEFAULT_BLOCK_SIZE
    workers: int = DEFAULT_WORKERS


@dataclass
class ChunkResult:
    """Blocks and counters of a chunking run."""

    blocks: dict[str, list[Block]] = field(default_factory=dict)
    resources_processed: int = 0
    statements_read: int = 0
    blocks_created: int = 0
    errors: list[str] = field(default_factory=list)

    def all_blocks(self) -> list[Block]:
        """Every block, grouped by resource in insertion order."""
        return [block for blocks in self.blocks.values() for block in blocks]

    def summary(self) -> str:
        lines = [
            f"Resources processed: {self.resources_processed}",
            f"Statements read:     {self.statements_read}",
            f"Blocks created:      {self.blocks_created}",
        ]
        if self.errors:
            lines.append(f"Errors:              {len(self.errors)}")
            for err in self.errors[:10]:
                lines.append(f"  - {err}")
        return "\n".join(lines)

    def merge(self, other: ChunkResult) -> None:
        """Merge another result into this one (for worker aggregation)."""
        self.blocks.update(other.blocks)
        self.resources_processed += other.resources_processed
        self.statements_read += other.statements_read
        self.blocks_created += other.blocks_created
        self.errors.extend(other.errors)
