"""Rabin-Karp rolling-hash chunker: statements -> fingerprinted blocks.

The hash of a window of ``block_size`` statements is::

    h(s[0])*31^(block_size-1) + h(s[1])*31^(block_size-2) + ... + h(s[block_size-1])

where ``h`` is the Java-compatible string hash of the statement value and all
arithmetic wraps at 64 bits. Moving the window one statement to the right is
O(1), so chunking a resource is O(N).
"""

from __future__ import annotations

from collections.abc import Sequence

from blockprint.config import DEFAULT_BLOCK_SIZE, PRIME_BASE
from blockprint.pipeline.models import Block, Statement
from blockprint.pipeline.statement_filter import filter_statements
from blockprint.utils.hashing import fingerprint_to_bytes, java_string_hash, power_of_base, wrap64
from blockprint.utils.logging import get_logger

log = get_logger(__name__)


def _create_block(resource_id: str, fingerprint: int, index: int, first: Statement, last: Statement) -> Block:
    return Block(
        resource_id=resource_id,
        hash=fingerprint_to_bytes(fingerprint),
        index_in_file=index,
        start_line=first.start_line,
        end_line=last.end_line,
    )


class BlockChunker:
    """Split a resource's statements into overlapping fingerprinted blocks.

    Instances hold no mutable state and can be shared between threads.
    """

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE):
        if isinstance(block_size, bool) or not isinstance(block_size, int):
            raise ValueError(f"block_size must be an integer, got {block_size!r}")
        if block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {block_size}")
        self._block_size = block_size
        self._power = power_of_base(block_size - 1)

    @property
    def block_size(self) -> int:
        return self._block_size

    def chunk(self, resource_id: str, statements: Sequence[Statement]) -> list[Block]:
        """Return one block per window of ``block_size`` filtered statements.

        Fewer filtered statements than ``block_size`` yields an empty list.
        """
        if resource_id is None:
            raise TypeError("resource_id must not be None")
        if statements is None:
            raise TypeError("statements must not be None")

        filtered = filter_statements(statements)
        if len(filtered) < self._block_size:
            log.debug("chunked", resource_id=resource_id, statements=len(filtered), blocks=0)
            return []

        hashes = [java_string_hash(s.value) for s in filtered]
        blocks: list[Block] = []

        fingerprint = 0
        for i in range(self._block_size - 1):
            fingerprint = wrap64(fingerprint * PRIME_BASE + hashes[i])

        for last in range(self._block_size - 1, len(filtered)):
            first = last - self._block_size + 1
            fingerprint = wrap64(fingerprint * PRIME_BASE + hashes[last])
            blocks.append(_create_block(resource_id, fingerprint, first, filtered[first], filtered[last]))
            fingerprint = wrap64(fingerprint - self._power * hashes[first])

        log.debug("chunked", resource_id=resource_id, statements=len(filtered), blocks=len(blocks))
        return blocks
