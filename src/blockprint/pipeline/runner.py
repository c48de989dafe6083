"""Chunk many resources, optionally in parallel.

Supports --workers for parallel chunking via ThreadPoolExecutor. A single
BlockChunker is shared by all workers.
"""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed

from blockprint.config import DEFAULT_WORKERS
from blockprint.pipeline.chunker import BlockChunker
from blockprint.pipeline.models import ChunkResult, ResourceStatements
from blockprint.utils.logging import get_logger

log = get_logger(__name__)


class ChunkRunner:
    """Run the chunker over a list of resources."""

    def __init__(
        self,
        chunker: BlockChunker,
        resources: list[ResourceStatements],
        *,
        workers: int = DEFAULT_WORKERS,
    ):
        counts = Counter(r.resource_id for r in resources)
        duplicates = sorted((rid for rid, n in counts.items() if n > 1), key=str)
        if duplicates:
            raise ValueError(f"Duplicate resource_id values: {duplicates}")
        self.chunker = chunker
        self.resources = resources
        self.workers = workers

    def run(self) -> ChunkResult:
        if self.workers > 1 and len(self.resources) > 1:
            result = self._run_parallel()
        else:
            result = self._run_sequential()

        # Completion order differs between workers; report in input order.
        result.blocks = {r.resource_id: result.blocks[r.resource_id] for r in self.resources if r.resource_id in result.blocks}
        log.info(
            "run_done",
            resources=result.resources_processed,
            blocks=result.blocks_created,
            errors=len(result.errors),
        )
        return result

    def _run_sequential(self) -> ChunkResult:
        """Chunk resources one after another."""
        result = ChunkResult()
        for resource in self.resources:
            result.merge(self._process_one(resource))
        return result

    def _run_parallel(self) -> ChunkResult:
        """Chunk resources in parallel using ThreadPoolExecutor."""
        result = ChunkResult()

        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            futures = {executor.submit(self._process_one, r): r for r in self.resources}
            for future in as_completed(futures):
                resource = futures[future]
                try:
                    result.merge(future.result())
                except Exception as e:
                    msg = f"[{resource.resource_id}] worker error: {e}"
                    log.error("worker_error", resource_id=resource.resource_id, error=str(e))
                    result.errors.append(msg)
                    result.resources_processed += 1

        return result

    def _process_one(self, resource: ResourceStatements) -> ChunkResult:
        r = ChunkResult()
        rlog = get_logger(__name__, resource_id=resource.resource_id)
        try:
            blocks = self.chunker.chunk(resource.resource_id, resource.statements)
        except Exception as e:
            msg = f"[{resource.resource_id}] {e}"
            rlog.error("resource_error", error=str(e))
            r.errors.append(msg)
        else:
            r.blocks[resource.resource_id] = blocks
            r.statements_read += len(resource.statements)
            r.blocks_created += len(blocks)
            rlog.debug("resource_done", statements=len(resource.statements), blocks=len(blocks))
        r.resources_processed += 1
        return r
