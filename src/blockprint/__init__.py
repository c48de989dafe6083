"""blockprint: rolling-hash block fingerprints for duplicate code detection."""

from blockprint.pipeline.chunker import BlockChunker
from blockprint.pipeline.models import Block, Statement
from blockprint.pipeline.statement_filter import filter_statements

__all__ = ["Block", "BlockChunker", "Statement", "filter_statements"]
