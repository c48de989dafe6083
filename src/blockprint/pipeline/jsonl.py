"""JSONL I/O: statements in, blocks out.

Input has one resource per line::

    {"resource_id": "src/Foo.java", "statements": [{"value": "...", "start_line": 1, "end_line": 1}]}

Output has one block per line, see ``Block.to_payload``.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from blockprint.pipeline.models import Block, ResourceStatements, Statement
from blockprint.utils.logging import get_logger

log = get_logger(__name__)

STATEMENT_FIELDS = {"value", "start_line", "end_line"}


def _line_number(value, name: str, line_no: int, index: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Line {line_no}: statement #{index} '{name}' must be an integer, got {value!r}")
    return value


def _parse_statement(entry: dict, line_no: int, index: int) -> Statement:
    if not isinstance(entry, dict):
        raise ValueError(f"Line {line_no}: statement #{index} must be an object")
    missing = STATEMENT_FIELDS - set(entry.keys())
    if missing:
        raise ValueError(f"Line {line_no}: statement #{index} missing required fields: {missing}")
    if not isinstance(entry["value"], str):
        raise ValueError(f"Line {line_no}: statement #{index} 'value' must be a string, got {entry['value']!r}")
    return Statement(
        value=entry["value"],
        start_line=_line_number(entry["start_line"], "start_line", line_no, index),
        end_line=_line_number(entry["end_line"], "end_line", line_no, index),
    )


def read_resources(file_path: str | Path) -> list[ResourceStatements]:
    """Parse a statement JSONL file into per-resource statement lists."""
    file_path = Path(file_path)
    resources = []
    seen: set[str] = set()

    with open(file_path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                entry = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"Line {line_no}: invalid JSON: {e.msg}") from e

            if not isinstance(entry, dict) or "resource_id" not in entry:
                raise ValueError(f"Line {line_no}: missing required field 'resource_id'")
            resource_id = entry["resource_id"]
            if not isinstance(resource_id, str):
                raise ValueError(f"Line {line_no}: 'resource_id' must be a string, got {resource_id!r}")
            if resource_id in seen:
                raise ValueError(f"Line {line_no}: duplicate resource_id '{resource_id}'")
            seen.add(resource_id)
            raw_statements = entry.get("statements", [])
            if not isinstance(raw_statements, list):
                raise ValueError(f"Line {line_no}: 'statements' must be a list")

            resources.append(
                ResourceStatements(
                    resource_id=resource_id,
                    statements=[_parse_statement(s, line_no, i) for i, s in enumerate(raw_statements)],
                )
            )

    log.info("resources_read", path=str(file_path), count=len(resources))
    return resources


def write_blocks(blocks: Iterable[Block], stream: TextIO) -> int:
    """Write blocks as JSONL to ``stream``. Returns the number of lines written."""
    count = 0
    for block in blocks:
        stream.write(json.dumps(block.to_payload(), ensure_ascii=False))
        stream.write("\n")
        count += 1
    return count
