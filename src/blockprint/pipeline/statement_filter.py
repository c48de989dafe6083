"""Compaction of repeated consecutive statements."""

from __future__ import annotations

from collections.abc import Sequence

from blockprint.pipeline.models import Statement


def filter_statements(statements: Sequence[Statement]) -> list[Statement]:
    """Collapse each run of equal-valued statements to its first and last element.

    A long run of identical statements (e.g. repeated ``import`` or ``case``
    lines) would otherwise produce many windows with the same content. Keeping
    both ends of the run preserves the line span it covers.
    """
    filtered: list[Statement] = []
    i = 0
    while i < len(statements):
        first = statements[i]
        j = i + 1
        while j < len(statements) and statements[j].value == first.value:
            j += 1
        filtered.append(first)
        if j - i > 1:
            filtered.append(statements[j - 1])
        i = j
    return filtered
