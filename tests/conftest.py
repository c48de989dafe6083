"""Shared test fixtures for blockprint tests."""

from __future__ import annotations

import pytest

from blockprint.pipeline.models import ResourceStatements, Statement


@pytest.fixture
def abc_statements() -> list[Statement]:
    """Three distinct single-line statements."""
    return [
        Statement(value="a", start_line=1, end_line=1),
        Statement(value="b", start_line=2, end_line=3),
        Statement(value="c", start_line=4, end_line=4),
    ]


@pytest.fixture
def sample_resources() -> list[ResourceStatements]:
    """A handful of resources, two of which share a run of statements."""
    shared = ["int i = 0 ;", "i ++ ;", "return i ;", "}"]
    return [
        ResourceStatements(
            resource_id="src/A.java",
            statements=[Statement(v, n, n) for n, v in enumerate(["class A {"] + shared, start=1)],
        ),
        ResourceStatements(
            resource_id="src/B.java",
            statements=[Statement(v, n + 10, n + 10) for n, v in enumerate(["class B {"] + shared)],
        ),
        ResourceStatements(resource_id="src/Empty.java", statements=[]),
        ResourceStatements(
            resource_id="src/C.java",
            statements=[Statement(f"stmt {n}", n, n) for n in range(1, 30)],
        ),
    ]
