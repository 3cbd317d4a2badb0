"""Conformance fixture loader for urikit.

Loads YAML fixtures from tests/fixtures/ and flattens them into cases for
parametrized testing. Each YAML document groups cases under the name of
the operation they exercise (encode, decode, is_pair_array, to_mapping).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    operation: str
    case_name: str
    data: dict[str, Any]

    @property
    def id(self) -> str:
        return f"{self.fixture_name}::{self.case_name}"


def load_fixtures(filename: str, operation: str) -> list[FixtureCase]:
    """Load every case for ``operation`` from a fixture file."""
    cases: list[FixtureCase] = []
    path = FIXTURE_DIR / filename
    with path.open(encoding="utf-8") as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            for case in doc.get(operation, []):
                cases.append(
                    FixtureCase(
                        fixture_name=doc["name"],
                        operation=operation,
                        case_name=case["name"],
                        data=case,
                    )
                )
    return cases
