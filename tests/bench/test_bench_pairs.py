"""Pair conversion benchmarks for urikit.

Compares the O(n) strict check against the O(1) fast check on the same
well-formed input, plus the cost of the conversion itself.

Run: uv run pytest tests/bench/test_bench_pairs.py --benchmark-enable --benchmark-only
"""

from __future__ import annotations

from urikit import is_pair_array, looks_like_pair_array, to_mapping

# ── Fixtures ─────────────────────────────────────────────────────────────────

SHORT = [["a", 1], ["b", 2], ["c", 3]]
LONG = [[f"k{i}", i] for i in range(1000)]


# ── Checks ───────────────────────────────────────────────────────────────────


def test_bench_strict_check_long(benchmark):
    assert benchmark(is_pair_array, LONG) is True


def test_bench_fast_check_long(benchmark):
    assert benchmark(looks_like_pair_array, LONG) is True


# ── Conversion ───────────────────────────────────────────────────────────────


def test_bench_to_mapping_strict_short(benchmark):
    result = benchmark(to_mapping, SHORT, strict=True)
    assert result == {"a": 1, "b": 2, "c": 3}


def test_bench_to_mapping_fast_short(benchmark):
    result = benchmark(to_mapping, SHORT, strict=False)
    assert result == {"a": 1, "b": 2, "c": 3}


def test_bench_to_mapping_strict_long(benchmark):
    assert len(benchmark(to_mapping, LONG, strict=True)) == 1000


def test_bench_to_mapping_fast_long(benchmark):
    assert len(benchmark(to_mapping, LONG, strict=False)) == 1000
