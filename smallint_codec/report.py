# ==================================================
# smallint_codec/report.py
# ==================================================
"""Size/ratio bookkeeping for the demo script; not needed to encode or decode."""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from .const    import DOMAIN_MAX, DOMAIN_MIN
from .selector import FormatSelector, default_selector


def compression_ratio(original: str, encoded: str) -> str:
    """Encoded length as a whole-number percentage of the original length."""
    if not original:
        return "0"
    percent = len(encoded) / len(original) * 100
    return str(int(percent + 0.5))


@dataclass
class SizeReport:
    name: str
    original_size: int
    encoded_size: int
    ratio: str
    correct: bool
    encoded: str


def build_report(name: str, values: Sequence[int],
                 selector: Optional[FormatSelector] = None) -> SizeReport:
    selector = selector or default_selector
    original = json.dumps(list(values), separators=(",", ":"))
    encoded  = selector.serialize(values)
    restored = selector.deserialize(encoded)
    return SizeReport(
        name          = name,
        original_size = len(original),
        encoded_size  = len(encoded),
        ratio         = compression_ratio(original, encoded),
        correct       = restored == sorted(values),
        encoded       = encoded,
    )

# ── stock cases ────────────────────────────────────────────

def _random(n: int) -> Callable[[np.random.Generator], list[int]]:
    return lambda rng: rng.integers(DOMAIN_MIN, DOMAIN_MAX + 1, size=n).tolist()


def _fixed(values: Sequence[int]) -> Callable[[np.random.Generator], list[int]]:
    return lambda rng: list(values)


DEFAULT_CASES: dict[str, Callable[[np.random.Generator], list[int]]] = {
    "Short: [1,2,3]":       _fixed([1, 2, 3]),
    "Short: [10,20,30]":    _fixed([10, 20, 30]),
    "All 1-digit":          _fixed(range(1, 10)),
    "All 2-digit":          _fixed(range(10, 100)),
    "All 3-digit":          _fixed(range(100, 301)),
    "Random 50":            _random(50),
    "Random 100":           _random(100),
    "Random 500":           _random(500),
    "Random 1000":          _random(1000),
    "Each number x3 (900)": _fixed([v for v in range(1, 301) for _ in range(3)]),
}


def run_cases(seed: int = 0, selector: Optional[FormatSelector] = None,
              cases=None) -> list[SizeReport]:
    rng = np.random.default_rng(seed)
    cases = DEFAULT_CASES if cases is None else cases
    return [build_report(name, make(rng), selector) for name, make in cases.items()]
