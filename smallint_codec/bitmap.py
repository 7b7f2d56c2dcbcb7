# ==================================================
# smallint_codec/bitmap.py
# ==================================================
from __future__ import annotations

from typing import Collection, Iterable

import numpy as np

from .const import BITMAP_BITS, BITMAP_SIZE, DOMAIN_MAX, DOMAIN_MIN
from .errors import MalformedInput, OutOfRange


def bitmap_eligible(values: Collection[int]) -> bool:
    """True when every value is distinct and inside DOMAIN_MIN..DOMAIN_MAX."""
    if len(values) == 0:
        return False
    seen = set()
    for v in values:
        if not isinstance(v, (int, np.integer)) or isinstance(v, bool):
            return False
        if v < DOMAIN_MIN or v > DOMAIN_MAX or v in seen:
            return False
        seen.add(v)
    return True

# -- encode / decode --------------------------------------------------------

def bitmap_encode(values: Iterable[int]) -> bytes:
    # value v lives in bit (v-1) & 7 of byte (v-1) // 8
    bits = np.zeros(BITMAP_BITS, dtype=np.uint8)
    for v in values:
        if v < DOMAIN_MIN or v > DOMAIN_MAX:
            raise OutOfRange(v)
        bits[int(v) - DOMAIN_MIN] = 1
    return np.packbits(bits, bitorder="little").tobytes()


def bitmap_decode(data: bytes) -> list[int]:
    if len(data) != BITMAP_SIZE:
        raise MalformedInput(f"bitmap must be {BITMAP_SIZE} bytes, got {len(data)}")
    bits = np.unpackbits(np.frombuffer(data, dtype=np.uint8), bitorder="little")
    if bits[DOMAIN_MAX:].any():
        raise MalformedInput("bitmap padding bits are set")
    return [int(i) + DOMAIN_MIN for i in np.flatnonzero(bits[:DOMAIN_MAX])]
