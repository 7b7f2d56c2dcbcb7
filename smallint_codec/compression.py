# ==================================================
# smallint_codec/compression.py
# ==================================================
from __future__ import annotations

import operator
from typing import Iterable, Iterator

from .const import VARINT_CONTINUE, VARINT_PAYLOAD, VARINT_SHIFT
from .errors import InvalidInput, MalformedInput

# -------- varint helpers -------------------------------------------------

def varint_encode(n: int) -> bytes:
    """7 bits per byte, least-significant group first."""
    if n < 0:
        raise InvalidInput(f"varint cannot hold negative value {n}")
    out = bytearray()
    while True:
        byte = n & VARINT_PAYLOAD
        n >>= VARINT_SHIFT
        if n:
            out.append(byte | VARINT_CONTINUE)
        else:
            out.append(byte)
            break
    return bytes(out)


def iter_varints(data: bytes) -> Iterator[int]:
    # python ints don't overflow, so the shift can grow as far as the data goes
    value = 0
    shift = 0
    pending = False
    for byte in data:
        value |= (byte & VARINT_PAYLOAD) << shift
        if byte & VARINT_CONTINUE:
            shift += VARINT_SHIFT
            pending = True
        else:
            yield value
            value = shift = 0
            pending = False
    if pending:
        raise MalformedInput("varint stream ends inside a group")

# -------- delta-encoding helpers -----------------------------------------

def _as_ints(values: Iterable[int]) -> list[int]:
    try:
        ints = [operator.index(v) for v in values]
    except TypeError as exc:
        raise InvalidInput(str(exc)) from exc
    for n in ints:
        if n < 0:
            raise InvalidInput(f"negative value {n}")
    return ints


def delta_encode(values: Iterable[int]) -> bytes:
    ints = sorted(_as_ints(values))
    if not ints:
        raise InvalidInput("delta encoding needs at least one value")

    out = bytearray()
    prev = 0
    for n in ints:
        out += varint_encode(n - prev)
        prev = n
    return bytes(out)


def delta_decode(data: bytes) -> list[int]:
    # materialise first so a truncated tail fails before anything is returned
    nums = list(iter_varints(data))
    for i in range(1, len(nums)):
        nums[i] += nums[i - 1]
    return nums
