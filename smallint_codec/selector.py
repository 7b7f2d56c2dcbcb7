# ==================================================
# smallint_codec/selector.py
# ==================================================
from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from .bitmap      import bitmap_decode, bitmap_eligible, bitmap_encode
from .compression import delta_decode, delta_encode
from .const       import TAG_BITMAP, TAG_DELTA
from .errors      import InvalidInput, UnknownFormat
from .transport   import decode_text, encode_text

logger = logging.getLogger(__name__)

# ── payload formats ─────────────────────────────────────────

class Format:
    """One payload encoding, identified on the wire by a single-char tag."""
    tag: str = ""

    def try_encode(self, values: Sequence[int]) -> Optional[bytes]:
        """Payload bytes, or None when `values` can't be represented."""
        raise NotImplementedError

    def decode(self, data: bytes) -> list[int]:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}(tag={self.tag!r})"


class DeltaVarintFormat(Format):
    tag = TAG_DELTA

    def try_encode(self, values):
        return delta_encode(values)

    def decode(self, data):
        return delta_decode(data)


class BitmapFormat(Format):
    tag = TAG_BITMAP

    def try_encode(self, values):
        # eligibility decided up front; OutOfRange is never used as a signal
        if not bitmap_eligible(values):
            return None
        return bitmap_encode(values)

    def decode(self, data):
        return bitmap_decode(data)


# delta first: ties go to the earlier format
DEFAULT_FORMATS = (DeltaVarintFormat(), BitmapFormat())

# ── selector ────────────────────────────────────────────────

class FormatSelector:
    """Encodes with every eligible format and keeps the shortest tagged string."""
    def __init__(self, formats: Iterable[Format] = DEFAULT_FORMATS):
        self.formats = tuple(formats)
        self._by_tag = {}
        for fmt in self.formats:
            if len(fmt.tag) != 1:
                raise ValueError(f"format tag must be one character: {fmt!r}")
            if fmt.tag in self._by_tag:
                raise ValueError(f"duplicate format tag {fmt.tag!r}")
            self._by_tag[fmt.tag] = fmt

    # ------------------------------------------------------------------
    def candidates(self, values: Iterable[int]) -> dict[str, str]:
        values = list(values)
        out = {}
        if not values:
            return out
        for fmt in self.formats:
            payload = fmt.try_encode(values)
            if payload is not None:
                out[fmt.tag] = fmt.tag + encode_text(payload)
        return out

    def serialize(self, values: Iterable[int]) -> str:
        values = list(values)
        if not values:
            return ""
        cands = self.candidates(values)
        if not cands:
            raise InvalidInput("no format can encode these values")
        best = None
        for text in cands.values():          # insertion order == self.formats
            if best is None or len(text) < len(best):
                best = text
        logger.debug("picked format %r (%d chars) from %s", best[0], len(best),
                     {tag: len(text) for tag, text in cands.items()})
        return best

    # ------------------------------------------------------------------
    def deserialize(self, text: str) -> list[int]:
        if not text:
            return []
        fmt = self._by_tag.get(text[0])
        if fmt is None:
            raise UnknownFormat(text[0])
        return fmt.decode(decode_text(text[1:]))


default_selector = FormatSelector()


def serialize(values: Iterable[int]) -> str:
    """Shortest tagged encoding of `values`; "" for no values."""
    return default_selector.serialize(values)


def deserialize(text: str) -> list[int]:
    """Ascending values back from a string produced by `serialize`."""
    return default_selector.deserialize(text)
