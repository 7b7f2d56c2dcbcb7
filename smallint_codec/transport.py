# ==================================================
# smallint_codec/transport.py
# ==================================================
from __future__ import annotations

import base64
import binascii

from .errors import MalformedInput


def encode_text(data: bytes) -> str:
    """bytes -> printable ASCII (standard padded base64)."""
    return base64.b64encode(data).decode("ascii")


def decode_text(text: str) -> bytes:
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise MalformedInput(f"invalid base64 payload: {exc}") from exc
