# ==================================================
# smallint_codec/errors.py
# ==================================================

class CodecError(ValueError):
    """Base class for every encode/decode failure raised by smallint_codec."""


class InvalidInput(CodecError):
    """Input the delta codec cannot represent (empty, negative, not an int)."""


class OutOfRange(CodecError):
    """Value outside DOMAIN_MIN..DOMAIN_MAX handed to the bitmap codec."""

    def __init__(self, value: int):
        super().__init__(f"value {value} outside bitmap domain")
        self.value = value


class MalformedInput(CodecError):
    """Structurally invalid payload: truncated varint, bad bitmap, bad base64."""


class UnknownFormat(CodecError):
    """Encoded string starts with a discriminator no format claims."""

    def __init__(self, tag: str):
        super().__init__(f"unknown format tag {tag!r}")
        self.tag = tag
