from .selector import (BitmapFormat, DeltaVarintFormat, Format,
                       FormatSelector, deserialize, serialize)
from .errors   import (CodecError, InvalidInput, MalformedInput,
                       OutOfRange, UnknownFormat)

__all__ = [
    "serialize", "deserialize",
    "FormatSelector", "Format", "DeltaVarintFormat", "BitmapFormat",
    "CodecError", "InvalidInput", "OutOfRange", "MalformedInput", "UnknownFormat",
]
