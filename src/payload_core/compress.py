"""build-payload - Compressed block framing."""
from __future__ import annotations

import struct
import zlib

from payload_core.protocol import (
    BLOCK_HEADER_FMT,
    BLOCK_MAX_LENGTH,
    COMPRESSION_LEVEL,
)


def compress(data: bytes, enabled: bool = True) -> bytes:
    """Frame data as a compressed block, or pass it through untouched.

    The block is the original length as a 4 byte big-endian integer followed
    by a zlib stream at level 9, which is what qUncompress() expects.
    """
    if not enabled:
        return data

    if len(data) > BLOCK_MAX_LENGTH:
        raise ValueError(f"Payload of {len(data)} bytes is too large for a 32-bit length prefix")

    return struct.pack(BLOCK_HEADER_FMT, len(data)) + zlib.compress(data, COMPRESSION_LEVEL)
