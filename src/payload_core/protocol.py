"""build-payload protocol constants.

Single source of truth for the compressed block framing and the default
declaration layout. Keep this file stable: decoders rely on the framing.
"""

# Compressed block: [OriginalLength(4, big-endian) | zlib stream]
# This is the qCompress()/qUncompress() convention.
BLOCK_HEADER_FMT = ">I"
BLOCK_HEADER_LEN = 4
BLOCK_MAX_LENGTH = 0xFFFFFFFF
COMPRESSION_LEVEL = 9

# Each token is "0xHH" plus the ", " separator.
TOKEN_WIDTH = 6

# Default layout
DEFAULT_INDENTATION = 4
DEFAULT_WIDTH = 120
DEFAULT_VARIABLE_NAME = "declarations"
DEFAULT_VARIABLE_TYPE = "static const unsigned char"
DEFAULT_SIZE_NAME = "declarationsSize"
DEFAULT_SIZE_TYPE = "static const unsigned long"

DEFAULT_COPYRIGHT = "Copyright 2020 Inesonic, LLC.\nAll rights reserved."
