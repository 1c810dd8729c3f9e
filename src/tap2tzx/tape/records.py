"""
Tape Record Definitions
=======================

This module defines the in-memory tape block and the constants of the two
container formats handled by the converter.

TAP Structure Overview
----------------------
A TAP file has no header. It is a plain sequence of blocks:

    Offset  Size    Description
    ------  ----    -----------
    0       2       Length of following data (little-endian)
    2       n       Block data (flag byte, content, checksum byte)

repeated until the end of the file.

TZX Structure Overview
----------------------
A TZX file starts with a 10-byte header:

    Offset  Size    Description
    ------  ----    -----------
    0       7       Signature "ZXTape!"
    7       1       End of text marker (0x1A)
    8       1       Major revision
    9       1       Minor revision

followed by blocks, each introduced by a 1-byte block ID. This converter
only emits the standard speed data block (ID 0x10):

    Offset  Size    Description
    ------  ----    -----------
    0       1       Block ID (0x10)
    1       2       Pause after this block in ms (little-endian)
    3       2       Length of data that follow (little-endian)
    5       n       Data, exactly as in the TAP block

Reference
---------
- TZX format: https://worldofspectrum.net/TZXformat.html
- TAP format: https://sinclair.wiki.zxnet.co.uk/wiki/TAP_format
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional
import struct


# =============================================================================
# Format Constants
# =============================================================================

# Signature plus end of text marker
TZX_SIGNATURE = b"ZXTape!\x1a"

# TZX revision 1.20
TZX_VERSION_MAJOR = 1
TZX_VERSION_MINOR = 20

TZX_HEADER = TZX_SIGNATURE + bytes([TZX_VERSION_MAJOR, TZX_VERSION_MINOR])

# Silence after each block, in milliseconds. TAP files carry no timing.
DEFAULT_PAUSE_MS = 1000

# Both formats store block lengths in a 16-bit word
MAX_BLOCK_LENGTH = 0xFFFF

TAP_LENGTH_FORMAT = "<H"
TAP_LENGTH_SIZE = struct.calcsize(TAP_LENGTH_FORMAT)

# Block ID, pause, data length
STANDARD_BLOCK_HEADER_FORMAT = "<BHH"
STANDARD_BLOCK_HEADER_SIZE = struct.calcsize(STANDARD_BLOCK_HEADER_FORMAT)


class BlockId(IntEnum):
    """
    TZX block identifiers. The converter only writes standard speed blocks.
    """
    STANDARD_SPEED = 0x10

    def get_description(self) -> str:
        """Get a human-readable description of the block type."""
        descriptions = {
            BlockId.STANDARD_SPEED: "Standard speed data block",
        }
        return descriptions[self]


# =============================================================================
# Tape Block
# =============================================================================

@dataclass(frozen=True)
class TapeBlock:
    """
    One data block of a cassette image.

    The payload is kept exactly as it was read from the TAP file, including
    the leading flag byte and the trailing checksum byte. Nothing in the
    converter rewrites it.

    Attributes:
        payload: Raw block content

    Example:
        >>> block = TapeBlock(b"\\xffABC\\x00")
        >>> block.flag
        255
        >>> len(block)
        5
    """
    payload: bytes = b""

    def __post_init__(self) -> None:
        # Accept bytearray/memoryview but always store immutable bytes
        if not isinstance(self.payload, bytes):
            object.__setattr__(self, "payload", bytes(self.payload))

    def __len__(self) -> int:
        return len(self.payload)

    @property
    def is_empty(self) -> bool:
        return not self.payload

    @property
    def flag(self) -> Optional[int]:
        """First payload byte (0x00 header, 0xFF data), or None if empty."""
        return self.payload[0] if self.payload else None

    @property
    def checksum(self) -> Optional[int]:
        """Last payload byte, or None if empty."""
        return self.payload[-1] if self.payload else None

    def fits_tzx(self) -> bool:
        """True if the payload fits a TZX standard speed data block."""
        return len(self.payload) <= MAX_BLOCK_LENGTH

    def to_tap_bytes(self) -> bytes:
        """Serialize as a TAP block (length prefix + payload)."""
        return struct.pack(TAP_LENGTH_FORMAT, len(self.payload)) + self.payload
