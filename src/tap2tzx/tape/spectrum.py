"""
Spectrum ROM Block Interpretation
=================================

Read-only helpers that explain what a tape block holds, for listings and
log messages. Nothing here changes what gets written to the TZX file.

Blocks saved by the Spectrum ROM routines come in pairs:

**Header block** (flag 0x00, 19 bytes):
    Offset  Size    Description
    ------  ----    -----------
    0       1       Flag (0x00)
    1       1       Type (0 Program, 1 Number array, 2 Character array, 3 Bytes)
    2       10      File name, padded with spaces
    12      2       Length of the data block (little-endian)
    14      2       Parameter 1 (autostart line, or start address)
    16      2       Parameter 2 (program length, for Program)
    18      1       Checksum

**Data block** (flag 0xFF): flag, data, checksum.

The checksum byte is the XOR of every other byte in the block (flag
included), so XOR over the whole block is zero when the block is intact.

Reference
---------
- https://sinclair.wiki.zxnet.co.uk/wiki/Spectrum_tape_interface
"""

from dataclasses import dataclass
from enum import IntEnum
from functools import reduce
from operator import xor
from typing import Optional
import struct

from tap2tzx.tape.records import TapeBlock


HEADER_FLAG = 0x00
DATA_FLAG = 0xFF
HEADER_BLOCK_LENGTH = 19

# flag, type, name, data length, param 1, param 2, checksum
_HEADER_FORMAT = "<BB10sHHHB"


class HeaderType(IntEnum):
    """File type byte of a ROM header block."""
    PROGRAM = 0
    NUMBER_ARRAY = 1
    CHARACTER_ARRAY = 2
    BYTES = 3

    def get_description(self) -> str:
        descriptions = {
            HeaderType.PROGRAM: "Program",
            HeaderType.NUMBER_ARRAY: "Number array",
            HeaderType.CHARACTER_ARRAY: "Character array",
            HeaderType.BYTES: "Bytes",
        }
        return descriptions[self]


@dataclass(frozen=True)
class SpectrumHeader:
    """Decoded fields of a ROM header block."""
    header_type: int
    name: str
    data_length: int
    param1: int
    param2: int

    def get_type_name(self) -> str:
        try:
            return HeaderType(self.header_type).get_description()
        except ValueError:
            return f"Unknown (0x{self.header_type:02X})"


def verify_checksum(block: TapeBlock) -> bool:
    """
    Check the XOR parity byte at the end of a block.

    Empty blocks have no checksum and are reported as not valid.
    """
    if block.is_empty:
        return False
    return reduce(xor, block.payload, 0) == 0


def parse_header(block: TapeBlock) -> Optional[SpectrumHeader]:
    """
    Decode a ROM header block.

    Returns:
        The header fields, or None if the block is not a 19-byte block
        with flag 0x00.
    """
    if len(block) != HEADER_BLOCK_LENGTH or block.flag != HEADER_FLAG:
        return None

    _, header_type, raw_name, data_length, param1, param2, _ = struct.unpack(
        _HEADER_FORMAT, block.payload
    )
    # Names are plain ASCII on real tapes, but anything can turn up
    name = raw_name.decode("latin-1").rstrip()
    return SpectrumHeader(header_type, name, data_length, param1, param2)


def describe_block(block: TapeBlock) -> str:
    """
    One-line description of a block for listings.

    Examples:
        "Program: ManicMiner (line 0, 345 bytes)"
        "Bytes: screen (start 16384, 6912 bytes)"
        "Data: 6914 bytes"
        "Empty block"
    """
    if block.is_empty:
        return "Empty block"

    header = parse_header(block)
    if header is not None:
        type_name = header.get_type_name()
        if header.header_type == HeaderType.PROGRAM:
            # Autostart lines of 32768 and above mean "no autostart"
            if header.param1 < 0x8000:
                return (
                    f"{type_name}: {header.name} "
                    f"(line {header.param1}, {header.data_length} bytes)"
                )
            return f"{type_name}: {header.name} ({header.data_length} bytes)"
        if header.header_type == HeaderType.BYTES:
            return (
                f"{type_name}: {header.name} "
                f"(start {header.param1}, {header.data_length} bytes)"
            )
        return f"{type_name}: {header.name} ({header.data_length} bytes)"

    if block.flag == DATA_FLAG:
        return f"Data: {len(block)} bytes"
    return f"Custom block (flag 0x{block.flag:02X}): {len(block)} bytes"
