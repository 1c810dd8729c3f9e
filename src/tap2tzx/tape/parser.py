"""
TAP File Parser
===============

This module reads TAP cassette images into a list of TapeBlock records.

A TAP file is nothing more than length-prefixed blocks laid end to end.
Decoding walks the buffer one block at a time and stops cleanly only when
the cursor lands exactly on the end of the data. Anything else (a stray
trailing byte, a block whose length runs past the end of the file) is a
decoding error; there is no best-effort recovery.

Usage Examples
--------------
Decoding raw bytes:
    >>> from tap2tzx.tape import decode_tap
    >>> blocks = decode_tap(bytes([0x03, 0x00, 0x41, 0x42, 0x43]))
    >>> blocks[0].payload
    b'ABC'

Reading a file:
    >>> from tap2tzx.tape import TapParser
    >>> parser = TapParser.from_file("manic.tap")
    >>> print(f"{len(parser)} blocks")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Union
import logging
import struct

from tap2tzx.errors import TapeError, TruncatedBlockError, TruncatedLengthError
from tap2tzx.tape.records import TAP_LENGTH_FORMAT, TAP_LENGTH_SIZE, TapeBlock

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Decoding
# =============================================================================

def decode_tap(data: bytes) -> list[TapeBlock]:
    """
    Decode a TAP image into its blocks.

    Args:
        data: The complete TAP file contents

    Returns:
        The blocks in file (playback) order. Zero-length blocks are kept
        as TapeBlocks with an empty payload.

    Raises:
        TruncatedLengthError: If a single byte is left where a length was expected
        TruncatedBlockError: If a block's length runs past the end of the data

    Example:
        >>> decode_tap(b"")
        []
        >>> decode_tap(b"\\x00\\x00")
        [TapeBlock(payload=b'')]
    """
    view = memoryview(data)
    size = len(view)
    blocks: list[TapeBlock] = []
    offset = 0

    while offset < size:
        remaining = size - offset
        if remaining < TAP_LENGTH_SIZE:
            raise TruncatedLengthError(offset=offset, available=remaining)

        (block_len,) = struct.unpack_from(TAP_LENGTH_FORMAT, view, offset)
        start = offset + TAP_LENGTH_SIZE
        available = size - start
        if block_len > available:
            raise TruncatedBlockError(
                offset=offset, expected=block_len, available=available
            )

        blocks.append(TapeBlock(bytes(view[start:start + block_len])))
        logger.debug(f"TAP block {len(blocks) - 1}: {block_len} bytes at offset {offset}")
        offset = start + block_len

    return blocks


# =============================================================================
# TAP Parser
# =============================================================================

@dataclass
class TapParser:
    """
    Parser for TAP cassette image files.

    Decodes the data on construction and keeps the resulting blocks.
    Construction fails with the same errors as decode_tap(); the
    is_valid/error_message fields record the outcome before the error
    propagates.

    Attributes:
        data: The raw TAP file bytes
        blocks: Decoded blocks in playback order

    Example:
        >>> parser = TapParser.from_bytes(tap_data)
        >>> for block in parser:
        ...     print(len(block))
    """
    # Raw TAP file data (not exposed in repr)
    data: bytes = field(repr=False)

    blocks: list[TapeBlock] = field(default_factory=list)

    is_valid: bool = False

    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        """Parse the tape data after initialization."""
        self._parse()

    @classmethod
    def from_file(cls, filepath: Union[str, Path]) -> "TapParser":
        """
        Create a TapParser from a file path.

        Raises:
            FileNotFoundError: If the file doesn't exist
            TapeFormatError: If the file cannot be decoded
        """
        return cls(data=Path(filepath).read_bytes())

    @classmethod
    def from_bytes(cls, data: bytes) -> "TapParser":
        return cls(data=data)

    def _parse(self) -> None:
        try:
            self.blocks = decode_tap(self.data)
            self.is_valid = True
        except TapeError as e:
            self.is_valid = False
            self.error_message = str(e)
            logger.error(f"Failed to parse TAP: {e}")
            raise

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> Iterator[TapeBlock]:
        return iter(self.blocks)

    def get_total_payload_bytes(self) -> int:
        """Sum of all block payload lengths (length prefixes excluded)."""
        return sum(len(block) for block in self.blocks)
