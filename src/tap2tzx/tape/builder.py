"""
TZX File Builder
================

This module serializes TapeBlock records into a TZX cassette image.

Every block becomes one standard speed data block (ID 0x10). The payload
is copied verbatim, so the flag and checksum bytes from the TAP file pass
through untouched; the only new information is the pause after each
block, which TAP files don't carry.

Usage
-----
One-shot encoding:

    >>> from tap2tzx.tape import encode_tzx, TapeBlock
    >>> tzx = encode_tzx([TapeBlock(b"ABC")])
    >>> tzx[10:]
    b'\\x10\\xe8\\x03\\x03\\x00ABC'

Building incrementally:

    >>> builder = TzxBuilder(pause_ms=500)
    >>> builder.add_block(header_block).add_block(data_block)
    >>> builder.build_to_file("game.tzx")
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Union
import logging
import os
import struct
import tempfile

from tap2tzx.errors import PayloadTooLargeError
from tap2tzx.tape.records import (
    DEFAULT_PAUSE_MS,
    MAX_BLOCK_LENGTH,
    STANDARD_BLOCK_HEADER_FORMAT,
    STANDARD_BLOCK_HEADER_SIZE,
    TZX_HEADER,
    BlockId,
    TapeBlock,
)

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Validation Helpers
# =============================================================================

def validate_pause(pause_ms: int) -> bool:
    """
    Validate a pause duration.

    The pause is stored in a 16-bit word, so valid values are 0-65535 ms.
    A pause of 0 means the emulator should not stop the tape.
    """
    return isinstance(pause_ms, int) and 0 <= pause_ms <= 0xFFFF


def check_pause(pause_ms: int) -> None:
    """Raise ValueError unless validate_pause() accepts pause_ms."""
    if not validate_pause(pause_ms):
        raise ValueError(
            f"Invalid pause: {pause_ms!r}. Must be an integer from 0 to 65535 ms"
        )


# =============================================================================
# File Output
# =============================================================================

def write_file_atomic(filepath: Union[str, Path], data: bytes) -> None:
    """
    Write data to filepath without ever leaving a partial file there.

    The data goes to a temporary file in the same directory, which then
    replaces filepath in one step. On failure the temporary file is removed
    and any existing file at filepath is left untouched.

    Raises:
        OSError: If the temporary file cannot be written or moved into place
    """
    filepath = Path(filepath)
    tmp = tempfile.NamedTemporaryFile(
        dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp", delete=False
    )
    try:
        with tmp:
            tmp.write(data)
        # Temporary files are created 0600; keep the usual mode of a new file
        mode = filepath.stat().st_mode & 0o777 if filepath.exists() else 0o644
        os.chmod(tmp.name, mode)
        os.replace(tmp.name, filepath)
    except BaseException:
        Path(tmp.name).unlink(missing_ok=True)
        raise


# =============================================================================
# Encoding
# =============================================================================

def encode_tzx(
    blocks: Iterable[TapeBlock],
    pause_ms: int = DEFAULT_PAUSE_MS,
) -> bytes:
    """
    Encode tape blocks as a TZX image.

    Args:
        blocks: Blocks in playback order
        pause_ms: Pause written after every block, in milliseconds

    Returns:
        The complete TZX file contents: signature, version, then one
        standard speed data block per input block.

    Raises:
        PayloadTooLargeError: If any payload is longer than 65535 bytes.
            Nothing is produced in that case.
        ValueError: If pause_ms is outside 0-65535

    Example:
        >>> encode_tzx([]) == TZX_HEADER
        True
    """
    check_pause(pause_ms)
    blocks = list(blocks)

    # Validate everything up front so a failure never yields partial output
    for index, block in enumerate(blocks):
        if not block.fits_tzx():
            raise PayloadTooLargeError(index=index, size=len(block), limit=MAX_BLOCK_LENGTH)

    out = bytearray(TZX_HEADER)
    for index, block in enumerate(blocks):
        out += struct.pack(
            STANDARD_BLOCK_HEADER_FORMAT,
            BlockId.STANDARD_SPEED,
            pause_ms,
            len(block.payload),
        )
        out += block.payload
        logger.debug(f"TZX block {index}: {len(block)} bytes, pause {pause_ms}ms")

    return bytes(out)


# =============================================================================
# TZX Builder
# =============================================================================

@dataclass
class TzxBuilder:
    """
    Builds TZX cassette images.

    Attributes:
        pause_ms: Pause after each block in milliseconds (default 1000)

    Example:
        >>> builder = TzxBuilder()
        >>> builder.add_blocks(decode_tap(tap_data))
        >>> tzx_data = builder.build()
    """
    pause_ms: int = DEFAULT_PAUSE_MS

    # Blocks to write, in order
    _blocks: list[TapeBlock] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        check_pause(self.pause_ms)

    def add_block(self, block: Union[TapeBlock, bytes]) -> "TzxBuilder":
        """
        Append a block. Raw bytes are wrapped in a TapeBlock.

        Returns:
            Self for method chaining

        Raises:
            PayloadTooLargeError: If the payload is longer than 65535 bytes
        """
        if not isinstance(block, TapeBlock):
            block = TapeBlock(block)
        if not block.fits_tzx():
            raise PayloadTooLargeError(
                index=len(self._blocks), size=len(block), limit=MAX_BLOCK_LENGTH
            )
        self._blocks.append(block)
        return self

    def add_blocks(self, blocks: Iterable[Union[TapeBlock, bytes]]) -> "TzxBuilder":
        for block in blocks:
            self.add_block(block)
        return self

    def get_block_count(self) -> int:
        return len(self._blocks)

    def get_output_size(self) -> int:
        """Size in bytes of the image build() will return."""
        return len(TZX_HEADER) + sum(
            STANDARD_BLOCK_HEADER_SIZE + len(block) for block in self._blocks
        )

    def build(self) -> bytes:
        """Serialize all added blocks to TZX bytes."""
        return encode_tzx(self._blocks, pause_ms=self.pause_ms)

    def build_to_file(self, filepath: Union[str, Path]) -> int:
        """
        Build the image and write it to disk.

        Returns:
            Number of bytes written
        """
        data = self.build()
        write_file_atomic(filepath, data)
        logger.info(f"Wrote {len(data)} bytes to {filepath}")
        return len(data)
