"""
TAP to TZX Conversion
=====================

Glue between the TAP decoder and the TZX encoder. Both directions are
pure in-memory transformations: the caller supplies the whole TAP file as
bytes and gets the whole TZX file back.

Two entry points are provided:

- convert_tap_to_tzx() raises a TapeFormatError on failure.
- try_convert() never raises for bad TAP data; it returns a ConversionResult
  carrying either the output or the error and its kind. An invalid
  pause_ms is a caller bug and still raises ValueError.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from tap2tzx.errors import FormatErrorKind, TapeFormatError
from tap2tzx.tape.builder import check_pause, encode_tzx
from tap2tzx.tape.parser import decode_tap
from tap2tzx.tape.records import DEFAULT_PAUSE_MS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a conversion.

    Exactly one of output/error is set. block_count counts every TAP
    block, empty ones included; it is 0 on failure.
    """
    output: Optional[bytes] = None
    block_count: int = 0
    error: Optional[TapeFormatError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[FormatErrorKind]:
        return self.error.kind if self.error is not None else None


def convert_tap_to_tzx(tap: bytes, pause_ms: int = DEFAULT_PAUSE_MS) -> bytes:
    """
    Convert a TAP image to a TZX image.

    Raises:
        TruncatedLengthError, TruncatedBlockError: If the TAP data is malformed
        PayloadTooLargeError: If a block cannot be represented in TZX
    """
    return encode_tzx(decode_tap(tap), pause_ms=pause_ms)


def try_convert(tap: bytes, pause_ms: int = DEFAULT_PAUSE_MS) -> ConversionResult:
    """
    Convert a TAP image, reporting failure in the result instead of raising.

    Raises:
        ValueError: If pause_ms is outside 0-65535. This is checked before
            any conversion and is not reported through the result.

    Example:
        >>> result = try_convert(b"\\x05")
        >>> result.ok, result.error_kind
        (False, <FormatErrorKind.TRUNCATED_LENGTH: 'truncated length'>)
    """
    check_pause(pause_ms)

    try:
        blocks = decode_tap(tap)
        output = encode_tzx(blocks, pause_ms=pause_ms)
    except TapeFormatError as e:
        logger.debug(f"Conversion failed: {e}")
        return ConversionResult(error=e)

    return ConversionResult(output=output, block_count=len(blocks))
