"""
tap2tzx Error Hierarchy
=======================

This module defines the exception hierarchy for the converter.
All exceptions inherit from TapeError, allowing callers to catch every
conversion failure with a single except clause if desired.

Exception Hierarchy
-------------------
TapeError (base)
└── TapeFormatError - a tape image cannot be decoded or encoded
    ├── TruncatedLengthError - fewer than 2 bytes where a length was expected
    ├── TruncatedBlockError - declared block length runs past end of input
    └── PayloadTooLargeError - block too long for a TZX standard data block

Each TapeFormatError carries a FormatErrorKind tag, so callers that prefer
to branch on the failure kind (rather than on the exception class) can do so:

    try:
        blocks = decode_tap(data)
    except TapeFormatError as e:
        if e.kind is FormatErrorKind.TRUNCATED_BLOCK:
            ...

None of these errors is recoverable: a conversion that raises one produces
no output.
"""

from enum import Enum
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class TapeError(Exception):
    """
    Base exception for all tap2tzx errors.

        try:
            tzx = convert_tap_to_tzx(tap)
        except TapeError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Format Exceptions
# =============================================================================

class FormatErrorKind(Enum):
    """The ways a tape conversion can fail."""
    TRUNCATED_LENGTH = "truncated length"
    TRUNCATED_BLOCK = "truncated block"
    PAYLOAD_TOO_LARGE = "payload too large"


class TapeFormatError(TapeError):
    """
    A tape image could not be decoded or encoded.

    Attributes:
        message: The error description
        kind: Which of the FormatErrorKind failures occurred
        offset: Byte offset in the input where the problem starts (optional)
    """

    kind: FormatErrorKind

    def __init__(self, message: str, offset: Optional[int] = None):
        self.message = message
        self.offset = offset
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.offset is None:
            return self.message
        return f"{self.message} (at offset {self.offset})"


class TruncatedLengthError(TapeFormatError):
    """
    Fewer than 2 bytes remain where a block length prefix was expected.

    Typically seen on files cut short by a bad download or a trailing
    stray byte.
    """

    kind = FormatErrorKind.TRUNCATED_LENGTH

    def __init__(self, offset: int, available: int):
        self.available = available
        super().__init__(
            f"expected 2-byte block length but found {available} byte(s)",
            offset=offset,
        )


class TruncatedBlockError(TapeFormatError):
    """
    A block's declared length exceeds the bytes left in the input.

    Attributes:
        expected: Payload length declared by the length prefix
        available: Bytes actually remaining after the prefix
    """

    kind = FormatErrorKind.TRUNCATED_BLOCK

    def __init__(self, offset: int, expected: int, available: int):
        self.expected = expected
        self.available = available
        super().__init__(
            f"block declares {expected} bytes but only {available} remain",
            offset=offset,
        )


class PayloadTooLargeError(TapeFormatError):
    """
    A block payload does not fit the 16-bit length of a TZX standard
    speed data block (maximum 65535 bytes).

    Attributes:
        index: Position of the offending block in the block sequence
        size: Payload length in bytes
    """

    kind = FormatErrorKind.PAYLOAD_TOO_LARGE

    def __init__(self, index: int, size: int, limit: int = 0xFFFF):
        self.index = index
        self.size = size
        self.limit = limit
        super().__init__(
            f"block {index} payload is {size} bytes, maximum is {limit}"
        )
