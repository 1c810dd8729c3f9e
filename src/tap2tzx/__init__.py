"""
tap2tzx - ZX Spectrum TAP to TZX Cassette Image Converter
=========================================================

This package converts ZX Spectrum tape images from the simple TAP format
into the TZX format used by most Spectrum emulators and tape players.

Main Components
---------------
- **tape**: TAP decoding, TZX encoding and block inspection
- **cli**: The `tap2tzx` command-line tool

Quick Start
-----------
Convert in memory:
    >>> from tap2tzx import convert_tap_to_tzx
    >>> tzx = convert_tap_to_tzx(tap_bytes)

Or use the command-line tool:
    $ tap2tzx game.tap              # writes game.tzx
    $ tap2tzx game.tap out.tzx -v

Reference Documentation
-----------------------
- TZX format: https://worldofspectrum.net/TZXformat.html
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from tap2tzx.errors import (
    TapeError,
    TapeFormatError,
    FormatErrorKind,
    TruncatedLengthError,
    TruncatedBlockError,
    PayloadTooLargeError,
)

from tap2tzx.tape import (
    TapeBlock,
    TapParser,
    TzxBuilder,
    ConversionResult,
    decode_tap,
    encode_tzx,
    convert_tap_to_tzx,
    try_convert,
    DEFAULT_PAUSE_MS,
    TZX_HEADER,
)

from tap2tzx.config import ConverterConfig

__all__ = [
    "__version__",
    # Errors
    "TapeError",
    "TapeFormatError",
    "FormatErrorKind",
    "TruncatedLengthError",
    "TruncatedBlockError",
    "PayloadTooLargeError",
    # Codec
    "TapeBlock",
    "TapParser",
    "TzxBuilder",
    "ConversionResult",
    "decode_tap",
    "encode_tzx",
    "convert_tap_to_tzx",
    "try_convert",
    "DEFAULT_PAUSE_MS",
    "TZX_HEADER",
    # Configuration
    "ConverterConfig",
]
