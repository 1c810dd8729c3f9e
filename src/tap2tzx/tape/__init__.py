"""
TAP and TZX Cassette Image Handling
===================================

This package converts ZX Spectrum cassette images from the TAP format to
the TZX format.

Overview
--------
TAP files are a bare sequence of length-prefixed data blocks. TZX files
add a signature header and describe each block explicitly, including how
long the tape should pause after it. Every TAP block maps onto exactly one
TZX standard speed data block, so the conversion is lossless.

This package provides:
- **decode_tap / TapParser**: Read TAP data into TapeBlock records
- **encode_tzx / TzxBuilder**: Write TapeBlock records as TZX data
- **convert_tap_to_tzx / try_convert**: The two steps in one call
- **describe_block**: Human-readable description of Spectrum ROM blocks

Quick Start
-----------
    >>> from pathlib import Path
    >>> from tap2tzx.tape import convert_tap_to_tzx
    >>> tzx = convert_tap_to_tzx(Path("game.tap").read_bytes())
    >>> Path("game.tzx").write_bytes(tzx)

Reference
---------
- TZX format: https://worldofspectrum.net/TZXformat.html
"""

# =============================================================================
# Public API Exports
# =============================================================================

from tap2tzx.tape.records import (
    TapeBlock,
    BlockId,
    TZX_SIGNATURE,
    TZX_VERSION_MAJOR,
    TZX_VERSION_MINOR,
    TZX_HEADER,
    DEFAULT_PAUSE_MS,
    MAX_BLOCK_LENGTH,
)

from tap2tzx.tape.parser import (
    TapParser,
    decode_tap,
)

from tap2tzx.tape.builder import (
    TzxBuilder,
    encode_tzx,
    validate_pause,
    check_pause,
    write_file_atomic,
)

from tap2tzx.tape.converter import (
    ConversionResult,
    convert_tap_to_tzx,
    try_convert,
)

from tap2tzx.tape.spectrum import (
    HeaderType,
    SpectrumHeader,
    describe_block,
    parse_header,
    verify_checksum,
)

__all__ = [
    # Records and constants
    "TapeBlock",
    "BlockId",
    "TZX_SIGNATURE",
    "TZX_VERSION_MAJOR",
    "TZX_VERSION_MINOR",
    "TZX_HEADER",
    "DEFAULT_PAUSE_MS",
    "MAX_BLOCK_LENGTH",
    # Decoder
    "TapParser",
    "decode_tap",
    # Encoder
    "TzxBuilder",
    "encode_tzx",
    "validate_pause",
    "check_pause",
    "write_file_atomic",
    # Conversion
    "ConversionResult",
    "convert_tap_to_tzx",
    "try_convert",
    # Spectrum blocks
    "HeaderType",
    "SpectrumHeader",
    "describe_block",
    "parse_header",
    "verify_checksum",
]
