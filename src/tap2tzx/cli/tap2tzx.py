"""
tap2tzx - TAP to TZX Converter Command-Line Interface
=====================================================

Converts a ZX Spectrum TAP cassette image into a TZX image.

The whole TAP file is read into memory and converted before anything is
written. The TZX file is written to a temporary file that replaces the
output in one step, so a failed run never leaves a half-written TZX file
behind. An existing output file is overwritten unless --no-clobber is given.

Usage Examples
--------------
Convert, writing game.tzx next to the input:
    $ tap2tzx game.tap

Choose the output file:
    $ tap2tzx game.tap /tmp/converted.tzx

Use a shorter pause between blocks and list every block:
    $ tap2tzx -p 500 -v game.tap
"""

import logging
from pathlib import Path
from typing import Optional

import click

from tap2tzx import __version__
from tap2tzx.cli.errors import handle_cli_exception
from tap2tzx.config import ConverterConfig
from tap2tzx.tape import (
    decode_tap,
    describe_block,
    encode_tzx,
    verify_checksum,
    write_file_atomic,
)

logger = logging.getLogger(__name__)

TZX_EXTENSION = ".tzx"


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def resolve_output_path(output: Optional[Path], tap_file: Path) -> Path:
    """
    Determine the output TZX file path.

    If no output is specified, the input path is reused with its
    extension replaced by .tzx.

    Examples:
        game.tap      → game.tzx
        dir/GAME.TAP  → dir/GAME.tzx
        noext         → noext.tzx
    """
    if output is not None:
        return output
    return tap_file.with_suffix(TZX_EXTENSION)


def is_same_file(tap_file: Path, tzx_file: Path) -> bool:
    """True if both paths name the same existing file."""
    return tzx_file.exists() and tap_file.resolve() == tzx_file.resolve()


# =============================================================================
# Main Command
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.argument(
    "output_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-p", "--pause",
    type=click.IntRange(0, 0xFFFF),
    default=None,
    help="Pause after each block in ms (default: 1000, or $TAP2TZX_PAUSE_MS)",
)
@click.option(
    "-n", "--no-clobber",
    is_flag=True,
    help="Refuse to overwrite OUTPUT_FILE if it already exists",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="List every block and show debug output",
)
@click.version_option(__version__, "--version", "-V", prog_name="tap2tzx")
def main(
    input_file: Path,
    output_file: Optional[Path],
    pause: Optional[int],
    no_clobber: bool,
    verbose: bool,
) -> None:
    """
    Convert a ZX Spectrum TAP file to TZX format.

    INPUT_FILE is the .tap image to convert. OUTPUT_FILE defaults to the
    input path with a .tzx extension and is overwritten if it exists.

    \b
    Examples:
      tap2tzx game.tap
      tap2tzx game.tap converted.tzx
      tap2tzx -p 500 -v game.tap
    """
    setup_logging(verbose)

    try:
        output = resolve_output_path(output_file, input_file)

        if is_same_file(input_file, output):
            click.echo(f"Not overwriting input file {input_file}")
            return

        if no_clobber and output.exists():
            raise click.BadParameter(
                f"'{output}' already exists (drop --no-clobber to overwrite)",
                param_hint="OUTPUT_FILE",
            )

        if pause is None:
            pause = ConverterConfig.from_env().pause_ms

        click.echo(f"Converting TAP {input_file} to TZX at {output}")

        blocks = decode_tap(input_file.read_bytes())

        if verbose:
            for index, block in enumerate(blocks):
                status = "" if block.is_empty or verify_checksum(block) else "  [bad checksum]"
                click.echo(f"  {index:4d}  {describe_block(block)}{status}")

        tzx = encode_tzx(blocks, pause_ms=pause)
        write_file_atomic(output, tzx)
        logger.debug(f"Wrote {len(tzx)} bytes with {pause}ms pauses")

        click.echo(f"Successfully converted {len(blocks)} blocks")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
