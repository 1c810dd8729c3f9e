"""
tap2tzx Command-Line Interface
==============================

- **tap2tzx**: TAP to TZX cassette image converter

Implemented as a Click application with help text and consistent
exit codes (see tap2tzx.cli.errors.ExitCode).
"""

__all__ = ["tap2tzx"]
