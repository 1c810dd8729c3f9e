"""
tap2tzx - Configuration
=======================

Converter settings. Values come from:
- Default values (defined here)
- Environment variables (ConverterConfig.from_env)
- Command-line options, which override both
"""

from dataclasses import dataclass
import os

from tap2tzx.tape.builder import validate_pause
from tap2tzx.tape.records import DEFAULT_PAUSE_MS


PAUSE_ENV_VAR = "TAP2TZX_PAUSE_MS"


@dataclass
class ConverterConfig:
    """
    Configuration for a conversion run.

    Attributes:
        pause_ms: Pause after each TZX block in milliseconds (default: 1000)
    """

    pause_ms: int = DEFAULT_PAUSE_MS

    @classmethod
    def from_env(cls) -> "ConverterConfig":
        """
        Create ConverterConfig from environment variables.

        Environment variables (all optional):
            TAP2TZX_PAUSE_MS: Pause after each block (integer, 0-65535)

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if pause := os.environ.get(PAUSE_ENV_VAR):
            try:
                value = int(pause)
            except ValueError:
                value = None
            if value is not None and validate_pause(value):
                config.pause_ms = value

        return config
