"""
Base class for formatters of the generated module.

A formatter is an external tool reading code on stdin and writing the
formatted code to stdout. Formatting is best effort: any failure leaves the
code as it was.
"""

from __future__ import annotations

import logging
import subprocess
from abc import ABC, abstractmethod

from ..config import FormatterConfig

logger = logging.getLogger(__name__)


class Formatter(ABC):
    """Abstract base class for stdin/stdout code formatters."""

    # Tool name used in log messages
    name = "formatter"

    # Seconds before a formatting run is abandoned
    timeout = 60

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the formatter tool can be run.

        Returns:
            True if the formatter can be used
        """

    @abstractmethod
    def command_line(self, config: FormatterConfig) -> list[str]:
        """Command formatting stdin to stdout with the given options."""

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format the generated TypeScript.

        Args:
            code: The generated module
            config: Formatter configuration

        Returns:
            Formatted code, or the input unchanged if the tool is missing or fails
        """
        if not self.is_available():
            logger.warning("%s is not available; output left unformatted", self.name)
            return code

        try:
            result = subprocess.run(
                self.command_line(config),
                input=code,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.warning("%s failed: %s", self.name, e)
            return code

        if result.returncode != 0:
            logger.warning("%s exited with status %d: %s", self.name, result.returncode, result.stderr.strip())
            return code
        if not result.stdout.strip():
            logger.warning("%s produced no output; output left unformatted", self.name)
            return code
        return result.stdout
