"""
Prettier formatter for the generated TypeScript.
"""

from __future__ import annotations

import subprocess

from ..config import FormatterConfig
from .base import Formatter


class PrettierFormatter(Formatter):
    """Formatter piping code through prettier."""

    name = "prettier"

    def __init__(self, command: list[str] | None = None):
        self.command = command or ["npx", "--yes", "prettier"]
        self._available = None

    def is_available(self) -> bool:
        """Check if prettier can be run."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [*self.command, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=30,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, OSError):
                self._available = False
        return self._available

    def command_line(self, config: FormatterConfig) -> list[str]:
        cmd = [
            *self.command,
            "--stdin-filepath",
            "schemas.ts",
            "--print-width",
            str(config.line_length),
            "--tab-width",
            str(config.tab_width),
        ]
        if config.single_quote:
            cmd.append("--single-quote")
        return cmd
