"""
External interface-to-schema converter.

The conversion of a TypeScript interface into a Zod schema is delegated to
ts-to-zod. The pipeline only depends on the InterfaceConverter protocol, so
tests and callers can supply their own converter.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Protocol

from ..errors import InterfaceConversionError

logger = logging.getLogger(__name__)


class InterfaceConverter(Protocol):
    """Source text of one interface in, generated schema module text out."""

    def is_available(self) -> bool: ...

    def convert(self, source: str) -> str: ...


class TsToZodConverter:
    """Runs the ts-to-zod command line tool on one interface at a time."""

    INPUT_FILE = "interface.ts"
    OUTPUT_FILE = "interface.zod.ts"

    def __init__(self, command: list[str] | None = None, timeout: float = 60.0):
        """
        Args:
            command: Command prefix; input and output file paths are appended
            timeout: Seconds to wait for one conversion
        """
        self.command = command or ["npx", "--yes", "ts-to-zod", "--skipValidation"]
        self.timeout = timeout
        self._available = None

    def is_available(self) -> bool:
        """Check if the command's executable can be found."""
        if self._available is None:
            self._available = shutil.which(self.command[0]) is not None
            if not self._available:
                logger.warning("'%s' not found; interfaces will not be converted", self.command[0])
        return self._available

    def convert(self, source: str) -> str:
        """
        Convert one interface declaration.

        Args:
            source: TypeScript text declaring the interface

        Returns:
            The generated module text, imports included

        Raises:
            InterfaceConversionError: If the tool fails or produces nothing
        """
        with tempfile.TemporaryDirectory(prefix="storyblok_to_zod.") as work_dir:
            input_path = Path(work_dir) / self.INPUT_FILE
            output_path = Path(work_dir) / self.OUTPUT_FILE
            input_path.write_text(source, encoding="utf-8")

            cmd = [*self.command, self.INPUT_FILE, self.OUTPUT_FILE]
            logger.debug("Running %s", " ".join(cmd))
            try:
                result = subprocess.run(
                    cmd,
                    cwd=work_dir,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                )
            except FileNotFoundError as e:
                raise InterfaceConversionError(f"Converter command not found: {self.command[0]}") from e
            except subprocess.TimeoutExpired as e:
                raise InterfaceConversionError(f"Converter timed out after {self.timeout:g}s") from e

            if result.returncode != 0:
                detail = (result.stderr or result.stdout).strip()
                raise InterfaceConversionError(f"Converter exited with status {result.returncode}: {detail}")

            if not output_path.exists():
                raise InterfaceConversionError("Converter did not produce an output file")
            generated = output_path.read_text(encoding="utf-8")

        if not generated.strip():
            raise InterfaceConversionError("Converter produced an empty schema")
        return generated
