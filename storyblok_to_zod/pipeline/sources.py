"""
Input discovery and loading.

Inputs live under one root folder::

    <folder>/components/<space>/*.json   one document per component
    <folder>/types/storyblok.d.ts        interface definitions
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ConfigurationError, FileOperationError

logger = logging.getLogger(__name__)


def components_dir(folder: Path, space: str) -> Path:
    return Path(folder) / "components" / space


def types_file(folder: Path, types_file_name: str = "storyblok.d.ts") -> Path:
    return Path(folder) / "types" / types_file_name


def validate_paths(folder: Path, space: str, types_file_name: str = "storyblok.d.ts") -> None:
    """
    Check that the input folders and the types file exist.

    Raises:
        ConfigurationError: Listing every missing path
    """
    if not space or not space.strip():
        raise ConfigurationError("Space must be a non-empty string", {"space": space})

    required = {
        "folder": Path(folder),
        "components": components_dir(folder, space),
        "types": types_file(folder, types_file_name),
    }
    missing = [f"{label}: {path}" for label, path in required.items() if not path.exists()]
    if missing:
        raise ConfigurationError(
            "Required paths do not exist:\n  " + "\n  ".join(missing),
            {"folder": str(folder), "space": space},
        )


def discover_component_files(directory: Path, ignored: list[str]) -> list[Path]:
    """
    List component documents in a directory.

    Returns:
        The .json files, sorted by name, without the ignored ones

    Raises:
        ConfigurationError: If the directory does not exist
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise ConfigurationError(f"Components directory not found: {directory}", {"directory": str(directory)})

    files = sorted(p for p in directory.glob("*.json") if p.is_file() and p.name not in ignored)
    logger.debug("Found %d component files in %s", len(files), directory)
    return files


def read_text_file(path: Path) -> str:
    """
    Read a UTF-8 text file.

    Raises:
        FileOperationError: If the file is missing, unreadable or empty
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise FileOperationError("File not found", str(path), "read") from e
    except PermissionError as e:
        raise FileOperationError("Permission denied", str(path), "read") from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileOperationError(f"Cannot read file ({e})", str(path), "read") from e

    if not content.strip():
        raise FileOperationError("File is empty", str(path), "read")
    return content


def read_json_file(path: Path) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        FileOperationError: If the file cannot be read or is not valid JSON
    """
    content = read_text_file(path)
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise FileOperationError(f"Invalid JSON at line {e.lineno} column {e.colno}", str(path), "parse") from e


def load_component_documents(directory: Path, ignored: list[str]) -> dict[str, Any]:
    """
    Load every component document of a space.

    Files that cannot be read or parsed are logged and skipped.

    Returns:
        Component name (file stem) -> parsed document, in file name order
    """
    documents = {}
    for path in discover_component_files(directory, ignored):
        try:
            documents[path.stem] = read_json_file(path)
        except FileOperationError as e:
            logger.warning("Skipping component file: %s", e)
    logger.info("Loaded %d component documents", len(documents))
    return documents
