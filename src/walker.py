"""Read language directories into nested translation trees."""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.flatten import flatten
from src.php_parser import parse_lang_source
from src.run_logging import RunLogger


_EXTENSION_PATTERN = re.compile(r"\.\w+$", re.ASCII)


def strip_extension(name: str) -> str:
    """Strip a trailing ".ext" from a file or directory name."""
    return _EXTENSION_PATTERN.sub("", name)


def list_lang_folders(lang_path: Path) -> List[str]:
    """
    List the language folders of a language path.

    Args:
        lang_path: Directory containing one folder per language (e.g., lang/)

    Returns:
        Sorted folder names (e.g., ["en", "fr", "vendor"])
    """
    return sorted(entry.name for entry in lang_path.iterdir() if entry.is_dir())


def has_php_translations(lang_path: Path) -> bool:
    """
    Check whether any language folder directly holds a .php file.

    Args:
        lang_path: Directory containing one folder per language

    Returns:
        True if at least one language folder contains a PHP file
    """
    try:
        for folder in list_lang_folders(lang_path):
            if any(entry.name.endswith(".php") for entry in (lang_path / folder).iterdir()):
                return True
    except OSError:
        return False

    return False


def parse_lang_file(
    file_path: Path,
    strict: bool = False,
    warnings: Optional[List[str]] = None,
    logger: Optional[RunLogger] = None
) -> Dict[str, Any]:
    """
    Parse one PHP language file.

    Args:
        file_path: Path to the PHP file
        strict: Raise on unsupported expressions instead of skipping them
        warnings: Optional list collecting unsupported-input warnings
        logger: Optional run logger

    Returns:
        Nested translation tree of the file
    """
    file_warnings: List[str] = []
    tree = parse_lang_source(
        file_path.read_bytes(),
        strict=strict,
        warnings=file_warnings,
        source_name=str(file_path)
    )

    if warnings is not None:
        warnings.extend(file_warnings)

    if logger:
        logger.log_file(file_path, len(flatten(tree)))
        for message in file_warnings:
            logger.log_warning(message, {"path": str(file_path)})

    return tree


def read_through_dir(
    directory: Path,
    strict: bool = False,
    warnings: Optional[List[str]] = None,
    logger: Optional[RunLogger] = None
) -> Dict[str, Any]:
    """
    Recursively read a directory into a nested translation tree.

    Subdirectories and files become keys (extension stripped), so
    lang/en/auth/login.php ends up under {"auth": {"login": {...}}}.

    Args:
        directory: Directory to read
        strict: Raise on unsupported expressions instead of skipping them
        warnings: Optional list collecting unsupported-input warnings
        logger: Optional run logger

    Returns:
        Nested translation tree

    Raises:
        PhpSyntaxError: If a file is not valid PHP
    """
    data: Dict[str, Any] = {}

    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        key = strip_extension(entry.name)

        if entry.is_dir():
            data[key] = read_through_dir(entry, strict, warnings, logger)
        else:
            data[key] = parse_lang_file(entry, strict, warnings, logger)

    return data
