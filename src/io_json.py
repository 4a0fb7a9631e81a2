"""Merge translation records and write php_*.json files."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.run_logging import RunLogger


OUTPUT_PREFIX = "php_"


def merge_lang_files(lang_files: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Merge records that share an output name.

    Args:
        lang_files: List of {"name": str, "translations": dict}, names may repeat

    Returns:
        One record per name in first-seen order; later records win on key conflicts
    """
    merged: Dict[str, Dict[str, Any]] = {}

    for lang_file in lang_files:
        merged.setdefault(lang_file["name"], {}).update(lang_file["translations"])

    return [
        {"name": name, "translations": translations}
        for name, translations in merged.items()
    ]


def write_i18n_file(file_path: Path, data: Dict[str, Any], indent: Optional[int] = None) -> None:
    """
    Write translations to a JSON file.

    Args:
        file_path: Path to output JSON file
        data: Dictionary of translation keys and values
        indent: JSON indentation (default: compact)
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with open(file_path, "w", encoding="utf-8") as f:
        separators = (",", ":") if indent is None else None
        json.dump(data, f, ensure_ascii=False, indent=indent, separators=separators)
        f.write("\n")


def generate_files(
    output_dir: Path,
    lang_files: List[Dict[str, Any]],
    indent: Optional[int] = None,
    logger: Optional[RunLogger] = None
) -> List[Dict[str, Any]]:
    """
    Merge records by name and write one JSON file per name.

    Args:
        output_dir: Directory to write into, created if missing
        lang_files: Records from prepare_extended_lang_files
        indent: JSON indentation (default: compact)
        logger: Optional run logger

    Returns:
        The merged records that were written
    """
    merged = merge_lang_files(lang_files)

    output_dir.mkdir(parents=True, exist_ok=True)

    for lang_file in merged:
        file_path = output_dir / lang_file["name"]
        write_i18n_file(file_path, lang_file["translations"], indent=indent)
        if logger:
            logger.log_written(file_path, len(lang_file["translations"]))

    return merged


def reset(output_dir: Path) -> List[Path]:
    """
    Delete previously generated php_* files.

    Args:
        output_dir: Directory holding generated files

    Returns:
        Paths that were removed (empty if output_dir does not exist)
    """
    if not output_dir.is_dir():
        return []

    removed = []
    for file_path in sorted(output_dir.iterdir()):
        if file_path.is_file() and file_path.name.startswith(OUTPUT_PREFIX):
            file_path.unlink()
            removed.append(file_path)

    return removed
