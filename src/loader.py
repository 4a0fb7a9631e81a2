"""Parse language paths and packages into php_<folder>.json records."""

from pathlib import Path
from typing import Any, Dict, List, Optional

from src.flatten import flatten
from src.run_logging import RunLogger
from src.vendor import apply_vendor_translations
from src.walker import list_lang_folders, read_through_dir


def parse_all(
    lang_path: Path,
    strict: bool = False,
    warnings: Optional[List[str]] = None,
    logger: Optional[RunLogger] = None
) -> List[Dict[str, Any]]:
    """
    Parse every language folder of a language path.

    Args:
        lang_path: Directory containing one folder per language (e.g., lang/)
        strict: Raise on unsupported expressions instead of skipping them
        warnings: Optional list collecting unsupported-input warnings
        logger: Optional run logger

    Returns:
        List of {"name": "php_<folder>.json", "translations": flat dict}.
        Folders without translations are left out; a missing path gives [].
    """
    if not lang_path.exists():
        return []

    folders = []
    for folder in list_lang_folders(lang_path):
        tree = read_through_dir(lang_path / folder, strict, warnings, logger)
        folders.append({"folder": folder, "translations": flatten(tree)})

    folders = apply_vendor_translations(folders)

    return [
        {"name": f"php_{entry['folder']}.json", "translations": entry["translations"]}
        for entry in folders
        if entry["translations"]
    ]


def parse_package(
    lang_path: Path,
    package_name: str,
    strict: bool = False,
    warnings: Optional[List[str]] = None,
    logger: Optional[RunLogger] = None
) -> List[Dict[str, Any]]:
    """
    Parse a package's language path, namespacing keys as "<package>::<key>".

    Args:
        lang_path: Language directory of the package
        package_name: Package name used as namespace
        strict: Raise on unsupported expressions instead of skipping them
        warnings: Optional list collecting unsupported-input warnings
        logger: Optional run logger

    Returns:
        List of {"name": "php_<folder>.json", "translations": flat dict}
    """
    return [
        {
            **lang_file,
            "translations": {
                f"{package_name}::{key}": value
                for key, value in lang_file["translations"].items()
            },
        }
        for lang_file in parse_all(lang_path, strict, warnings, logger)
    ]


def prepare_extended_lang_files(
    lang_paths: List[Path],
    packages: Optional[List[Dict[str, Any]]] = None,
    strict: bool = False,
    warnings: Optional[List[str]] = None,
    logger: Optional[RunLogger] = None
) -> List[Dict[str, Any]]:
    """
    Parse packages and language paths into one list of records.

    Package records come first so that application translations override
    them once records sharing a name are merged.

    Args:
        lang_paths: Application language directories
        packages: Optional package descriptors from get_packages_lang_paths
        strict: Raise on unsupported expressions instead of skipping them
        warnings: Optional list collecting unsupported-input warnings
        logger: Optional run logger

    Returns:
        List of {"name": str, "translations": flat dict}, names may repeat
    """
    lang_files: List[Dict[str, Any]] = []

    for package in packages or []:
        lang_files.extend(
            parse_package(package["lang_path"], package["name"], strict, warnings, logger)
        )

    for lang_path in lang_paths:
        lang_files.extend(parse_all(lang_path, strict, warnings, logger))

    return lang_files
