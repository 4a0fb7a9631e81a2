"""Discover language folders shipped by Composer packages."""

from pathlib import Path
from typing import Any, Dict, List


# Checked in order, first match wins
PACKAGE_LANG_DIRS = (Path("resources") / "lang", Path("lang"))


def get_packages_lang_paths(vendor_dir: Path = Path("vendor")) -> List[Dict[str, Any]]:
    """
    Find packages under vendor/<org>/<package> that ship translations.

    Args:
        vendor_dir: Composer vendor directory (default: vendor)

    Returns:
        List of {"name": package name, "lang_path": Path}, sorted by org and package.
        Empty if vendor_dir does not exist.
    """
    if not vendor_dir.is_dir():
        return []

    packages: List[Dict[str, Any]] = []

    for org in sorted(entry for entry in vendor_dir.iterdir() if entry.is_dir()):
        for package in sorted(entry for entry in org.iterdir() if entry.is_dir()):
            for lang_dir in PACKAGE_LANG_DIRS:
                lang_path = package / lang_dir
                if lang_path.is_dir():
                    packages.append({"name": package.name, "lang_path": lang_path})
                    break

    return packages
