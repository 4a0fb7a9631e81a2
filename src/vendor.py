"""Move translations from the lang/vendor folder into package namespaces."""

from typing import Any, Dict, List, Optional


VENDOR_FOLDER = "vendor"


def merge_vendor_translations(
    folder: str,
    translations: Dict[str, Optional[str]],
    vendor_translations: Dict[str, Optional[str]]
) -> Dict[str, Optional[str]]:
    """
    Merge vendor overrides belonging to one language folder.

    lang/vendor/<package>/<folder>/<file>.php flattens to
    "<package>.<folder>.<file>.<key>", which becomes "<package>::<file>.<key>".

    Args:
        folder: Language folder name (e.g., "en")
        translations: Flat translations of the folder
        vendor_translations: Flat translations of the vendor folder

    Returns:
        New flat dictionary; the folder's own keys win on conflict
    """
    marker = f".{folder}."

    from_vendor = {
        key.replace(marker, "::", 1): value
        for key, value in vendor_translations.items()
        if marker in key
    }

    return {**from_vendor, **translations}


def apply_vendor_translations(folders: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Remove the vendor folder and merge its translations into the others.

    Args:
        folders: List of {"folder": str, "translations": dict} entries

    Returns:
        Entries without the vendor folder; unchanged if there is none
    """
    vendor = next((entry for entry in folders if entry["folder"] == VENDOR_FOLDER), None)

    if vendor is None:
        return folders

    return [
        {
            "folder": entry["folder"],
            "translations": merge_vendor_translations(
                entry["folder"],
                entry["translations"],
                vendor["translations"]
            ),
        }
        for entry in folders
        if entry is not vendor
    ]
