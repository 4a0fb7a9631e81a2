"""Flatten nested translation trees into dot-notation keys."""

from typing import Any, Dict, Optional


def flatten(tree: Optional[Dict[str, Any]], prefix: str = "") -> Dict[str, Optional[str]]:
    """
    Flatten a nested translation tree.

    String and None leaves are kept under their dot-joined path, nested
    dictionaries are recursed into. A None tree yields an empty map.

    Args:
        tree: Nested translation tree (e.g., {"auth": {"failed": "Nope"}})
        prefix: Path prefix prepended to every key

    Returns:
        Flat dictionary (e.g., {"auth.failed": "Nope"})

    Raises:
        TypeError: If a value is neither a string, None nor a dictionary
    """
    flat: Dict[str, Optional[str]] = {}

    if tree is None:
        return flat

    for key, value in tree.items():
        if value is None or isinstance(value, str):
            flat[prefix + key] = value
        elif isinstance(value, dict):
            flat.update(flatten(value, f"{prefix}{key}."))
        else:
            raise TypeError(
                f"Cannot flatten value of type {type(value).__name__} at '{prefix}{key}'"
            )

    return flat
