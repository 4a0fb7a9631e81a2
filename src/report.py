"""Generate summary reports for conversion runs."""

from pathlib import Path
from typing import Dict, Any, List, Optional


def generate_summary_report(
    lang_files: List[Dict[str, Any]],
    output_dir: Path,
    warnings: Optional[List[str]] = None,
    removed: Optional[List[Path]] = None
) -> Dict[str, Any]:
    """
    Generate a summary report for a conversion run.

    Args:
        lang_files: Merged records that were written
        output_dir: Directory the files were written to
        warnings: Unsupported-input warnings collected during parsing
        removed: Stale files deleted before writing

    Returns:
        Dictionary with report data:
        {
            "output_dir": str,
            "files": [{"name": str, "keys": int, "nulls": int}],
            "total_keys": int,
            "warnings": int,
            "removed": int
        }
    """
    files = []
    for lang_file in lang_files:
        translations = lang_file["translations"]
        files.append({
            "name": lang_file["name"],
            "keys": len(translations),
            "nulls": sum(1 for value in translations.values() if value is None),
        })

    return {
        "output_dir": str(output_dir),
        "files": files,
        "total_keys": sum(f["keys"] for f in files),
        "warnings": len(warnings or []),
        "removed": len(removed or []),
    }


def print_summary_report(report: Dict[str, Any]) -> None:
    """
    Print a formatted summary report.

    Args:
        report: Report dictionary from generate_summary_report
    """
    print("\n" + "=" * 60)
    print(f"Output: {report['output_dir']}")
    print("=" * 60)
    for f in report["files"]:
        print(f"{f['name']:<30} {f['keys']:>8} keys  {f['nulls']:>5} null")
    print("-" * 60)
    print(f"Total keys:      {report['total_keys']}")
    print(f"Warnings:        {report['warnings']}")
    print(f"Stale removed:   {report['removed']}")
    print("=" * 60 + "\n")
