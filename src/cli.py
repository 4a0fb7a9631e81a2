"""CLI entrypoint."""

import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from src.io_json import generate_files, reset
from src.loader import prepare_extended_lang_files
from src.packages import get_packages_lang_paths
from src.report import generate_summary_report, print_summary_report
from src.run_logging import RunLogger
from src.walker import has_php_translations


def _default_lang_paths() -> List[Path]:
    """Language paths from PHP_LANG_PATHS (os.pathsep separated) or lang/."""
    value = os.getenv("PHP_LANG_PATHS")
    if value:
        return [Path(p) for p in value.split(os.pathsep) if p]
    return [Path("lang")]


def _optional_path(name: str) -> Optional[Path]:
    value = os.getenv(name)
    return Path(value) if value else None


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Convert Laravel PHP language files to php_<lang>.json files"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Parse PHP language files and write php_*.json files"
    )
    generate_parser.add_argument(
        "--lang-path",
        type=Path,
        action="append",
        help="Directory with one folder per language, repeatable "
             "(default: from PHP_LANG_PATHS env or lang)"
    )
    generate_parser.add_argument(
        "--output-dir",
        type=Path,
        default=_optional_path("PHP_LANG_OUTPUT_DIR"),
        help="Directory for php_*.json files (default: from PHP_LANG_OUTPUT_DIR env or the first --lang-path)"
    )
    generate_parser.add_argument(
        "--vendor-dir",
        type=Path,
        default=_optional_path("PHP_LANG_VENDOR_DIR") or Path("vendor"),
        help="Composer vendor directory scanned for package translations (default: vendor)"
    )
    generate_parser.add_argument(
        "--no-packages",
        action="store_true",
        help="Do not include translations shipped by vendor packages"
    )
    generate_parser.add_argument(
        "--no-reset",
        action="store_true",
        help="Keep existing php_* files in the output directory"
    )
    generate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unsupported expressions (e.g. indexed arrays) instead of skipping them"
    )
    generate_parser.add_argument(
        "--indent",
        type=int,
        help="Indent JSON output by this many spaces (default: compact)"
    )
    generate_parser.add_argument(
        "--log-dir",
        type=Path,
        default=_optional_path("PHP_LANG_LOG_DIR"),
        help="Directory for run logs (default: from PHP_LANG_LOG_DIR env, disabled if unset)"
    )

    # reset command
    reset_parser = subparsers.add_parser(
        "reset",
        help="Delete generated php_*.json files"
    )
    reset_parser.add_argument(
        "--output-dir",
        type=Path,
        default=_optional_path("PHP_LANG_OUTPUT_DIR") or Path("lang"),
        help="Directory holding php_*.json files (default: from PHP_LANG_OUTPUT_DIR env or lang)"
    )

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Exit 0 if PHP language files exist, 1 otherwise"
    )
    check_parser.add_argument(
        "--lang-path",
        type=Path,
        action="append",
        help="Directory with one folder per language, repeatable (default: lang)"
    )

    # packages command
    packages_parser = subparsers.add_parser(
        "packages",
        help="List vendor packages that ship translations"
    )
    packages_parser.add_argument(
        "--vendor-dir",
        type=Path,
        default=_optional_path("PHP_LANG_VENDOR_DIR") or Path("vendor"),
        help="Composer vendor directory (default: vendor)"
    )

    return parser


def run_generate(args: argparse.Namespace) -> None:
    """Run the generate command."""
    lang_paths = args.lang_path or _default_lang_paths()
    output_dir = args.output_dir or lang_paths[0]
    logger = RunLogger(args.log_dir) if args.log_dir else None

    try:
        packages = [] if args.no_packages else get_packages_lang_paths(args.vendor_dir)
        if logger:
            logger.update_summary(
                lang_paths=[str(p) for p in lang_paths],
                packages=[p["name"] for p in packages]
            )

        warnings: List[str] = []
        lang_files = prepare_extended_lang_files(
            lang_paths,
            packages,
            strict=args.strict,
            warnings=warnings,
            logger=logger
        )

        removed = [] if args.no_reset else reset(output_dir)
        written = generate_files(output_dir, lang_files, indent=args.indent, logger=logger)

        for message in warnings:
            print(f"Warning: {message}", file=sys.stderr)

        report = generate_summary_report(written, output_dir, warnings, removed)
        print_summary_report(report)

        print(f"✓ Wrote {len(written)} file(s) to {output_dir}")
        if logger:
            logger.finalize()
            print(f"  Logs: {logger.run_dir}")

    except Exception as e:
        if logger:
            logger.log_failure(type(e).__name__, str(e))
            logger.finalize()
        print(f"✗ Error: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "generate":
        run_generate(args)

    elif args.command == "reset":
        try:
            removed = reset(args.output_dir)
            print(f"✓ Removed {len(removed)} file(s) from {args.output_dir}")
        except Exception as e:
            print(f"✗ Error: {e}", file=sys.stderr)
            sys.exit(1)

    elif args.command == "check":
        lang_paths = args.lang_path or _default_lang_paths()
        found = [p for p in lang_paths if has_php_translations(p)]
        if found:
            for lang_path in found:
                print(f"✓ PHP translations found in {lang_path}")
        else:
            print("✗ No PHP translations found", file=sys.stderr)
            sys.exit(1)

    elif args.command == "packages":
        packages = get_packages_lang_paths(args.vendor_dir)
        for package in packages:
            print(f"{package['name']}\t{package['lang_path']}")
        print(f"✓ Found {len(packages)} package(s) in {args.vendor_dir}")

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
