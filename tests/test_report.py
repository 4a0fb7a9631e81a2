"""Tests for run summary reports."""

from pathlib import Path

from src.report import generate_summary_report, print_summary_report


def test_generate_summary_report():
    """Test key, null and warning counts."""
    lang_files = [
        {"name": "php_en.json", "translations": {"a": "b", "c": None}},
        {"name": "php_fr.json", "translations": {"a": "bb"}},
    ]

    report = generate_summary_report(
        lang_files,
        Path("lang"),
        warnings=["lang/en/app.php:3: indexed array at 'list'; item skipped"],
        removed=[Path("lang/php_de.json")]
    )

    assert report["output_dir"] == str(Path("lang"))
    assert report["files"] == [
        {"name": "php_en.json", "keys": 2, "nulls": 1},
        {"name": "php_fr.json", "keys": 1, "nulls": 0},
    ]
    assert report["total_keys"] == 3
    assert report["warnings"] == 1
    assert report["removed"] == 1


def test_generate_summary_report_empty():
    """Test a run that wrote nothing."""
    report = generate_summary_report([], Path("lang"))

    assert report["files"] == []
    assert report["total_keys"] == 0
    assert report["warnings"] == 0
    assert report["removed"] == 0


def test_print_summary_report(capsys):
    """Test that the report lists every file."""
    report = generate_summary_report(
        [{"name": "php_en.json", "translations": {"a": "b"}}],
        Path("lang")
    )

    print_summary_report(report)

    out = capsys.readouterr().out
    assert "php_en.json" in out
    assert "Total keys:      1" in out
