"""Tests for merging records and writing php_*.json files."""

import json
from pathlib import Path

from src.io_json import merge_lang_files, write_i18n_file, generate_files, reset
from src.run_logging import RunLogger


def test_merge_lang_files_later_wins():
    """Test that later records override earlier ones for the same name."""
    lang_files = [
        {"name": "php_en.json", "translations": {"a": "first", "b": "only first"}},
        {"name": "php_fr.json", "translations": {"a": "fr"}},
        {"name": "php_en.json", "translations": {"a": "second", "c": "only second"}},
    ]

    assert merge_lang_files(lang_files) == [
        {"name": "php_en.json", "translations": {"a": "second", "b": "only first", "c": "only second"}},
        {"name": "php_fr.json", "translations": {"a": "fr"}},
    ]


def test_merge_lang_files_does_not_mutate_input():
    """Test that input records are left untouched."""
    first = {"name": "php_en.json", "translations": {"a": "1"}}
    second = {"name": "php_en.json", "translations": {"b": "2"}}

    merge_lang_files([first, second])

    assert first["translations"] == {"a": "1"}


def test_write_i18n_file(tmp_path: Path):
    """Test that JSON is written as UTF-8 without ASCII escaping."""
    file_path = tmp_path / "nested" / "php_sv.json"

    write_i18n_file(file_path, {"welcome": "Välkommen", "empty": None})

    text = file_path.read_text(encoding="utf-8")
    assert "Välkommen" in text
    assert json.loads(text) == {"welcome": "Välkommen", "empty": None}


def test_write_i18n_file_indent(tmp_path: Path):
    """Test optional indentation."""
    file_path = tmp_path / "php_en.json"

    write_i18n_file(file_path, {"a": "b"}, indent=2)

    assert file_path.read_text(encoding="utf-8") == '{\n  "a": "b"\n}\n'


def test_generate_files_creates_directory(tmp_path: Path):
    """Test that the output directory is created and one file per name written."""
    output_dir = tmp_path / "public" / "lang"
    lang_files = [
        {"name": "php_en.json", "translations": {"a": "b"}},
        {"name": "php_en.json", "translations": {"c": "d"}},
        {"name": "php_fr.json", "translations": {"a": "bb"}},
    ]

    written = generate_files(output_dir, lang_files)

    assert [f["name"] for f in written] == ["php_en.json", "php_fr.json"]
    assert json.loads((output_dir / "php_en.json").read_text(encoding="utf-8")) == {"a": "b", "c": "d"}
    assert json.loads((output_dir / "php_fr.json").read_text(encoding="utf-8")) == {"a": "bb"}


def test_generate_files_logs_written_files(tmp_path: Path):
    """Test that written files are counted in the run log."""
    logger = RunLogger(tmp_path / "runs", run_id="test-run")
    lang_files = [{"name": "php_en.json", "translations": {"a": "b", "c": None}}]

    generate_files(tmp_path / "out", lang_files, logger=logger)

    summary = logger.get_summary()
    assert summary["files_written"] == 1
    assert summary["keys_written"] == 2


def test_reset_removes_generated_files_only(tmp_path: Path):
    """Test that only php_* files are removed."""
    (tmp_path / "php_en.json").write_text("{}", encoding="utf-8")
    (tmp_path / "php_fr.json").write_text("{}", encoding="utf-8")
    (tmp_path / "en.json").write_text("{}", encoding="utf-8")
    (tmp_path / "en").mkdir()

    removed = reset(tmp_path)

    assert [p.name for p in removed] == ["php_en.json", "php_fr.json"]
    assert not (tmp_path / "php_en.json").exists()
    assert (tmp_path / "en.json").exists()
    assert (tmp_path / "en").is_dir()


def test_reset_missing_directory(tmp_path: Path):
    """Test that resetting a missing directory is a no-op."""
    assert reset(tmp_path / "missing") == []
