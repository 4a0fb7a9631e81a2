"""Per-run logging for conversion runs."""

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Any, List, Optional


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class RunLogger:
    """Logger for conversion runs."""

    def __init__(self, runs_dir: Path, run_id: Optional[str] = None):
        """
        Initialize run logger.

        Args:
            runs_dir: Base directory for run logs (e.g., work/runs)
            run_id: Optional run ID. If None, generates a new UUID.
        """
        self.runs_dir = runs_dir
        self.run_id = run_id or str(uuid.uuid4())
        self.run_dir = runs_dir / self.run_id
        self.run_dir.mkdir(parents=True, exist_ok=True)

        self.files_file = self.run_dir / "files.jsonl"
        self.warnings_file = self.run_dir / "warnings.jsonl"
        self.failures_file = self.run_dir / "failures.jsonl"
        self.summary_file = self.run_dir / "summary.json"

        self.summary = {
            "run_id": self.run_id,
            "started_at": _timestamp(),
            "completed_at": None,
            "lang_paths": [],
            "packages": [],
            "files_parsed": 0,
            "files_written": 0,
            "keys_written": 0,
            "warnings": 0,
            "failures": 0,
        }

    def _append(self, file_path: Path, record: Dict[str, Any]) -> None:
        with open(file_path, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")

    def log_file(self, path: Path, keys: int) -> None:
        """
        Log a parsed language file.

        Args:
            path: Path of the parsed file
            keys: Number of translation keys found in it
        """
        self._append(self.files_file, {
            "timestamp": _timestamp(),
            "event": "parsed",
            "path": str(path),
            "keys": keys
        })
        self.summary["files_parsed"] += 1

    def log_written(self, path: Path, keys: int) -> None:
        """
        Log a written JSON file.

        Args:
            path: Path of the written file
            keys: Number of translation keys written
        """
        self._append(self.files_file, {
            "timestamp": _timestamp(),
            "event": "written",
            "path": str(path),
            "keys": keys
        })
        self.summary["files_written"] += 1
        self.summary["keys_written"] += keys

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log a skipped, unsupported translation item.

        Args:
            message: Warning message
            context: Optional context dictionary
        """
        self._append(self.warnings_file, {
            "timestamp": _timestamp(),
            "message": message,
            "context": context or {}
        })
        self.summary["warnings"] += 1

    def log_failure(
        self,
        error_type: str,
        error_message: str,
        context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a failure that aborted the run.

        Args:
            error_type: Type of error (e.g., "PhpSyntaxError")
            error_message: Error message
            context: Optional context dictionary
        """
        self._append(self.failures_file, {
            "timestamp": _timestamp(),
            "error_type": error_type,
            "error_message": error_message,
            "context": context or {}
        })
        self.summary["failures"] += 1

    def update_summary(
        self,
        lang_paths: Optional[List[str]] = None,
        packages: Optional[List[str]] = None
    ) -> None:
        """
        Update run inputs in the summary.

        Args:
            lang_paths: Language paths that were parsed
            packages: Names of the packages that were parsed
        """
        if lang_paths is not None:
            self.summary["lang_paths"] = lang_paths
        if packages is not None:
            self.summary["packages"] = packages

    def finalize(self) -> None:
        """Finalize the run and write summary."""
        self.summary["completed_at"] = _timestamp()

        with open(self.summary_file, "w", encoding="utf-8") as f:
            json.dump(self.summary, f, ensure_ascii=False, indent=2)

    def get_summary(self) -> Dict[str, Any]:
        """Get current summary."""
        return self.summary.copy()
