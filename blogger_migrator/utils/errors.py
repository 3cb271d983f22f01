"""
Error types and structured logging helpers for the migration.

The :mod:`blogger_migrator.utils.errors` module holds the exception taxonomy
raised by the pipeline and centralizes the writing of log entries for both
failed and successful operations.  Each entry is appended to a JSON Lines
file under ``reports/migration`` (or the configured report directory) so
that the information can be reviewed or parsed after a run.

Two public functions are provided:

``report_error``
    Record an error that occurred for a post.  An optional exception can be
    supplied and will be serialized to the log.

``report_ok``
    Record a successful step for a post.  Additional key/value information can
    be attached to the entry via the ``extra`` parameter.

The ``ERRORS`` dictionary maps error or event codes to human readable
messages.  Codes not present in the dictionary fall back to the code itself.
"""

from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, Optional


class MigrationError(Exception):
    """Base class for every error raised by the migration pipeline."""


class UsageError(MigrationError):
    """Wrong command line arguments."""


class FeedParseError(MigrationError):
    """The export is not well-formed XML."""


class FeedFormatError(MigrationError):
    """The export parsed, but it is not a Blogger feed with entries."""


class FilenameError(MigrationError):
    """A post title sanitized to an empty or placeholder filename."""


class WriteError(MigrationError):
    """A Markdown file could not be written."""


class DirectoryError(MigrationError):
    """The output directory could not be created."""


# Mapping of event codes used throughout the migration to descriptive messages.
# The keys include both error and success codes as the same lookup is used by
# :func:`report_error` and :func:`report_ok`.
ERRORS: Dict[str, str] = {
    "INVALID_FILENAME": "Title does not produce a usable filename",
    "WRITE_FAILED": "Failed to write Markdown file",
    "DIRECTORY_FAILED": "Failed to create output directory",
    "SUMMARY_FAILED": "Failed to write migration summary",
    "POST_WRITTEN": "Markdown file written successfully",
    "DRY_RUN": "Dry-run: Markdown file not written",
}

DEFAULT_REPORT_DIR = os.path.join("reports", "migration")


def _write_jsonl(report_dir: str, filename: str, data: Dict[str, Any]) -> None:
    """Append ``data`` as a JSON object followed by a newline to ``filename``.

    A report that cannot be written is reported on stderr and skipped.
    """
    try:
        os.makedirs(report_dir, exist_ok=True)
        with open(os.path.join(report_dir, filename), "a", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
            f.write("\n")
    except OSError as e:
        print(f"[WARNING] Could not append to {filename} in {report_dir}: {e}", file=sys.stderr)


def report_error(
    code: str,
    post: Dict[str, Any],
    exc: Optional[BaseException] = None,
    *,
    report_dir: str = DEFAULT_REPORT_DIR,
) -> None:
    """Log an error event for ``post``.

    Parameters
    ----------
    code:
        A key identifying the type of error.  If ``code`` is present in
        :data:`ERRORS` its value will be used as the message.
    post:
        A dictionary describing the post.  Only the ``id`` and ``title``
        keys are referenced if present.
    exc:
        Optional exception instance that triggered the error.  The string
        representation of the exception will be included in the log entry.
    report_dir:
        Directory holding ``errors.jsonl``.
    """
    message = ERRORS.get(code, code)
    entry: Dict[str, Any] = {
        "code": code,
        "message": message,
        "id": post.get("id"),
        "title": post.get("title"),
    }
    if exc is not None:
        entry["error"] = str(exc)
    print(f"[ERROR] {message} - {post.get('title', '')}")
    _write_jsonl(report_dir, "errors.jsonl", entry)


def report_ok(
    code: str,
    post: Dict[str, Any],
    extra: Optional[Dict[str, Any]] = None,
    *,
    report_dir: str = DEFAULT_REPORT_DIR,
) -> None:
    """Log a successful event for ``post``.

    Parameters
    ----------
    code:
        A key identifying the type of event.
    post:
        A dictionary describing the post.
    extra:
        Optional dictionary of additional fields to merge into the log entry.
    report_dir:
        Directory holding ``success.jsonl``.
    """
    message = ERRORS.get(code, code)
    entry: Dict[str, Any] = {
        "code": code,
        "message": message,
        "id": post.get("id"),
        "title": post.get("title"),
    }
    if extra:
        entry.update(extra)
    print(f"[OK] {message} - {post.get('title', '')}")
    _write_jsonl(report_dir, "success.jsonl", entry)
