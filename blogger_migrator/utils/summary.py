"""
Generation of the migration summary file.

The :func:`write_migration_summary` helper writes ``migration-summary.json``
with the number of posts converted during the run.  By default the file is
placed next to the program itself, outside of the Markdown output directory,
so that the generated content tree stays clean.
"""

from __future__ import annotations

import json
import os

from blogger_migrator.models import MigrationSummary

SUMMARY_FILENAME = "migration-summary.json"

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_SUMMARY_PATH = os.path.join(PROJECT_ROOT, SUMMARY_FILENAME)


def write_migration_summary(summary: MigrationSummary, out_path: str = DEFAULT_SUMMARY_PATH) -> str:
    """Write ``{"totalPosts": n}`` to ``out_path``, replacing any previous run.

    Parameters
    ----------
    summary:
        The accumulator returned by the migration.
    out_path:
        Location of the JSON file.  The parent directory is created
        automatically.

    Returns
    -------
    str
        The path of the written file.
    """
    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(summary.to_report(), f, indent=2)
    return out_path
