"""
Utility helpers used by the migration tool.

This subpackage exposes filename sanitization, tag extraction, structured
logging and summary generation.
"""

from .errors import ERRORS, report_error, report_ok
from .filenames import is_usable_filename, sanitize_filename
from .summary import write_migration_summary
from .tags import extract_tags

__all__ = [
    "ERRORS",
    "extract_tags",
    "is_usable_filename",
    "report_error",
    "report_ok",
    "sanitize_filename",
    "write_migration_summary",
]
