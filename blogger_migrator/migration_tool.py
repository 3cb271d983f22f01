"""
High-level orchestration of the Blogger → Markdown migration.

This module defines a :class:`BloggerMigrationTool` class that ties
together the extractor, the Markdown renderer and the utilities into a
complete pipeline: read the export, keep the blog posts, convert each one
to a Markdown file with front matter, and write a summary of the run.

Configuration is supplied via a JSON file path or directly as a
dictionary.  All settings live under the ``migration`` key (``dry_run``,
``limit``, ``summary_path`` and ``report_dir``) and every one of them is
optional.
"""

from __future__ import annotations

import json
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from blogger_migrator.extractors.blogger_extractor import filter_posts, parse_feed, read_export
from blogger_migrator.models import BlogEntry, MigratedPost, MigrationSummary
from blogger_migrator.parsers.front_matter import build_front_matter, compose_document, display_title
from blogger_migrator.parsers.markdown_parser import convert_html_to_markdown
from blogger_migrator.utils.errors import (
    DEFAULT_REPORT_DIR,
    DirectoryError,
    FilenameError,
    WriteError,
    report_error,
    report_ok,
)
from blogger_migrator.utils.filenames import is_usable_filename, sanitize_filename
from blogger_migrator.utils.summary import DEFAULT_SUMMARY_PATH, write_migration_summary
from blogger_migrator.utils.tags import extract_tags

_TRUTHY = {"1", "true", "yes", "on"}


class BloggerMigrationTool:
    """
    Encapsulates all state and behavior required to convert a Blogger
    export into Markdown files.  The class reads configuration, extracts
    posts, renders and writes them, and reports the outcome.  Per-post
    success and failure information is recorded using the
    :mod:`blogger_migrator.utils.errors` module.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, *, config_file: Optional[str] = None) -> None:
        if config_file and os.path.exists(config_file):
            with open(config_file, "r", encoding="utf-8") as f:
                config = json.load(f)
        elif config is None:
            # Default configuration
            config = {}

        config.setdefault("migration", {})
        migration = config["migration"]
        migration.setdefault("dry_run", False)
        migration.setdefault("limit", None)
        migration.setdefault("summary_path", DEFAULT_SUMMARY_PATH)
        migration.setdefault("report_dir", DEFAULT_REPORT_DIR)

        # Environment variables win over the config file
        dry_run_env = os.getenv("BLOGGER_MIGRATION_DRY_RUN", "").strip().lower()
        if dry_run_env:
            migration["dry_run"] = dry_run_env in _TRUTHY
        report_dir_env = os.getenv("BLOGGER_MIGRATION_REPORT_DIR", "").strip()
        if report_dir_env:
            migration["report_dir"] = report_dir_env

        self.config = config

    @property
    def report_dir(self) -> str:
        return self.config["migration"]["report_dir"]

    def log_message(self, message: str, level: str = "INFO") -> None:
        print(f"[{level}] {message}")
        # Append to log file; an unwritable log never stops the migration
        try:
            os.makedirs(self.report_dir, exist_ok=True)
            with open(os.path.join(self.report_dir, "migration.log"), "a", encoding="utf-8") as f:
                f.write(f"{level}: {message}\n")
        except OSError as e:
            print(f"[WARNING] Could not append to migration log in {self.report_dir}: {e}", file=sys.stderr)

    def extract_posts(self, xml_path: str) -> List[BlogEntry]:
        """
        Read and parse the export at ``xml_path`` and return its posts in
        feed order.  ``OSError``, ``FeedParseError`` and ``FeedFormatError``
        propagate: without a readable export there is nothing to migrate.
        """
        self.log_message(f"Extracting posts from XML {xml_path}")
        feed = parse_feed(read_export(xml_path))
        posts = filter_posts(feed.entries)
        self.log_message(f"Found {len(posts)} posts")
        return posts

    def ensure_output_dir(self, output_dir: str) -> bool:
        try:
            os.makedirs(output_dir, exist_ok=True)
        except OSError as e:
            err = DirectoryError(f"Error creating directory {output_dir}: {e}")
            self.log_message(str(err), "ERROR")
            report_error("DIRECTORY_FAILED", {"title": output_dir}, err, report_dir=self.report_dir)
            return False
        return True

    def render_post(self, entry: BlogEntry) -> Tuple[str, str]:
        """
        Convert one post into ``(filename, document)``.

        :raises FilenameError: if the title does not sanitize to a usable
            filename.
        """
        title = display_title(entry.title)
        filename = sanitize_filename(title)
        self.log_message(f"Sanitized title: {filename}", level="DEBUG")
        if not is_usable_filename(filename):
            raise FilenameError(f"Invalid filename for title: {title}")

        body = convert_html_to_markdown(entry.content)
        header = build_front_matter(title, entry.published, entry.draft, extract_tags(entry))
        return f"{filename}.md", compose_document(header, body)

    def write_post(self, path: str, document: str) -> None:
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(document)
        except OSError as e:
            raise WriteError(f"Error writing to {path}: {e}") from e
        self.log_message(f"Successfully written to {path}")

    def migrate_posts(self, posts: List[BlogEntry], output_dir: str) -> MigrationSummary:
        """
        Convert ``posts`` into Markdown files under ``output_dir``.

        Posts are processed one at a time, in feed order.  A post whose
        title cannot become a filename, or whose file cannot be written, is
        logged and skipped; the loop always continues.  Files sharing a
        name overwrite each other.  If ``dry_run`` is enabled in the
        configuration, documents are rendered but not written.

        :param posts: Post entries, usually from :meth:`extract_posts`.
        :param output_dir: Directory receiving the ``.md`` files.
        :return: The accumulator of posts converted during the run.
        """
        dry_run: bool = self.config["migration"]["dry_run"]
        limit: Optional[int] = self.config["migration"]["limit"]
        summary = MigrationSummary()

        for count, entry in enumerate(posts):
            if limit is not None and count >= limit:
                self.log_message(f"Limit of {limit} posts reached, stopping.")
                break

            record = {"id": entry.post_id, "title": entry.title}
            try:
                filename, document = self.render_post(entry)
            except FilenameError as e:
                self.log_message(f"{e}. Skipping post.", "ERROR")
                report_error("INVALID_FILENAME", record, e, report_dir=self.report_dir)
                summary.skipped.append(display_title(entry.title))
                continue

            path = os.path.join(output_dir, filename)
            if dry_run:
                self.log_message(f"Dry-run: would write {path}")
                report_ok("DRY_RUN", record, {"path": path}, report_dir=self.report_dir)
            else:
                try:
                    self.write_post(path, document)
                except WriteError as e:
                    self.log_message(str(e), "ERROR")
                    report_error("WRITE_FAILED", record, e, report_dir=self.report_dir)
                    summary.failed.append(display_title(entry.title))
                    continue
                report_ok("POST_WRITTEN", record, {"path": path}, report_dir=self.report_dir)

            summary.posts.append(
                MigratedPost(
                    title=display_title(entry.title),
                    post_id=entry.post_id,
                    filename=filename,
                    path=None if dry_run else path,
                )
            )

        return summary

    def write_summary(self, summary: MigrationSummary) -> Optional[str]:
        out_path = self.config["migration"]["summary_path"]
        try:
            written = write_migration_summary(summary, out_path)
        except OSError as e:
            self.log_message(f"Failed to write summary {out_path}: {e}", "ERROR")
            report_error("SUMMARY_FAILED", {"title": out_path}, e, report_dir=self.report_dir)
            return None
        self.log_message(f"Summary written to {written} ({summary.total_posts} posts)")
        return written

    def import_blog(self, input_path: str, output_dir: str) -> MigrationSummary:
        """
        Run the whole migration: extract, convert every post, write the
        summary.  Feed-level errors propagate to the caller.
        """
        posts = self.extract_posts(input_path)
        self.ensure_output_dir(output_dir)
        summary = self.migrate_posts(posts, output_dir)
        self.write_summary(summary)
        return summary
