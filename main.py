"""
Entry point for the Blogger to Markdown migration tool.

Usage::

    python main.py <BACKUP XML> <OUTPUT DIR> [m|s]
"""

import sys
from typing import List, Optional

from blogger_migrator.migration_tool import BloggerMigrationTool
from blogger_migrator.utils.errors import FeedFormatError, FeedParseError, UsageError

CONFIG_FILE = "config/migration_config.json"

USAGE = "Usage: python main.py <BACKUP XML> <OUTPUT DIR> [m|s]"


def parse_args(argv: List[str]):
    """Return ``(input_path, output_dir, mode)`` or raise :class:`UsageError`.

    The optional third argument is reserved; any value is accepted and ignored.
    """
    if len(argv) < 2:
        raise UsageError("Missing required arguments")
    mode = argv[2] if len(argv) > 2 else None
    return argv[0], argv[1], mode


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to run the Blogger to Markdown migration tool.
    """
    argv = sys.argv[1:] if argv is None else argv
    try:
        input_path, output_dir, mode = parse_args(argv)
    except UsageError:
        print(USAGE)
        return 1

    tool = BloggerMigrationTool(config_file=CONFIG_FILE)
    tool.log_message("Starting Blogger to Markdown migration.")
    if mode:
        tool.log_message(f"Mode '{mode}' requested (no effect).", level="DEBUG")

    try:
        summary = tool.import_blog(input_path, output_dir)
    except OSError as e:
        tool.log_message(f"Error reading Blogger export {input_path}: {e}", level="ERROR")
        return 1
    except (FeedParseError, FeedFormatError) as e:
        tool.log_message(f"Error processing Blogger export: {e}", level="ERROR")
        return 1

    tool.log_message(f"Migration process finished: {summary.total_posts} posts converted.")
    return 0


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
