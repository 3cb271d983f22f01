"""
Top-level package for the Blogger → Markdown migration utility.

This package bundles all components required to read a Blogger export,
keep its posts, convert their HTML bodies to Markdown, write one file per
post with front matter, and report a summary.  Modules are split into
subpackages:

* :mod:`blogger_migrator.extractors` – parse the Atom export
* :mod:`blogger_migrator.parsers` – HTML to Markdown and front matter
* :mod:`blogger_migrator.models` – pydantic data model
* :mod:`blogger_migrator.utils` – filenames, tags, errors and summary

Each layer has no direct knowledge of configuration or execution
strategy; orchestration is handled in the migration_tool.
"""
