import json
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from blogger_migrator.models import MigratedPost, MigrationSummary
from blogger_migrator.utils.summary import DEFAULT_SUMMARY_PATH, SUMMARY_FILENAME, write_migration_summary


def test_summary_contains_total_posts(tmp_path):
    summary = MigrationSummary(
        posts=[
            MigratedPost(title="One", post_id="1", filename="one.md"),
            MigratedPost(title="Two", post_id="2", filename="two.md"),
        ]
    )
    out = write_migration_summary(summary, str(tmp_path / "reports" / SUMMARY_FILENAME))
    with open(out, encoding="utf-8") as f:
        assert json.load(f) == {"totalPosts": 2}


def test_summary_overwrites_previous_run(tmp_path):
    out = str(tmp_path / SUMMARY_FILENAME)
    write_migration_summary(MigrationSummary(posts=[MigratedPost(title="x", post_id="1", filename="x.md")]), out)
    write_migration_summary(MigrationSummary(), out)
    with open(out, encoding="utf-8") as f:
        assert json.load(f) == {"totalPosts": 0}


def test_default_location_is_next_to_the_program():
    assert os.path.basename(DEFAULT_SUMMARY_PATH) == "migration-summary.json"
    assert os.path.dirname(DEFAULT_SUMMARY_PATH) == PROJECT_ROOT
