"""Integration tests run against a migrated PostgreSQL database.

Set ALUMNI_INTEGRATION=1 (and DATABASE__URL if needed) after running
``python scripts/run_migrations.py``; otherwise these tests are skipped.
"""

import os

import pytest


def pytest_collection_modifyitems(config, items):
    if os.environ.get("ALUMNI_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set ALUMNI_INTEGRATION=1 to run against postgres")
    for item in items:
        if "tests/integration/" in str(item.fspath).replace(os.sep, "/"):
            item.add_marker(skip)
