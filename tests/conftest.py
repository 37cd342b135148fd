"""Pytest configuration shared by the whole suite.

The environment is pinned before any application module is imported, since
config.yaml is loaded when the runtime context module is first imported.
"""

import os

os.environ["APP_ENVIRONMENT"] = "test"
os.environ.setdefault("TEST_DATABASE_URL", "sqlite://")
os.environ.setdefault("TEST_LOG_FILE", "")
os.environ.setdefault("TEST_LOG_LEVEL", "WARNING")

from tests.fixtures import *  # noqa: E402,F401,F403
