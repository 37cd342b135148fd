"""Shared pytest fixtures."""

from .core import *  # noqa: F401,F403
from .inventory import *  # noqa: F401,F403
