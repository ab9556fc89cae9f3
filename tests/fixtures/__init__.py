"""Shared pytest fixtures and helpers for catalog tests."""

from .catalog import *  # noqa: F401,F403
from .http import *  # noqa: F401,F403
