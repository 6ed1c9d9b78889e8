"""Shared pytest fixtures for store, token and HTTP tests."""

from .auth import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
