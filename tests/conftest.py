"""Test configuration and fixtures for the bookstore service."""

from tests.fixtures import *  # noqa: F401,F403
