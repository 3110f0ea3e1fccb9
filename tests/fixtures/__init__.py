"""Shared pytest fixtures, registered through tests/conftest.py."""
