"""Test configuration and shared fixtures."""

pytest_plugins = ["tests.fixtures.storefront"]
