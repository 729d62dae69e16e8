"""Global conftest for Proxihash tests."""

from pytest import Item

from proxihash.config import reset_config


def pytest_runtest_setup(item: Item) -> None:
    """Restore the default configuration before `pytest_runtest_call(item)`."""
    reset_config()


def pytest_runtest_teardown(item: Item) -> None:
    """Drop configuration changes made by the test."""
    reset_config()
