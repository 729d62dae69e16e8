"""Fixtures for doctests."""

from collections.abc import Generator

import pytest

from proxihash.config import reset_config


@pytest.fixture(autouse=True)  # type: ignore[misc]
def default_config() -> Generator[None, None, None]:
    """Run every doctest against the default configuration."""
    reset_config()
    yield
    reset_config()
