"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from invmenuutils.conf import settings

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them after the test completes.

    Yields:
        None
    """
    settings.configure(LOG_LEVEL="DEBUG")
    yield
    settings._wrapped = None
