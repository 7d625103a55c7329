"""Unit tests for helper functions."""

import logging
import unittest
from unittest.mock import patch

from rich.logging import RichHandler

from invmenuutils.conf import settings
from invmenuutils.helpers import setup_logging


class TestSetupLogging(unittest.TestCase):
    """Test setup_logging."""

    def test_explicit_level(self) -> None:
        """Test that the given level and a RichHandler are passed to basicConfig."""
        with patch("invmenuutils.helpers.logging.basicConfig") as basic_config:
            setup_logging("warning")

        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.WARNING
        assert len(kwargs["handlers"]) == 1
        assert isinstance(kwargs["handlers"][0], RichHandler)

    def test_level_from_settings(self) -> None:
        """Test that the level defaults to settings.LOG_LEVEL."""
        settings.configure(LOG_LEVEL="ERROR")

        with patch("invmenuutils.helpers.logging.basicConfig") as basic_config:
            setup_logging()

        assert basic_config.call_args.kwargs["level"] == logging.ERROR
