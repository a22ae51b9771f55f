"""Tests for engine logger naming and setup."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, resolve_level, setup_logging


class TestLogging:
    """Logger naming and setup."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Short names are nested under the laylder logger."""
        logger = get_logger("test")
        assert logger.name == "laylder.test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """No name gives the laylder root logger."""
        logger = get_logger()
        assert logger.name == "laylder"

    @pytest.mark.unit
    def test_get_logger_keeps_qualified_name(self) -> None:
        """Already-qualified names are not prefixed twice."""
        assert get_logger("laylder.schema").name == "laylder.schema"

    @pytest.mark.unit
    def test_resolve_level(self) -> None:
        """Level names and numbers resolve to logging levels."""
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING
        assert resolve_level(logging.ERROR) == logging.ERROR
        assert resolve_level("not-a-level") == logging.INFO

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Setup leaves module loggers at NOTSET so the root level applies."""
        stream = StringIO()
        setup_logging(level="DEBUG", stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op when logging was already configured,
        # so only the API contract is checked here.
        assert logger.level == logging.NOTSET
