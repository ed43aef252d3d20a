"""
Tests for filter_criteria/core/logging.py
"""

import io
import json

import pytest


class TestLogging:
    """Tests for structlog setup helpers."""

    def test_json_output(self):
        """JSON lines carry the event, level and logger name."""
        from filter_criteria.core.logging import get_logger, setup_logging

        stream = io.StringIO()
        setup_logging(level="info", json_output=True, stream=stream)

        get_logger("tests").info("Collection filtered", records=3)

        line = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert line["event"] == "Collection filtered"
        assert line["records"] == 3
        assert line["level"] == "info"
        assert line["logger"] == "filter_criteria.tests"

    def test_level_filtering(self):
        """Events below the configured level are dropped."""
        from filter_criteria.core.logging import get_logger, setup_logging

        stream = io.StringIO()
        setup_logging(level="WARNING", json_output=True, stream=stream)

        get_logger("tests").info("hidden")

        assert stream.getvalue() == ""

    def test_namespace_logger(self):
        """setup_logging configures only the engine namespace."""
        import logging
        from filter_criteria.core.logging import LOGGER_NAMESPACE, setup_logging

        logger = setup_logging(level="DEBUG", json_output=False, stream=io.StringIO())

        assert logger.name == LOGGER_NAMESPACE
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

    @pytest.mark.asyncio
    async def test_unconfigured_engine_prints_nothing(self, capsys):
        """Debug and info events stay silent until logging is configured."""
        import logging
        import structlog
        from filter_criteria.core.logging import LOGGER_NAMESPACE
        from filter_criteria.evaluation.engine import FilterEngine

        structlog.reset_defaults()
        namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
        namespace_logger.handlers = []
        namespace_logger.setLevel(logging.NOTSET)
        namespace_logger.propagate = True
        result = await FilterEngine().evaluate(
            {"age": 30},
            {"type": "NUMBER", "operator": "GREATER", "valuePath": ["age"], "matchValue": 18},
        )

        captured = capsys.readouterr()
        assert result.passed is True
        assert captured.out == ""
        assert captured.err == ""

    def test_logger_mixin_names_logger_after_class(self):
        """LoggerMixin exposes a bound logger."""
        from filter_criteria.core.logging import LoggerMixin

        class Widget(LoggerMixin):
            pass

        widget = Widget()

        assert hasattr(widget.logger, "info")
