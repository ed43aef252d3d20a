"""
Tests for filter_criteria/core/config.py
"""

import os
from unittest.mock import patch

import pytest


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self):
        """Settings fall back to documented defaults."""
        from filter_criteria.core.config import Settings

        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)

        assert s.APP_ENV == "development"
        assert s.DEBUG is False
        assert s.LOG_LEVEL == "INFO"
        assert s.DEFAULT_CONCURRENCY is None
        assert s.NORMALIZE_CACHE_SIZE == 4096
        assert s.GEO_DEFAULT_UNIT == "km"

    def test_reads_environment(self):
        """Environment variables override defaults."""
        from filter_criteria.core.config import Settings

        env = {"DEFAULT_CONCURRENCY": "8", "GEO_DEFAULT_UNIT": "mi", "LOG_LEVEL": "debug"}
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)

        assert s.DEFAULT_CONCURRENCY == 8
        assert s.GEO_DEFAULT_UNIT == "mi"
        assert s.LOG_LEVEL == "DEBUG"

    def test_rejects_unknown_log_level(self):
        """Unknown log levels are rejected."""
        from pydantic import ValidationError
        from filter_criteria.core.config import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None, LOG_LEVEL="LOUD")

    def test_rejects_unknown_geo_unit(self):
        """Only km and mi are accepted."""
        from pydantic import ValidationError
        from filter_criteria.core.config import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None, GEO_DEFAULT_UNIT="furlong")

    def test_rejects_negative_cache_size(self):
        """Cache size must not be negative."""
        from pydantic import ValidationError
        from filter_criteria.core.config import Settings

        with pytest.raises(ValidationError):
            Settings(_env_file=None, NORMALIZE_CACHE_SIZE=-1)

    def test_get_settings_is_cached(self):
        """get_settings returns the same instance."""
        from filter_criteria.core.config import get_settings

        assert get_settings() is get_settings()
