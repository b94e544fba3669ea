"""
Tests for configuration and identity validation utilities.
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import patch, MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from audioscrobbler.core.config import ServiceConfig
from audioscrobbler.core.validation import (
    check_dependencies,
    validate_configuration,
    validate_and_raise,
    validate_identity,
)
from audioscrobbler.core.exceptions import ConfigurationError, ConstructionError


class TestCheckDependencies:
    """Tests for check_dependencies function."""

    @patch('importlib.import_module')
    def test_check_dependencies_all_installed(self, mock_import):
        """Test check_dependencies when all dependencies are installed."""
        mock_import.return_value = MagicMock()

        all_installed, missing = check_dependencies()

        assert all_installed is True
        assert len(missing) == 0

    @patch('importlib.import_module')
    def test_check_dependencies_missing_module(self, mock_import):
        """Test check_dependencies when a module is missing."""
        def side_effect(module_name):
            if module_name == "requests":
                raise ImportError("No module named 'requests'")
            return MagicMock()

        mock_import.side_effect = side_effect

        all_installed, missing = check_dependencies()

        assert all_installed is False
        assert missing == ["requests"]


class TestValidateConfiguration:
    """Tests for validate_configuration function."""

    @pytest.fixture(autouse=True)
    def dependencies_installed(self):
        with patch('audioscrobbler.core.validation.check_dependencies') as mock_check:
            mock_check.return_value = (True, [])
            yield mock_check

    def test_validate_configuration_success(self):
        """Test validate_configuration with the stock configuration."""
        is_valid, errors = validate_configuration()

        assert is_valid is True
        assert errors == []

    def test_validate_configuration_missing_dependencies(self, dependencies_installed):
        """Test validate_configuration with missing dependencies."""
        dependencies_installed.return_value = (False, ["rich"])

        is_valid, errors = validate_configuration()

        assert is_valid is False
        assert any("rich" in error for error in errors)

    @pytest.mark.parametrize("base_url", ["ws.audioscrobbler.com/1.0", "ftp://ws.audioscrobbler.com", "http://"])
    def test_validate_configuration_bad_base_url(self, base_url):
        """Test that the base URL must be an absolute http(s) URL."""
        is_valid, errors = validate_configuration(ServiceConfig(base_url=base_url))

        assert is_valid is False
        assert any("BASE_URL" in error for error in errors)

    def test_validate_configuration_bad_timeout(self):
        """Test that the timeout must be positive."""
        is_valid, errors = validate_configuration(ServiceConfig(timeout=0))

        assert is_valid is False
        assert any("TIMEOUT" in error for error in errors)

    @pytest.mark.parametrize("threshold", [-1, 101])
    def test_validate_configuration_bad_threshold(self, threshold):
        """Test that the filter threshold must be a percentage."""
        is_valid, errors = validate_configuration(ServiceConfig(filter_threshold=threshold))

        assert is_valid is False
        assert any("FILTER_THRESHOLD" in error for error in errors)

    def test_validate_configuration_missing_segment(self):
        """Test that every entity kind needs a URL segment."""
        config = ServiceConfig()
        del config.type_segments["user"]

        is_valid, errors = validate_configuration(config)

        assert is_valid is False
        assert any("'user'" in error for error in errors)

    def test_validate_configuration_bad_log_level(self):
        """Test that an unknown log level is reported."""
        with patch.dict('audioscrobbler.core.validation.LOGGING_CONFIG', {"LEVEL": "LOUD"}):
            is_valid, errors = validate_configuration()

        assert is_valid is False
        assert any("LOG_LEVEL" in error for error in errors)


class TestValidateAndRaise:
    """Tests for validate_and_raise function."""

    def test_validate_and_raise_success(self):
        """Test validate_and_raise with valid configuration."""
        with patch('audioscrobbler.core.validation.validate_configuration') as mock_validate:
            mock_validate.return_value = (True, [])

            validate_and_raise()

    def test_validate_and_raise_failure(self):
        """Test validate_and_raise with invalid configuration."""
        with patch('audioscrobbler.core.validation.validate_configuration') as mock_validate:
            mock_validate.return_value = (False, ["Error 1", "Error 2"])

            with pytest.raises(ConfigurationError) as exc_info:
                validate_and_raise()

            assert "Configuration validation failed" in str(exc_info.value)
            assert "Error 1" in str(exc_info.value)
            assert "Error 2" in str(exc_info.value)


class TestValidateIdentity:
    """Tests for validate_identity function."""

    def test_strips_whitespace(self):
        """Test that the identity is stripped."""
        assert validate_identity("artist", "name", "  Cher ") == "Cher"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_identity(self, value):
        """Test that a missing or blank identity is rejected."""
        with pytest.raises(ConstructionError) as exc_info:
            validate_identity("artist", "name", value)

        assert str(exc_info.value) == "Can't create artist without a name"
