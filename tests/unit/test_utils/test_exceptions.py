"""
Unit tests for custom exception classes
Tests exception hierarchy and custom attributes
"""
import pytest

from htmlifier.utils.exceptions import (
    HtmlifierError,
    ConfigurationError,
    ProjectLoadError,
    AssetEncodingError,
    TemplateError,
    HtmlGenerationError
)


class TestHtmlifierError:
    """Test suite for base exception class"""

    def test_htmlifier_error_is_base_exception(self):
        """Test that HtmlifierError is the base exception"""
        # Act
        error = HtmlifierError("Test message")

        # Assert
        assert isinstance(error, Exception)
        assert str(error) == "Test message"

    def test_htmlifier_error_inheritance(self):
        """Test that all custom exceptions inherit from HtmlifierError"""
        # Arrange
        exception_classes = [
            ConfigurationError,
            ProjectLoadError,
            AssetEncodingError,
            TemplateError,
            HtmlGenerationError
        ]

        # Act & Assert
        for exception_class in exception_classes:
            error = exception_class("Test message")
            assert isinstance(error, HtmlifierError)
            assert isinstance(error, Exception)


class TestConfigurationError:
    """Test suite for ConfigurationError"""

    def test_configuration_error_in_exception_handling(self):
        """Test ConfigurationError in exception handling context"""
        with pytest.raises(ConfigurationError) as exc_info:
            raise ConfigurationError("Missing required section")

        assert "Missing required section" in str(exc_info.value)


class TestProjectLoadError:
    """Test suite for ProjectLoadError with additional attributes"""

    def test_project_load_error_with_basic_message(self):
        """Test ProjectLoadError with just a message"""
        error = ProjectLoadError("Download failed")

        assert str(error) == "Download failed"
        assert error.source is None

    def test_project_load_error_with_source(self):
        """Test ProjectLoadError with source information"""
        error = ProjectLoadError("Download failed", source="https://example.com/p.sb3")

        assert error.source == "https://example.com/p.sb3"


class TestAssetEncodingError:
    """Test suite for AssetEncodingError"""

    def test_asset_encoding_error_with_file_name(self):
        """Test AssetEncodingError with file information"""
        error = AssetEncodingError("Cannot encode", file_name="cursor.png")

        assert str(error) == "Cannot encode"
        assert error.file_name == "cursor.png"


class TestTemplateError:
    """Test suite for TemplateError"""

    def test_template_error_with_placeholder(self):
        """Test TemplateError with placeholder information"""
        error = TemplateError("Missing placeholder", placeholder="TITLE")

        assert error.placeholder == "TITLE"

    def test_template_error_defaults(self):
        """Test TemplateError without placeholder"""
        assert TemplateError("Broken").placeholder is None


class TestHtmlGenerationError:
    """Test suite for HtmlGenerationError"""

    def test_html_generation_error_with_all_attributes(self):
        """Test HtmlGenerationError with step and original error"""
        # Arrange
        original = OSError("Disk full")

        # Act
        error = HtmlGenerationError("Save failed", step="save_output", original_error=original)

        # Assert
        assert str(error) == "Save failed"
        assert error.step == "save_output"
        assert error.original_error is original

    def test_exception_chaining(self):
        """Test that errors can be chained from their cause"""
        with pytest.raises(HtmlGenerationError) as exc_info:
            try:
                raise OSError("Disk full")
            except OSError as e:
                raise HtmlGenerationError("Save failed", "save_output", e) from e

        assert isinstance(exc_info.value.__cause__, OSError)
