"""
Unit tests for logging configuration
"""
import logging
import pytest
from unittest.mock import Mock

from htmlifier.utils.logging_config import (
    setup_logging,
    get_logger,
    create_log_callback,
    log_processing_step,
    log_performance_metric
)


class TestSetupLogging:
    """Test suite for logger setup"""

    def test_setup_logging_configures_console_handler(self):
        """Test console-only logging"""
        # Act
        logger = setup_logging({'level': 'debug', 'log_to_file': False})

        # Assert
        assert logger.name == 'htmlifier'
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.propagate is False

    def test_setup_logging_adds_file_handler(self, tmp_path):
        """Test logging to a rotating file"""
        # Arrange
        log_file = tmp_path / "logs" / "htmlifier.log"

        # Act
        logger = setup_logging({'log_to_file': True, 'log_file_path': str(log_file)})

        # Assert
        assert any(isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers)
        assert log_file.parent.exists()

        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_get_logger_namespaces_module_loggers(self):
        """Test logger naming"""
        assert get_logger('config').name == 'htmlifier.config'
        assert get_logger().name == 'htmlifier'


class TestCreateLogCallback:
    """Test suite for the conversion log callback adapter"""

    @pytest.mark.parametrize("log_type, level", [
        ('status', logging.INFO),
        ('progress', logging.DEBUG),
        ('error', logging.ERROR),
        ('unknown', logging.INFO),
    ])
    def test_log_types_map_to_levels(self, log_type, level):
        """Test that each log type lands at its level"""
        # Arrange
        logger = Mock()
        log = create_log_callback(logger)

        # Act
        log('Loading project', log_type)

        # Assert
        logger.log.assert_called_once_with(level, 'Loading project')


class TestLogHelpers:
    """Test suite for formatting helpers"""

    def test_log_processing_step_writes_banner(self):
        """Test step banner formatting"""
        logger = Mock()

        log_processing_step(logger, 'htmlify', 'inline mode')

        messages = [call.args[0] for call in logger.info.call_args_list]
        assert "PROCESSING STEP: HTMLIFY" in messages
        assert "Details: inline mode" in messages

    def test_log_performance_metric_includes_rate(self):
        """Test performance metric formatting"""
        logger = Mock()

        log_performance_metric(logger, 'htmlify', 2.0, 10)

        logger.info.assert_called_once_with("Performance - htmlify: 2.00s (10 files, 5 files/sec)")
