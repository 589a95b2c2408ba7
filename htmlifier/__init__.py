"""
HTMLifier Package
Converts projects into standalone HTML pages or zip archives
"""

__version__ = "1.0.0"
__description__ = "Convert projects into standalone HTML pages or zip archives"

from .config.config_manager import ConfigManager
from .config.htmlify_options import (
    AssetFile,
    ButtonOptions,
    CloudOptions,
    CursorStyle,
    HtmlifyOptions,
    LoadingOptions,
    MonitorBackground,
    MonitorOptions
)
from .html_generator.htmlifier import Htmlifier
from .html_generator.renderers.html_renderer import OutputBlob
from .project_loader import AssetsProject, FileProject, load_project
from .utils.exceptions import (
    HtmlifierError,
    ConfigurationError,
    ProjectLoadError,
    AssetEncodingError,
    TemplateError,
    HtmlGenerationError
)
from .utils.logging_config import setup_logging, get_logger, create_log_callback

__all__ = [
    'Htmlifier',
    'HtmlifyOptions',
    'AssetFile',
    'ButtonOptions',
    'CloudOptions',
    'CursorStyle',
    'LoadingOptions',
    'MonitorBackground',
    'MonitorOptions',
    'ConfigManager',
    'OutputBlob',
    'AssetsProject',
    'FileProject',
    'load_project',
    'setup_logging',
    'get_logger',
    'create_log_callback',
    'HtmlifierError',
    'ConfigurationError',
    'ProjectLoadError',
    'AssetEncodingError',
    'TemplateError',
    'HtmlGenerationError'
]
