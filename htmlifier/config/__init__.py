"""
Configuration module for the HTMLifier
YAML configuration loading and the conversion option records
"""

from .htmlify_options import (
    AssetFile,
    ButtonOptions,
    CloudOptions,
    CursorStyle,
    HtmlifyOptions,
    LoadingOptions,
    MonitorBackground,
    MonitorOptions
)
from .config_manager import ConfigManager

__all__ = [
    'AssetFile',
    'ButtonOptions',
    'CloudOptions',
    'CursorStyle',
    'HtmlifyOptions',
    'LoadingOptions',
    'MonitorBackground',
    'MonitorOptions',
    'ConfigManager'
]
