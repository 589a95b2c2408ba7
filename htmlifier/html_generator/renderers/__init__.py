"""
HTML Renderers Module
Handles file registration, artifact generation and output saving
"""

from .html_renderer import HtmlRenderer, OutputBlob, README_TEXT
from .asset_manager import AssetManager

__all__ = [
    'HtmlRenderer',
    'OutputBlob',
    'README_TEXT',
    'AssetManager'
]
