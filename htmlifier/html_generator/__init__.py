"""
HTML Generator Module
Assembles the player page and packages it as HTML or a zip archive
"""

from .templates import TemplateFactory, BaseTemplate, PageTemplate
from .renderers import HtmlRenderer, AssetManager, OutputBlob
from .htmlifier import Htmlifier

__all__ = [
    'TemplateFactory',
    'BaseTemplate',
    'PageTemplate',
    'HtmlRenderer',
    'AssetManager',
    'OutputBlob',
    'Htmlifier'
]
