"""
HTML Templates Module
Provides the player page template and the placeholder machinery behind it
"""

from .base_template import BaseTemplate, PLACEHOLDERS
from .page_fragments import PageFragments
from .page_template import PageTemplate, PageContext, FEATURE_STEPS, build_page_fragments
from .template_factory import TemplateFactory

__all__ = [
    'BaseTemplate',
    'PLACEHOLDERS',
    'PageFragments',
    'PageTemplate',
    'PageContext',
    'FEATURE_STEPS',
    'build_page_fragments',
    'TemplateFactory'
]
