"""
Project loading module for the HTMLifier
Provides loaders for the different project source types
"""

from .base_loader import AssetsProject, FileProject, NormalisedProject, ProjectLoader, decode_project_bytes
from .file_loader import LocalFileLoader
from .url_loader import UrlProjectLoader
from .loader_factory import LoaderFactory, is_url, load_project

__all__ = [
    'AssetsProject',
    'FileProject',
    'NormalisedProject',
    'ProjectLoader',
    'decode_project_bytes',
    'LocalFileLoader',
    'UrlProjectLoader',
    'LoaderFactory',
    'is_url',
    'load_project'
]
