"""
Loader factory for choosing a project loader from a project source
"""

from pathlib import Path
from typing import Any

import requests

from .base_loader import AssetsProject, FileProject, NormalisedProject, ProjectLoader
from .file_loader import LocalFileLoader
from .url_loader import UrlProjectLoader
from ..utils.exceptions import ProjectLoadError
from ..utils.logging_config import LogCallback, get_logger

logger = get_logger('project_loader.loader_factory')


def is_url(source: Any) -> bool:
    return isinstance(source, str) and source.lower().startswith(('http://', 'https://'))


class LoaderFactory:
    """Factory for creating loader instances based on the source"""

    _loaders = {
        'url': UrlProjectLoader,
        'file': LocalFileLoader,
    }

    @classmethod
    def create_loader(cls, source: Any, session: requests.Session = None) -> ProjectLoader:
        """
        Create loader instance

        Args:
            source: http(s) URL string, or a local path
            session: requests session for URL sources (optional)

        Returns:
            Loader instance
        """
        if is_url(source):
            logger.debug(f"Using url loader for {source}")
            return cls._loaders['url'](source, session=session)

        if isinstance(source, (str, Path)):
            logger.debug(f"Using file loader for {source}")
            return cls._loaders['file'](source)

        raise ProjectLoadError(f"Unsupported project source: {type(source).__name__}")


def load_project(source: Any, log: LogCallback, session: requests.Session = None) -> NormalisedProject:
    """
    Obtain a normalised project from any supported source

    Already normalised projects are returned unchanged.

    Args:
        source: AssetsProject, FileProject, http(s) URL or local path
        log: Conversion log callback
        session: requests session for URL sources (optional)

    Returns:
        Normalised project
    """
    if isinstance(source, (AssetsProject, FileProject)):
        return source

    return LoaderFactory.create_loader(source, session=session).load_project(log)
