"""
Remote project loading over HTTP(S)
Follows the established ProjectLoader ABC pattern
"""

import requests

from .base_loader import ProjectLoader
from ..utils.exceptions import ProjectLoadError
from ..utils.logging_config import LogCallback

DEFAULT_TIMEOUT_SECONDS = 30


class UrlProjectLoader(ProjectLoader):
    """
    Downloads a project file from a URL
    """

    def __init__(self, source: str, session: requests.Session = None,
                 timeout: float = DEFAULT_TIMEOUT_SECONDS):
        """
        Initialise URL loader

        Args:
            source: http(s) URL of the project file
            session: Optional requests session to reuse connections
            timeout: Request timeout in seconds
        """
        super().__init__(source)
        self.session = session or requests.Session()
        self.timeout = timeout

    def read_bytes(self, log: LogCallback) -> bytes:
        """Download the project file"""
        try:
            response = self.session.get(self.source, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise ProjectLoadError(f"Failed to download project from {self.source}: {e}", self.source)

        log(f"Downloaded {len(response.content):,} bytes", 'progress')
        return response.content
