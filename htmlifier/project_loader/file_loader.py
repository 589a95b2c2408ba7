"""
Local file project loading
Follows the established ProjectLoader ABC pattern
"""

from pathlib import Path

from .base_loader import ProjectLoader
from ..utils.exceptions import ProjectLoadError
from ..utils.logging_config import LogCallback


class LocalFileLoader(ProjectLoader):
    """
    Loads a project file (sb3, sb2, sb) from disk
    """

    def read_bytes(self, log: LogCallback) -> bytes:
        """Read the project file from disk"""
        path = Path(self.source)

        if not path.is_file():
            raise ProjectLoadError(f"Project file not found: {path}", str(path))

        try:
            data = path.read_bytes()
        except OSError as e:
            raise ProjectLoadError(f"Could not read project file {path}: {e}", str(path))

        log(f"Read {len(data):,} bytes from {path.name}", 'progress')
        return data
