"""
Asset Manager
Decides whether each file is stored for the archive or embedded as a data URL
"""

from typing import Dict, Union

from ...config.htmlify_options import AssetFile
from ...utils.common import get_data_url
from ...utils.logging_config import get_logger

logger = get_logger('html_generator.asset_manager')

FileContent = Union[AssetFile, bytes, str]


class AssetManager:
    """
    Registers files for one conversion
    In archive mode files are kept for the zip and referenced by relative path;
    otherwise they are embedded as data URLs and nothing is kept.
    """

    def __init__(self, output_zip: bool):
        """
        Initialise asset manager

        Args:
            output_zip: Whether files are stored separately in a zip archive
        """
        self.output_zip = output_zip
        self._files: Dict[str, FileContent] = {}

    def register_file(self, file_name: str, file: FileContent) -> str:
        """
        Register a file and get a URL that the page can fetch it from

        Args:
            file_name: Name of the file inside the archive; used as a relative path
                as is, so callers must pass a safe name
            file: File content; text is embedded as text/plain

        Returns:
            './<file_name>' in archive mode, otherwise a data URL
        """
        if self.output_zip:
            if file_name in self._files:
                logger.warning(f"Overwriting previously registered file: {file_name}")
            self._files[file_name] = file
            logger.debug(f"Registered {file_name} for the archive")
            return f"./{file_name}"

        if isinstance(file, AssetFile):
            return get_data_url(file.content, file.mime_type)
        return get_data_url(file)

    @property
    def registered_files(self) -> Dict[str, FileContent]:
        """Files stored for the archive, keyed by file name"""
        return dict(self._files)
