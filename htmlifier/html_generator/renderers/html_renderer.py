"""
HTML Renderer
Handles final artifact generation, file saving, and output management
"""

import io
import re
import zipfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Mapping

from ...config.htmlify_options import AssetFile
from ...utils.logging_config import get_logger
from ...utils.exceptions import HtmlGenerationError
from ...utils.common import format_number_with_commas

HTML_MIME_TYPE = 'text/html'
ZIP_MIME_TYPE = 'application/zip'

README_TEXT = (
    "You can't just open the index.html directly in the browser, unfortunately. "
    "Read https://github.com/SheepTester/htmlifier/wiki/Downloading-as-a-.zip\n"
)


@dataclass(frozen=True)
class OutputBlob:
    """The finished artifact of a conversion"""
    content: bytes
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def is_zip(self) -> bool:
        return self.mime_type == ZIP_MIME_TYPE

    @property
    def extension(self) -> str:
        return '.zip' if self.is_zip else '.html'


class HtmlRenderer:
    """
    Handles artifact generation and output management
    Single responsibility: turning the document and registered files into output
    """

    def __init__(self, config: Dict[str, Any] = None):
        """
        Initialise HTML renderer

        Args:
            config: Output configuration
        """
        self.config = config or {}
        self.logger = get_logger('html_generator.renderer')

    def finalise(self, html: str, registered_files: Mapping[str, Any], output_zip: bool) -> OutputBlob:
        """
        Produce the final deliverable

        Args:
            html: Fully substituted document
            registered_files: Files registered during the conversion (archive mode only)
            output_zip: Whether to pack everything into a zip archive

        Returns:
            OutputBlob typed text/html or application/zip
        """
        if not output_zip:
            return OutputBlob(content=html.encode('utf-8'), mime_type=HTML_MIME_TYPE)

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
            for file_name, file in registered_files.items():
                archive.writestr(file_name, self._file_bytes(file))
            archive.writestr('index.html', html)
            archive.writestr('README.txt', README_TEXT)

        self.logger.info(f"Packed {len(registered_files) + 2} files into archive")
        return OutputBlob(content=buffer.getvalue(), mime_type=ZIP_MIME_TYPE)

    @staticmethod
    def _file_bytes(file: Any) -> bytes:
        if isinstance(file, AssetFile):
            return file.content
        if isinstance(file, str):
            return file.encode('utf-8')
        return bytes(file)

    def save_output(self, blob: OutputBlob, title: str, output_path: str = None) -> str:
        """
        Save an artifact to disk

        Args:
            blob: Artifact to save
            title: Project title, used to name the file when no path is given
            output_path: Explicit destination (optional)

        Returns:
            Path to saved file
        """
        try:
            if output_path:
                file_path = Path(output_path)
            else:
                file_path = Path(self._get_output_directory()) / self._generate_filename(title, blob)

            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(blob.content)

            self.logger.info(f"💾 Saved output: {file_path}")
            self.logger.info(f"📊 File size: {format_number_with_commas(blob.size)} bytes")

            return str(file_path)

        except OSError as e:
            raise HtmlGenerationError(f"Failed to save output for {title}: {e}", 'save_output', e)

    def _generate_filename(self, title: str, blob: OutputBlob) -> str:
        """Generate output filename based on configuration"""
        naming_pattern = self.config.get('file_naming', '{title}')
        safe_title = re.sub(r'[^A-Za-z0-9._-]+', '_', title).strip('._') or 'project'

        base = naming_pattern.format(title=safe_title)

        if self.config.get('include_timestamp', False):
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            base = f"{base}_{timestamp}"

        return f"{base}{blob.extension}"

    def _get_output_directory(self) -> str:
        """Get output directory path"""
        return self.config.get('output_directory', 'htmlified')

    def get_output_summary(self, saved_file: str, blob: OutputBlob) -> Dict[str, Any]:
        """
        Generate summary of an output file

        Args:
            saved_file: Path the artifact was saved to
            blob: The artifact

        Returns:
            Summary dictionary
        """
        return {
            'file': saved_file,
            'mime_type': blob.mime_type,
            'total_size_bytes': blob.size,
            'total_size_mb': round(blob.size / (1024 * 1024), 2)
        }
