"""
Unit tests for the HTML renderer
Tests output finalisation, saving and file naming
"""
import io
import zipfile
import pytest

from htmlifier.html_generator.renderers import HtmlRenderer, OutputBlob, README_TEXT
from htmlifier.utils.exceptions import HtmlGenerationError
from tests.fixtures.project_fixtures import PNG_BYTES


class TestFinalise:
    """Test suite for producing the deliverable"""

    def test_inline_output_is_html(self):
        """Test that inline mode returns the document itself"""
        renderer = HtmlRenderer()

        blob = renderer.finalise('<!DOCTYPE html><p>héllo</p>', {}, output_zip=False)

        assert blob.mime_type == 'text/html'
        assert blob.content == '<!DOCTYPE html><p>héllo</p>'.encode('utf-8')
        assert blob.extension == '.html'
        assert not blob.is_zip

    def test_zip_output_contains_files_index_and_readme(self, png_file):
        """Test archive contents and order"""
        # Arrange
        renderer = HtmlRenderer()
        files = {'favicon.png': png_file, 'project.json': '{"targets": []}', 'project': b'0123456789'}

        # Act
        blob = renderer.finalise('<html></html>', files, output_zip=True)

        # Assert
        assert blob.mime_type == 'application/zip'
        assert blob.extension == '.zip'
        with zipfile.ZipFile(io.BytesIO(blob.content)) as archive:
            assert archive.namelist() == ['favicon.png', 'project.json', 'project', 'index.html', 'README.txt']
            assert archive.read('favicon.png') == PNG_BYTES
            assert archive.read('project.json') == b'{"targets": []}'
            assert archive.read('project') == b'0123456789'
            assert archive.read('index.html') == b'<html></html>'
            assert archive.read('README.txt').decode('utf-8') == README_TEXT

    def test_readme_explains_opening_the_archive(self):
        """Test the README wording"""
        assert README_TEXT.startswith("You can't just open the index.html directly in the browser")
        assert 'Downloading-as-a-.zip' in README_TEXT


class TestSaveOutput:
    """Test suite for writing artifacts to disk"""

    def test_save_output_to_explicit_path(self, temp_output_dir):
        """Test saving to a given path"""
        renderer = HtmlRenderer()
        blob = OutputBlob(content=b'<html></html>', mime_type='text/html')
        target = temp_output_dir / "nested" / "page.html"

        saved = renderer.save_output(blob, 'Game', str(target))

        assert saved == str(target)
        assert target.read_bytes() == b'<html></html>'

    def test_save_output_names_file_from_title(self, temp_output_dir):
        """Test generated file names"""
        renderer = HtmlRenderer({'output_directory': str(temp_output_dir), 'file_naming': 'game_{title}'})
        blob = OutputBlob(content=b'PK', mime_type='application/zip')

        saved = renderer.save_output(blob, 'My Cool Game!')

        assert saved == str(temp_output_dir / "game_My_Cool_Game.zip")

    def test_filename_with_timestamp(self):
        """Test that timestamps are appended when configured"""
        renderer = HtmlRenderer({'include_timestamp': True})
        blob = OutputBlob(content=b'', mime_type='text/html')

        filename = renderer._generate_filename('Game', blob)

        assert filename.startswith('Game_')
        assert filename.endswith('.html')

    def test_unusable_title_falls_back_to_project(self):
        """Test the fallback file name"""
        blob = OutputBlob(content=b'', mime_type='text/html')

        assert HtmlRenderer()._generate_filename('???', blob) == 'project.html'

    def test_save_failure_raises_generation_error(self, tmp_path):
        """Test that write failures are wrapped"""
        # Arrange
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        renderer = HtmlRenderer()
        blob = OutputBlob(content=b'', mime_type='text/html')

        # Act & Assert
        with pytest.raises(HtmlGenerationError) as exc_info:
            renderer.save_output(blob, 'Game', str(blocker / "page.html"))

        assert exc_info.value.step == 'save_output'
        assert isinstance(exc_info.value.original_error, OSError)

    def test_output_summary(self):
        """Test summary fields"""
        blob = OutputBlob(content=b'x' * 2048, mime_type='text/html')

        summary = HtmlRenderer().get_output_summary('out/page.html', blob)

        assert summary == {
            'file': 'out/page.html',
            'mime_type': 'text/html',
            'total_size_bytes': 2048,
            'total_size_mb': 0.0
        }
