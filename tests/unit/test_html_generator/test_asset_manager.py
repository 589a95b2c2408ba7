"""
Unit tests for the asset manager
Tests archive registration and data URL embedding
"""
import base64

from htmlifier.html_generator.renderers.asset_manager import AssetManager
from tests.fixtures.project_fixtures import PNG_BYTES


class TestAssetManagerInline:
    """Test suite for inline (data URL) mode"""

    def test_register_file_returns_data_url(self, png_file):
        """Test that files are embedded as data URLs"""
        # Arrange
        manager = AssetManager(output_zip=False)

        # Act
        url = manager.register_file('favicon.png', png_file)

        # Assert
        assert url.startswith('data:image/png;base64,')
        assert base64.b64decode(url.split(',', 1)[1]) == PNG_BYTES

    def test_inline_mode_keeps_no_files(self, png_file, file_project):
        """Test that nothing is stored for an archive in inline mode"""
        manager = AssetManager(output_zip=False)

        manager.register_file('favicon.png', png_file)
        manager.register_file('project', file_project.file)

        assert manager.registered_files == {}

    def test_text_is_embedded_as_plain_text(self):
        """Test that text content gets a text/plain data URL"""
        manager = AssetManager(output_zip=False)

        url = manager.register_file('project.json', '{"targets": []}')

        assert url.startswith('data:text/plain;base64,')


class TestAssetManagerZip:
    """Test suite for archive mode"""

    def test_register_file_returns_relative_path(self, png_file):
        """Test that archive files are referenced relatively"""
        # Arrange
        manager = AssetManager(output_zip=True)

        # Act
        url = manager.register_file('favicon.png', png_file)

        # Assert
        assert url == './favicon.png'
        assert manager.registered_files == {'favicon.png': png_file}

    def test_registering_same_name_overwrites(self, png_file, gif_file):
        """Test that the latest registration wins"""
        manager = AssetManager(output_zip=True)

        manager.register_file('icon', png_file)
        manager.register_file('icon', gif_file)

        assert manager.registered_files == {'icon': gif_file}

    def test_registered_files_is_a_copy(self, png_file):
        """Test that callers cannot change the stored files"""
        manager = AssetManager(output_zip=True)
        manager.register_file('favicon.png', png_file)

        manager.registered_files.clear()

        assert 'favicon.png' in manager.registered_files
