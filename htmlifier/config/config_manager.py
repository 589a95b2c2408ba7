"""
Configuration management for the HTMLifier
Centralised configuration loading and validation
"""

import yaml
from pathlib import Path
from typing import Dict, List, Any, Optional, Union

from .htmlify_options import (
    AssetFile,
    ButtonOptions,
    CloudOptions,
    CursorStyle,
    HtmlifyOptions,
    LoadingOptions,
    MonitorBackground,
    MonitorOptions
)
from ..utils.exceptions import ConfigurationError
from ..utils.logging_config import LogCallback, get_logger
from ..utils.common import validate_file_path

logger = get_logger('config')

REQUIRED_SECTIONS = ['project', 'output', 'page']


class ConfigManager:
    """
    Manages configuration loading and validation
    Single responsibility: Configuration management only
    """

    def __init__(self, config_path: str):
        """
        Initialise with path to YAML config file

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self.config = self._load_config()
        self._validate_config()
        logger.info(f"Configuration loaded successfully from {self.config_path}")

    def _load_config(self) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in config file {self.config_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load config from {self.config_path}: {e}")

        if not config:
            raise ConfigurationError(f"Configuration file is empty: {self.config_path}")
        if not isinstance(config, dict):
            raise ConfigurationError(f"Configuration must be a mapping: {self.config_path}")

        logger.debug(f"Loaded configuration from {self.config_path}")
        return config

    def _validate_config(self) -> None:
        """Validate required configuration sections exist"""
        for section in REQUIRED_SECTIONS:
            if section not in self.config:
                raise ConfigurationError(f"Missing required config section: {section}")

        self._validate_project_config()
        self._validate_page_config()

        logger.debug("Configuration validation passed")

    def _validate_project_config(self) -> None:
        """Validate project source configuration"""
        project_config = self.config['project']

        if not isinstance(project_config, dict) or not project_config.get('source'):
            raise ConfigurationError("Missing source in project configuration")

        if not isinstance(project_config['source'], str):
            raise ConfigurationError(f"Invalid project source: {project_config['source']}")

    def _validate_page_config(self) -> None:
        """Validate page dimensions"""
        page_config = self.config['page']

        if not isinstance(page_config, dict):
            raise ConfigurationError("page configuration must be a mapping")

        for dimension in ['width', 'height']:
            value = page_config.get(dimension, 1)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigurationError(f"Invalid page {dimension}: {value}")

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.config.get(name) or {}
        if not isinstance(section, dict):
            raise ConfigurationError(f"{name} configuration must be a mapping")
        return section

    def _resolve_path(self, path: str) -> Path:
        """Resolve a path relative to the config file's directory"""
        resolved = Path(path)
        if not resolved.is_absolute():
            resolved = self.config_path.parent / resolved
        return resolved

    def _load_asset(self, value: Optional[str], setting: str) -> Optional[AssetFile]:
        """Load an image referenced by a config value"""
        if not value:
            return None

        path = self._resolve_path(value)
        if not validate_file_path(str(path), must_exist=True):
            raise ConfigurationError(f"File for {setting} not found: {path}")

        return AssetFile.from_path(path)

    def get_project_source(self) -> str:
        """Get the project source as a URL or an absolute path"""
        source = self.config['project']['source']
        if source.lower().startswith(('http://', 'https://')):
            return source
        return str(self._resolve_path(source))

    def get_output_config(self) -> Dict[str, Any]:
        """Get output configuration"""
        output_config = {
            'zip': False,
            'output_directory': 'htmlified',
            'file_naming': '{title}',
            'include_timestamp': False
        }
        output_config.update(self._section('output'))

        output_directory = Path(output_config['output_directory'])
        if not output_directory.is_absolute():
            output_config['output_directory'] = str(self.config_path.parent / output_directory)

        return output_config

    def get_runtime_config(self) -> Dict[str, Any]:
        """Get runtime engine and template configuration"""
        runtime_config = {
            'include_vm': True,
            'engine_url': None,
            'template_path': None,
            'stylesheet_path': None,
            'timeout_seconds': 30
        }
        runtime_config.update(self._section('runtime'))

        for key in ['template_path', 'stylesheet_path']:
            value = runtime_config[key]
            if value and not value.lower().startswith(('http://', 'https://')):
                runtime_config[key] = str(self._resolve_path(value))

        return runtime_config

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration"""
        return self.config.get('logging', {
            'level': 'INFO',
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            'log_to_file': False,
            'log_file_path': 'htmlifier.log'
        })

    def get_extensions(self) -> List[str]:
        """Get list of extension URLs"""
        extensions = self.config.get('extensions') or []
        if not isinstance(extensions, list):
            raise ConfigurationError("extensions must be a list of URLs")
        return [str(extension) for extension in extensions]

    def _get_cursor(self, value: Optional[str]) -> Union[CursorStyle, AssetFile]:
        if not value or value == CursorStyle.DEFAULT.value:
            return CursorStyle.DEFAULT
        if value == CursorStyle.HIDDEN.value:
            return CursorStyle.HIDDEN
        return self._load_asset(value, 'cursor')

    def _get_loading_image(self, value: Optional[str]) -> Union[AssetFile, str, None]:
        if not value:
            return None
        if value.lower().startswith(('http://', 'https://', 'data:')):
            return value
        return self._load_asset(value, 'loading image')

    @staticmethod
    def _get_monitor_background(value: Optional[str]) -> Union[MonitorBackground, str]:
        if not value or value == MonitorBackground.TRANSLUCENT.value:
            return MonitorBackground.TRANSLUCENT
        if value == MonitorBackground.NONE.value:
            return MonitorBackground.NONE
        return value

    def get_htmlify_options(self, log: LogCallback = None) -> HtmlifyOptions:
        """
        Build conversion options from the configuration

        Image settings are paths relative to the config file. The cursor also
        accepts 'hidden', the monitor background 'none', and the loading image
        an http(s) URL.

        Args:
            log: Conversion log callback (defaults to the htmlifier logger)

        Returns:
            HtmlifyOptions
        """
        page = self._section('page')
        player = self._section('player')
        loading = self._section('loading')
        buttons = self._section('buttons')
        monitors = self._section('monitors')
        cloud = self._section('cloud')

        settings = dict(
            zip=bool(self.get_output_config()['zip']),
            include_vm=bool(self.get_runtime_config()['include_vm']),
            title=str(page.get('title', 'Project')),
            username=str(page.get('username', 'player')),
            width=page.get('width', 480),
            height=page.get('height', 360),
            stretch=bool(page.get('stretch', False)),
            auto_start=bool(player.get('auto_start', False)),
            turbo=bool(player.get('turbo', False)),
            fps=player.get('fps', 30),
            limits=bool(player.get('limits', True)),
            fencing=bool(player.get('fencing', True)),
            pointer_lock=bool(player.get('pointer_lock', False)),
            cursor=self._get_cursor(page.get('cursor')),
            favicon=self._load_asset(page.get('favicon'), 'favicon'),
            background_image=self._load_asset(page.get('background_image'), 'background image'),
            extensions=tuple(self.get_extensions()),
            loading=LoadingOptions(
                progress_bar=loading.get('progress_bar'),
                image=self._get_loading_image(loading.get('image')),
                stretch=bool(loading.get('stretch', False))
            ),
            buttons=ButtonOptions(
                start_stop=bool(buttons.get('start_stop', False)),
                fullscreen=bool(buttons.get('fullscreen', False))
            ),
            monitors=MonitorOptions(
                background=self._get_monitor_background(monitors.get('background')),
                text=str(monitors.get('text', '#ffffff'))
            ),
            cloud=CloudOptions(
                server_url=cloud.get('server_url'),
                special_behaviours=bool(cloud.get('special_behaviours', True))
            )
        )
        if log is not None:
            settings['log'] = log

        return HtmlifyOptions(**settings)

    def get_config_summary(self) -> Dict[str, Any]:
        """
        Get summary of configuration for logging/debugging

        Returns:
            Summary dictionary
        """
        page = self._section('page')
        return {
            'config_file': str(self.config_path),
            'project_source': self.get_project_source(),
            'output_zip': bool(self.get_output_config()['zip']),
            'output_directory': self.get_output_config()['output_directory'],
            'include_vm': bool(self.get_runtime_config()['include_vm']),
            'title': page.get('title', 'Project'),
            'stage_size': f"{page.get('width', 480)}x{page.get('height', 360)}",
            'stretch': bool(page.get('stretch', False)),
            'extensions_count': len(self.get_extensions())
        }
