"""
HTMLifier
Converts a project into a standalone HTML page or a zip of separate files
"""

import json
import time
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from .renderers.asset_manager import AssetManager
from .renderers.html_renderer import HtmlRenderer, OutputBlob
from .templates.template_factory import TemplateFactory
from ..config.htmlify_options import HtmlifyOptions
from ..project_loader import AssetsProject, NormalisedProject, is_url, load_project
from ..utils.exceptions import HtmlGenerationError
from ..utils.logging_config import get_logger, log_performance_metric, log_processing_step

logger = get_logger('html_generator.htmlifier')

TEMPLATES_DIR = Path(__file__).parent / 'templates'
DEFAULT_ENGINE_URL = 'https://sheeptester.github.io/scratch-vm/16-9/vm.min.js'
DEFAULT_TEMPLATE_PATH = TEMPLATES_DIR / 'template.html'
DEFAULT_STYLESHEET_PATH = TEMPLATES_DIR / 'template.css'


class Htmlifier:
    """
    Converts projects to HTML
    The engine script, template and stylesheet are read once and reused for
    every conversion made with this instance.
    """

    def __init__(self, runtime_config: Dict[str, Any] = None, session: requests.Session = None):
        """
        Initialise the HTMLifier

        Args:
            runtime_config: Optional overrides for engine_url, template_path,
                stylesheet_path and timeout_seconds
            session: Optional requests session used for every download
        """
        runtime_config = runtime_config or {}
        self.engine_url = runtime_config.get('engine_url') or DEFAULT_ENGINE_URL
        self.template_path = str(runtime_config.get('template_path') or DEFAULT_TEMPLATE_PATH)
        self.stylesheet_path = str(runtime_config.get('stylesheet_path') or DEFAULT_STYLESHEET_PATH)
        self.timeout = runtime_config.get('timeout_seconds', 30)
        self.session = session or requests.Session()
        self.renderer = HtmlRenderer()

        self._engine_script: Optional[str] = None
        self._template_text: Optional[str] = None
        self._stylesheet: Optional[str] = None

    def get_engine_script(self) -> str:
        """Source of the runtime engine, downloaded on first use"""
        if self._engine_script is None:
            self._engine_script = self._read_text(self.engine_url)
            logger.info(f"Fetched engine script ({len(self._engine_script):,} characters)")
        return self._engine_script

    def get_template_text(self) -> str:
        if self._template_text is None:
            self._template_text = self._read_text(self.template_path)
        return self._template_text

    def get_stylesheet(self) -> str:
        if self._stylesheet is None:
            self._stylesheet = self._read_text(self.stylesheet_path)
        return self._stylesheet

    def _read_text(self, location: Any) -> str:
        """Read text from an http(s) URL or a local path"""
        location = str(location)
        try:
            if is_url(location):
                response = self.session.get(location, timeout=self.timeout)
                response.raise_for_status()
                return response.text
            return Path(location).read_text(encoding='utf-8')
        except (requests.RequestException, OSError) as e:
            raise HtmlGenerationError(f"Could not read {location}: {e}", 'read_resource', e)

    def register_project(self, project: NormalisedProject, asset_manager: AssetManager) -> Dict[str, str]:
        """
        Register the project payload and build the asset reference table

        Args:
            project: Normalised project
            asset_manager: Registrar for this conversion

        Returns:
            Mapping of 'project', 'file' or asset md5ext to a fetchable URL
        """
        assets: Dict[str, str] = {}

        if isinstance(project, AssetsProject):
            assets['project'] = asset_manager.register_file('project.json', json.dumps(project.project))
            for md5ext, content in project.assets:
                assets[md5ext] = asset_manager.register_file(md5ext, content)
        else:
            assets['file'] = asset_manager.register_file('project', project.file)

        return assets

    def htmlify(self, project_source: Any, options: HtmlifyOptions) -> OutputBlob:
        """
        Convert a project

        Args:
            project_source: AssetsProject, FileProject, http(s) URL or local path
            options: Conversion options

        Returns:
            text/html blob, or application/zip blob when options.zip is set
        """
        start_time = time.time()
        log_processing_step(logger, 'htmlify', 'zip archive' if options.zip else 'single HTML file')
        log = options.log

        project = load_project(project_source, log, session=self.session)

        asset_manager = AssetManager(options.zip)
        assets = self.register_project(project, asset_manager)
        log(f"Registered {len(assets)} project file(s)", 'status')

        template = TemplateFactory.create_template('page', self.get_template_text())
        html = template.generate_html({
            'options': options,
            'asset_manager': asset_manager,
            'assets': assets,
            'stylesheet': self.get_stylesheet(),
            'engine_url': self.engine_url,
            'engine_script': self.get_engine_script() if options.include_vm else None
        })

        log('Packing zip' if options.zip else 'Creating HTML file', 'status')
        blob = self.renderer.finalise(html, asset_manager.registered_files, options.zip)

        log_performance_metric(logger, 'htmlify', time.time() - start_time, len(assets))
        return blob
