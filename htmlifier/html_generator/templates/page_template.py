"""
Player page template
Each optional feature is a step that folds its classes, styles and placeholder
values into a PageFragments value; the result is substituted into the template.
"""

import json
import re
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Any, Callable, Dict, List, Optional, Sequence

from .base_template import BaseTemplate
from .page_fragments import PageFragments
from ..renderers.asset_manager import AssetManager
from ...config.htmlify_options import AssetFile, CursorStyle, HtmlifyOptions, MonitorBackground
from ...utils.common import escape_css, escape_html, format_css_number, get_file_extension
from ...utils.logging_config import get_logger

logger = get_logger('html_generator.templates.page_template')


@dataclass(frozen=True)
class PageContext:
    """Everything the feature steps read while building one page"""
    options: HtmlifyOptions
    asset_manager: AssetManager
    # Asset reference table: 'project' / 'file' / md5ext -> URL
    assets: Dict[str, str] = field(default_factory=dict)
    stylesheet: str = ''
    engine_url: str = ''
    # Engine source, present only when it is to be bundled with the page
    engine_script: Optional[str] = None


FeatureStep = Callable[[PageFragments, PageContext], PageFragments]


def apply_title(fragments: PageFragments, context: PageContext) -> PageFragments:
    return fragments.with_substitution('TITLE', escape_html(context.options.title))


def aspect_ratio(width: float, height: float) -> str:
    """width/height as a ratio of integers, which media queries require"""
    if float(width).is_integer() and float(height).is_integer():
        return f'{int(width)}/{int(height)}'
    ratio = Fraction(str(width)) / Fraction(str(height))
    return f'{ratio.numerator}/{ratio.denominator}'


def wrapper_css(width: float, height: float) -> str:
    """
    CSS that keeps the stage wrapper at the project's aspect ratio

    The wrapper fills the viewport width; once the viewport is wider than the
    project it fills the height instead.
    """
    return '\n'.join([
        '<style>',
        f'#wrapper {{ width: 100vw; height: {format_css_number(height / width * 100)}vw; }}',
        f'@media (min-aspect-ratio: {aspect_ratio(width, height)}) {{',
        f'#wrapper {{ height: 100vh; width: {format_css_number(width / height * 100)}vh; }}',
        '}',
        '</style>'
    ])


def apply_stage_size(fragments: PageFragments, context: PageContext) -> PageFragments:
    options = context.options
    if options.stretch:
        return fragments.with_class('stretch-stage').with_substitution('WRAPPER_CSS', '')
    return fragments.with_substitution('WRAPPER_CSS', wrapper_css(options.width, options.height))


def apply_cursor(fragments: PageFragments, context: PageContext) -> PageFragments:
    cursor = context.options.cursor
    if cursor is CursorStyle.HIDDEN:
        return fragments.with_class('no-cursor')
    if isinstance(cursor, AssetFile):
        cursor_url = context.asset_manager.register_file('cursor' + get_file_extension(cursor), cursor)
        return fragments.with_style('cursor', f'url("{escape_css(cursor_url)}"), auto')
    return fragments


def apply_favicon(fragments: PageFragments, context: PageContext) -> PageFragments:
    favicon = context.options.favicon
    if favicon is None:
        return fragments.with_substitution('FAVICON', '')

    favicon_url = context.asset_manager.register_file('favicon' + get_file_extension(favicon), favicon)
    return fragments.with_substitution(
        'FAVICON',
        f'<link rel="shortcut icon" type="image/png" href="{escape_html(favicon_url)}">'
    )


def apply_background_image(fragments: PageFragments, context: PageContext) -> PageFragments:
    image = context.options.background_image
    if image is None:
        return fragments

    image_url = context.asset_manager.register_file('background' + get_file_extension(image), image)
    return fragments.with_style('background-image', f'url("{escape_css(image_url)}")')


def apply_extensions(fragments: PageFragments, context: PageContext) -> PageFragments:
    extensions = context.options.extensions
    if extensions:
        message = f"Loading extensions is not supported yet; ignoring {len(extensions)} extension(s)"
        logger.warning(message)
        context.options.log(message, 'status')
    return fragments


def apply_loading_progress(fragments: PageFragments, context: PageContext) -> PageFragments:
    progress_bar = context.options.loading.progress_bar
    if not progress_bar:
        return fragments
    return fragments.with_class('show-loading-progress').with_style('--progress-colour', progress_bar)


def apply_loading_image(fragments: PageFragments, context: PageContext) -> PageFragments:
    loading = context.options.loading
    if loading.stretch:
        fragments = fragments.with_class('stretch-loading-image')

    image = loading.image
    if not image:
        return fragments.with_substitution('LOADING_IMAGE', '')

    if isinstance(image, AssetFile):
        image_url = context.asset_manager.register_file('loading' + get_file_extension(image), image)
    else:
        image_url = image
    return fragments.with_substitution(
        'LOADING_IMAGE',
        f'<img src="{escape_html(image_url)}" id="loading-image">'
    )


def apply_buttons(fragments: PageFragments, context: PageContext) -> PageFragments:
    buttons = context.options.buttons
    if buttons.fullscreen:
        fragments = fragments.with_class('show-fullscreen-btn')
    if buttons.start_stop:
        fragments = fragments.with_class('show-start-stop-btns')
    return fragments


def apply_monitors(fragments: PageFragments, context: PageContext) -> PageFragments:
    monitors = context.options.monitors
    if monitors.background is not MonitorBackground.NONE:
        fragments = fragments.with_class('show-monitor-box')
        if isinstance(monitors.background, str) and monitors.background:
            fragments = fragments.with_style('--monitor-colour', monitors.background)
    return fragments.with_style('--monitor-text', monitors.text)


def inline_element(tag: str, text: str) -> str:
    """
    Wrap text in a <style> or <script> element

    Closing tags inside the text are written as <\\/tag so they cannot end the
    element early.
    """
    body = re.sub(f'</({tag})', r'<\\/\1', text, flags=re.IGNORECASE)
    return f'<{tag}>\n{body}\n</{tag}>'


def apply_stylesheet(fragments: PageFragments, context: PageContext) -> PageFragments:
    # Only archives carry the stylesheet as a file; a single page holds it inline
    if not context.asset_manager.output_zip:
        return fragments.with_substitution('CSS', inline_element('style', context.stylesheet))

    stylesheet = AssetFile('style.css', context.stylesheet.encode('utf-8'), 'text/css')
    stylesheet_url = context.asset_manager.register_file('style.css', stylesheet)
    return fragments.with_substitution(
        'CSS',
        f'<link rel="stylesheet" href="{escape_html(stylesheet_url)}">'
    )


def apply_engine(fragments: PageFragments, context: PageContext) -> PageFragments:
    if not (context.options.include_vm and context.engine_script is not None):
        engine_url = context.engine_url
    elif context.asset_manager.output_zip:
        engine = AssetFile('vm.js', context.engine_script.encode('utf-8'), 'text/javascript')
        engine_url = context.asset_manager.register_file('vm.js', engine)
    else:
        return fragments.with_substitution('VM', inline_element('script', context.engine_script))
    return fragments.with_substitution('VM', f'<script src="{escape_html(engine_url)}"></script>')


def bootstrap_config(context: PageContext) -> Dict[str, Any]:
    """Settings read by the page script when it starts the project"""
    options = context.options
    return {
        'username': options.username,
        'autoStart': options.auto_start,
        'turbo': options.turbo,
        'fps': options.fps,
        'limits': options.limits,
        'fencing': options.fencing,
        'pointerLock': options.pointer_lock,
        'cloud': {
            'serverUrl': options.cloud.server_url,
            'specialBehaviours': options.cloud.special_behaviours
        },
        'assets': context.assets
    }


def script_safe_json(value: Any) -> str:
    """JSON that can sit inside a <script> element without closing it"""
    return (
        json.dumps(value, separators=(',', ':'))
        .replace('<', '\\u003c')
        .replace('>', '\\u003e')
        .replace('&', '\\u0026')
    )


def apply_bootstrap_scripts(fragments: PageFragments, context: PageContext) -> PageFragments:
    return fragments.with_substitution(
        'SCRIPTS',
        '<script>\nwindow.HTMLIFIER_CONFIG = ' + script_safe_json(bootstrap_config(context)) + ';\n</script>'
    )


FEATURE_STEPS: Sequence[FeatureStep] = (
    apply_title,
    apply_stage_size,
    apply_cursor,
    apply_favicon,
    apply_background_image,
    apply_extensions,
    apply_loading_progress,
    apply_loading_image,
    apply_buttons,
    apply_monitors,
    apply_stylesheet,
    apply_engine,
    apply_bootstrap_scripts,
)


def render_classes(classes: Sequence[str]) -> str:
    return ' '.join(classes)


def render_styles(styles: Sequence[tuple]) -> str:
    """Render style declarations as a style attribute, or '' when there are none"""
    if not styles:
        return ''
    lines = [escape_html(f'{prop}: {value};') for prop, value in styles]
    return 'style="\n' + '\n'.join(lines) + '\n"'


def build_page_fragments(context: PageContext,
                         steps: Sequence[FeatureStep] = FEATURE_STEPS) -> PageFragments:
    """
    Run every feature step in order and render the class list and styles

    Args:
        context: Options and collaborators for this page
        steps: Feature steps to fold over

    Returns:
        PageFragments with a value for every placeholder the steps handle
    """
    fragments = PageFragments()
    for step in steps:
        fragments = step(fragments, context)

    return (
        fragments
        .with_substitution('CLASSES', render_classes(fragments.classes))
        .with_substitution('STYLES', render_styles(fragments.styles))
    )


class PageTemplate(BaseTemplate):
    """
    Template for the standalone player page
    """

    def get_required_data_fields(self) -> List[str]:
        return ['options', 'asset_manager', 'assets', 'stylesheet', 'engine_url']

    def generate_html(self, data: Dict[str, Any]) -> str:
        """
        Generate the player page

        Args:
            data: Mapping with the PageContext fields

        Returns:
            Complete HTML document as string
        """
        self._validate_data(data)

        context = PageContext(
            options=data['options'],
            asset_manager=data['asset_manager'],
            assets=data['assets'],
            stylesheet=data['stylesheet'],
            engine_url=data['engine_url'],
            engine_script=data.get('engine_script')
        )

        fragments = build_page_fragments(context)
        self.logger.info(f"Page classes: {render_classes(fragments.classes) or '(none)'}")

        return self.substitute(fragments.substitution_map)
