"""
Conversion options for the HTMLifier
Immutable records describing how one project should be turned into HTML
"""

import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

from ..utils.exceptions import ConfigurationError
from ..utils.logging_config import LogCallback, create_log_callback


@dataclass(frozen=True)
class AssetFile:
    """An in-memory file, such as an image chosen for the cursor or favicon"""
    name: str
    content: bytes
    mime_type: Optional[str] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> 'AssetFile':
        """
        Read a file from disk

        Args:
            path: Path to the file

        Returns:
            AssetFile holding the file's bytes and guessed MIME type
        """
        path = Path(path)
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ConfigurationError(f"Could not read file {path}: {e}")

        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, content=content, mime_type=mime_type)


class CursorStyle(Enum):
    """Cursor choices that do not need an image"""
    DEFAULT = 'default'
    HIDDEN = 'hidden'


class MonitorBackground(Enum):
    """Monitor background choices that are not a concrete colour"""
    TRANSLUCENT = 'translucent'
    NONE = 'none'


@dataclass(frozen=True)
class LoadingOptions:
    """Customisation of the loading screen"""
    # Colour of the progress bar, or None for no progress bar
    progress_bar: Optional[str] = None
    # An AssetFile, a URL to an image that stays external, or None
    image: Union[AssetFile, str, None] = None
    stretch: bool = False


@dataclass(frozen=True)
class ButtonOptions:
    """Visibility of the buttons in the top right of the page"""
    start_stop: bool = False
    fullscreen: bool = False


@dataclass(frozen=True)
class MonitorOptions:
    """Colours of the variable and list monitors"""
    background: Union[MonitorBackground, str] = MonitorBackground.TRANSLUCENT
    text: str = '#ffffff'

    def __post_init__(self):
        # 'translucent' and 'none' name the sentinels, not colours
        if isinstance(self.background, str) and self.background in [b.value for b in MonitorBackground]:
            object.__setattr__(self, 'background', MonitorBackground(self.background))


@dataclass(frozen=True)
class CloudOptions:
    """Behaviour of cloud variables; stored in localStorage unless a server is given"""
    # ws:// or wss:// URL of a cloud server
    server_url: Optional[str] = None
    special_behaviours: bool = True


@dataclass(frozen=True)
class HtmlifyOptions:
    """
    Options for one conversion

    The cursor is CursorStyle.DEFAULT, CursorStyle.HIDDEN or an AssetFile; the
    strings 'default' and 'hidden' are accepted for the first two. The monitor
    background is MonitorBackground.TRANSLUCENT, MonitorBackground.NONE (or
    'translucent' / 'none') or a CSS colour.
    """
    log: LogCallback = field(default_factory=create_log_callback, compare=False)
    zip: bool = False
    include_vm: bool = True
    title: str = 'Project'
    username: str = 'player'
    width: float = 480
    height: float = 360
    stretch: bool = False
    auto_start: bool = False
    turbo: bool = False
    fps: int = 30
    limits: bool = True
    fencing: bool = True
    pointer_lock: bool = False
    cursor: Union[CursorStyle, AssetFile, str] = CursorStyle.DEFAULT
    favicon: Optional[AssetFile] = None
    background_image: Optional[AssetFile] = None
    # URLs of unofficial extensions; not loaded yet
    extensions: Tuple[str, ...] = ()
    loading: LoadingOptions = field(default_factory=LoadingOptions)
    buttons: ButtonOptions = field(default_factory=ButtonOptions)
    monitors: MonitorOptions = field(default_factory=MonitorOptions)
    cloud: CloudOptions = field(default_factory=CloudOptions)

    def __post_init__(self):
        for name in ('width', 'height', 'fps'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigurationError(f"{name} must be a positive number, got {value!r}")

        cursor = self.cursor
        if isinstance(cursor, str) and cursor in [c.value for c in CursorStyle]:
            object.__setattr__(self, 'cursor', CursorStyle(cursor))
        elif not isinstance(cursor, (CursorStyle, AssetFile)):
            raise ConfigurationError(f"cursor must be 'default', 'hidden' or an image file, got {cursor!r}")

        # Accept any iterable of extension URLs but store an immutable tuple
        if not isinstance(self.extensions, tuple):
            object.__setattr__(self, 'extensions', tuple(self.extensions))
