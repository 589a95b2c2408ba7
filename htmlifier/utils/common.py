"""
Common utilities for the HTMLifier
Shared functions used across multiple modules: file sniffing, data URLs and escaping
"""

import base64
import html
import mimetypes
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import AssetEncodingError

# Leading bytes of the image formats a browser will accept as a cursor, favicon or
# background. Checked in order, first match wins.
_MAGIC_NUMBERS = (
    (b'\x89PNG\r\n\x1a\n', 'image/png'),
    (b'\xff\xd8\xff', 'image/jpeg'),
    (b'GIF87a', 'image/gif'),
    (b'GIF89a', 'image/gif'),
    (b'BM', 'image/bmp'),
    (b'\x00\x00\x01\x00', 'image/x-icon'),
    (b'\x00\x00\x02\x00', 'image/x-icon'),
)

_MIME_EXTENSIONS = {
    'image/png': '.png',
    'image/jpeg': '.jpg',
    'image/gif': '.gif',
    'image/webp': '.webp',
    'image/svg+xml': '.svg',
    'image/bmp': '.bmp',
    'image/x-icon': '.ico',
    'image/vnd.microsoft.icon': '.ico',
    'text/plain': '.txt',
    'text/css': '.css',
    'text/javascript': '.js',
    'application/javascript': '.js',
    'application/json': '.json',
}


def sniff_mime_type(content: bytes) -> Optional[str]:
    """
    Guess a MIME type from the leading bytes of a file

    Args:
        content: File content

    Returns:
        MIME type, or None if the format is not recognised
    """
    for magic, mime_type in _MAGIC_NUMBERS:
        if content.startswith(magic):
            return mime_type

    if content[:4] == b'RIFF' and content[8:12] == b'WEBP':
        return 'image/webp'

    head = content[:512].lstrip().lower()
    if head.startswith(b'<svg') or (head.startswith(b'<?xml') and b'<svg' in head):
        return 'image/svg+xml'

    return None


def get_file_extension(file: Any) -> str:
    """
    Work out the extension (with leading dot) to store a file under

    The content is sniffed first, then the declared MIME type is consulted and
    finally the suffix of the file name is used.

    Args:
        file: Object with ``content``, ``mime_type`` and ``name`` attributes

    Returns:
        Extension such as '.png', or '' when nothing is known about the file
    """
    sniffed = sniff_mime_type(file.content)
    if sniffed:
        return _MIME_EXTENSIONS[sniffed]

    mime_type = (file.mime_type or '').split(';')[0].strip().lower()
    if mime_type in _MIME_EXTENSIONS:
        return _MIME_EXTENSIONS[mime_type]
    if mime_type:
        guessed = mimetypes.guess_extension(mime_type)
        if guessed:
            return guessed

    return Path(file.name or '').suffix.lower()


def get_data_url(content: Union[bytes, str], mime_type: Optional[str] = None) -> str:
    """
    Encode content as a base64 data URL

    Args:
        content: Binary content, or text which is encoded as UTF-8
        mime_type: Media type tag; text defaults to text/plain and bytes are sniffed

    Returns:
        A ``data:`` URL
    """
    if isinstance(content, str):
        content = content.encode('utf-8')
        mime_type = mime_type or 'text/plain'
    elif isinstance(content, (bytes, bytearray, memoryview)):
        content = bytes(content)
        mime_type = mime_type or sniff_mime_type(content) or 'application/octet-stream'
    else:
        raise AssetEncodingError(
            f"Cannot encode {type(content).__name__} as a data URL"
        )

    encoded = base64.b64encode(content).decode('ascii')
    return f"data:{mime_type};base64,{encoded}"


def escape_html(value: Any) -> str:
    """Escape text for an HTML text or double-quoted attribute position"""
    return html.escape(str(value), quote=True)


def escape_css(value: Any) -> str:
    """
    Escape text for a double- or single-quoted CSS string

    Examples:
        >>> escape_css('a"b')
        'a\\\\"b'
    """
    escaped = str(value).replace('\\', '\\\\')
    escaped = escaped.replace('"', '\\"').replace("'", "\\'")
    return escaped.replace('\n', '\\a ').replace('\r', '\\d ')


def format_css_number(value: float) -> str:
    """
    Format a number for a CSS value without a trailing '.0'

    Examples:
        >>> format_css_number(75.0)
        '75'
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_number_with_commas(number: int) -> str:
    """
    Format large numbers with comma separators

    Examples:
        >>> format_number_with_commas(1234567)
        '1,234,567'
    """
    return f"{number:,}"


def generate_timestamp() -> str:
    """
    Generate ISO format timestamp for metadata

    Returns:
        Current timestamp in ISO format
    """
    return datetime.now().isoformat()


def validate_file_path(file_path: str, must_exist: bool = True) -> bool:
    """
    Validate that a file path is valid and optionally exists

    Args:
        file_path: Path to validate
        must_exist: Whether file must exist

    Returns:
        True if valid, False otherwise
    """
    try:
        path = Path(file_path)
        if must_exist:
            return path.exists()
        else:
            # Check if parent directory exists
            return path.parent.exists()
    except (TypeError, ValueError, OSError):
        return False
