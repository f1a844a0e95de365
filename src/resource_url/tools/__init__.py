from .url_tools import (
    resolve_url,
    sanitize_url,
    escape_path,
    unescape_path,
)

__all__ = [
    "resolve_url",
    "sanitize_url",
    "escape_path",
    "unescape_path",
]
