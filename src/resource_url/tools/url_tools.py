from __future__ import annotations

from typing import Any

from .common import make_spec
from ..core import escaping, sanitize


def resolve_url(
    template: str | None = None,
    placeholders: dict[str, Any] | None = None,
    permalink: str | None = None,
    order: str = "longest_first",
) -> dict[str, Any]:
    """
    Build the URL of a resource from a permalink or a ":name" template.
    """
    spec = make_spec(template, placeholders, permalink, order=order)
    return {
        "url": spec.resolve(),
        "mode": spec.mode,
        "expanded": spec.expand(),
        "spec": spec.to_dict(),
    }


def sanitize_url(url: str) -> dict[str, Any]:
    """
    Canonical form of a path: leading "/", no "//", no dots-only segments.
    """
    return {"input": url, "url": sanitize.sanitize_url(url)}


def escape_path(path: str) -> dict[str, Any]:
    return {"path": path, "escaped": escaping.escape_path(path)}


def unescape_path(path: str) -> dict[str, Any]:
    return {"path": path, "unescaped": escaping.unescape_path(path)}
