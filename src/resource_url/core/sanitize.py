from __future__ import annotations

import re


_DOTS_ONLY = re.compile(r"\.+")


def sanitize_url(in_url: str) -> str:
    """
    Normalize a path-like string into a canonical relative URL.

    - "//" is collapsed until none is left
    - segments made only of dots are dropped ("/a/../b" -> "/a/b")
    - a trailing "/" is kept iff `in_url` had one
    - the result always starts with "/"
    """
    url = in_url
    while "//" in url:
        url = url.replace("//", "/")

    parts = [p for p in url.split("/") if not _DOTS_ONLY.fullmatch(p)]
    while parts and not parts[-1]:
        parts.pop()
    url = "/".join(parts)

    if in_url.endswith("/"):
        url += "/"

    if not url.startswith("/"):
        url = "/" + url

    return url
