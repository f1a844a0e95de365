from __future__ import annotations

from urllib.parse import quote, unquote

# RFC 3986 pchar minus pct-encoded, plus "/":
#   unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
#   sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
# quote() always keeps ALPHA / DIGIT / "_.-~", so only the rest is listed.
PATH_SAFE_CHARS = "-._~!$&'()*+,;=:@/"


def escape_path(path: str) -> str:
    """
    Escape a path so it is a valid URL path.

    Escapes "?", "[" and "]" too, which most generic URI helpers keep as-is.
    Lone surrogates are encoded as their raw UTF-8 bytes instead of failing.

        >>> escape_path("/a b")
        '/a%20b'
    """
    return quote(path, safe=PATH_SAFE_CHARS, encoding="utf-8", errors="surrogatepass")


def unescape_path(path: str) -> str:
    """
    Decode every %XX triplet in `path`. Malformed triplets are kept verbatim.

        >>> unescape_path("/a%20b")
        '/a b'
    """
    return unquote(path, encoding="utf-8", errors="replace")
