from __future__ import annotations

from typing import Any, Iterable, Mapping

from .config import DEFAULT_CONFIG, ExpanderConfig
from .escaping import escape_path


def _ordered_tokens(
    placeholders: Mapping[Any, Any],
    config: ExpanderConfig,
) -> Iterable[tuple[str, Any]]:
    tokens = [(str(name), value) for name, value in placeholders.items()]
    if config.order == "longest_first":
        # sorted() is stable: names of equal length keep the mapping order
        tokens = sorted(tokens, key=lambda t: len(t[0]), reverse=True)
    return tokens


def expand_template(
    template: str,
    placeholders: Mapping[Any, Any] | None = None,
    *,
    config: ExpanderConfig | None = None,
) -> str:
    """
    Replace every ":name" token in `template` with the path-escaped value.

    Returns the *unsanitized* URL. A None value drops "/:name" (or a bare
    ":name") so optional segments do not leave an empty segment behind.
    Only the token itself is dropped: "/:title.html" becomes ".html", so
    None only makes sense for placeholders that fill a whole segment.
    """
    cfg = config or DEFAULT_CONFIG
    result = template
    for name, value in _ordered_tokens(placeholders or {}, cfg):
        if ":" not in result:
            break
        token = f":{name}"
        if value is None:
            result = result.replace(f"/{token}", "").replace(token, "")
        else:
            result = result.replace(token, escape_path(str(value)))
    return result
