from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .sanitize import sanitize_url
from .template import expand_template

if TYPE_CHECKING:
    from .models import UrlSpec


logger = logging.getLogger("resource_url")


def expand_spec(spec: UrlSpec) -> str:
    """
    Permalink as-is, or the template with every placeholder substituted.
    Nothing is sanitized here.
    """
    if spec.permalink is not None:
        return spec.permalink
    return expand_template(spec.template or "", spec.placeholders, config=spec.config)


def resolve_url(spec: UrlSpec) -> str:
    raw = expand_spec(spec)
    url = sanitize_url(raw)
    logger.debug("Resolved %s URL %r -> %r", spec.mode, raw, url)
    return url
