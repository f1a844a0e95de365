from __future__ import annotations

from typing import Any, Mapping

from ..core.config import ExpanderConfig
from ..core.models import UrlSpec, construct


_DEFAULT_CFG = ExpanderConfig(order="longest_first")


def make_spec(
    template: str | None = None,
    placeholders: Mapping[str, Any] | None = None,
    permalink: str | None = None,
    order: str | None = None,
) -> UrlSpec:
    cfg = ExpanderConfig(order=order) if order else _DEFAULT_CFG
    return construct(template, placeholders, permalink, config=cfg)
