from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .errors import ConfigurationError


PlaceholderOrder = Literal["longest_first", "given"]

_ORDERS: tuple[str, ...] = ("longest_first", "given")


@dataclass(frozen=True)
class ExpanderConfig:
    """
    Template expansion configuration.

    order:
      - "longest_first": substitute longer placeholder names before shorter
        ones, so ":cat" never eats the head of ":category".
      - "given": substitute in the mapping's iteration order.
    """
    order: PlaceholderOrder = "longest_first"

    def __post_init__(self) -> None:
        if self.order not in _ORDERS:
            raise ConfigurationError(
                f"Unknown placeholder order: '{self.order}'. "
                f"Allowed: {', '.join(_ORDERS)}"
            )


DEFAULT_CONFIG = ExpanderConfig()
