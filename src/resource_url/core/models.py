from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal

from .config import DEFAULT_CONFIG, ExpanderConfig
from .errors import ConfigurationError
from .resolver import expand_spec, resolve_url


Mode = Literal["permalink", "template"]


@dataclass(frozen=True)
class UrlSpec:
    """
    How to build the URL of one resource (page, post, ...).

    template     - e.g. "/:categories/:year/:title.html"; each ":name" is
                   replaced by the matching placeholder value.
    placeholders - name -> value, e.g. {"year": "2024"}.
    permalink    - literal URL; when given, the template is never expanded.

    Use `construct()` (or the constructor) with at least one of template or
    permalink.
    """
    template: str | None = None
    placeholders: Mapping[str, Any] = field(default_factory=dict)
    permalink: str | None = None
    config: ExpanderConfig = DEFAULT_CONFIG

    def __post_init__(self) -> None:
        if self.template is None and self.permalink is None:
            raise ConfigurationError("One of template or permalink must be supplied.")
        for name in ("template", "permalink"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string, got {type(value).__name__}"
                )
        placeholders = self.placeholders if self.placeholders is not None else {}
        if not isinstance(placeholders, Mapping):
            raise ConfigurationError(
                f"placeholders must be a mapping, got {type(placeholders).__name__}"
            )
        if not isinstance(self.config, ExpanderConfig):
            raise ConfigurationError(
                f"config must be an ExpanderConfig, got {type(self.config).__name__}"
            )
        # frozen: bypass __setattr__ to freeze the mapping as well
        object.__setattr__(
            self, "placeholders", MappingProxyType(dict(placeholders))
        )

    @property
    def mode(self) -> Mode:
        return "permalink" if self.permalink is not None else "template"

    def expand(self) -> str:
        """Unsanitized URL."""
        return expand_spec(self)

    def resolve(self) -> str:
        """The generated relative URL of the resource."""
        return resolve_url(self)

    def __str__(self) -> str:
        return self.resolve()

    def to_dict(self) -> dict[str, Any]:
        return {
            "template": self.template,
            "placeholders": dict(self.placeholders),
            "permalink": self.permalink,
            "mode": self.mode,
            "order": self.config.order,
        }


def construct(
    template: str | None = None,
    placeholders: Mapping[str, Any] | None = None,
    permalink: str | None = None,
    *,
    config: ExpanderConfig | None = None,
) -> UrlSpec:
    return UrlSpec(
        template=template,
        placeholders=placeholders if placeholders is not None else {},
        permalink=permalink,
        config=config or DEFAULT_CONFIG,
    )
