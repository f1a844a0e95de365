from __future__ import annotations


class ResourceUrlError(Exception):
    """Base error for the project."""


class ConfigurationError(ResourceUrlError):
    pass
