from __future__ import annotations

import pytest


@pytest.fixture()
def post_placeholders() -> dict[str, str]:
    """
    Placeholders of a typical dated blog post.
    """
    return {
        "categories": "ruby",
        "year": "2024",
        "month": "05",
        "day": "17",
        "title": "hello world",
    }


@pytest.fixture()
def make_spec():
    """
    Helper: build a UrlSpec with keyword arguments only.
    """
    from resource_url.core.models import construct

    def _maker(**kwargs):
        return construct(**kwargs)
    return _maker
