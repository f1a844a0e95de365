from __future__ import annotations

import pytest

from resource_url.core.config import ExpanderConfig
from resource_url.core.template import expand_template


def test_expand_template_escapes_values(post_placeholders):
    out = expand_template("/:year/:month/:title.html", post_placeholders)
    assert out == "/2024/05/hello%20world.html"


def test_expand_template_replaces_every_occurrence():
    out = expand_template("/:slug/:slug/", {"slug": "x"})
    assert out == "/x/x/"


def test_expand_template_keeps_unknown_tokens():
    out = expand_template("/:year/:unknown", {"year": "2024"})
    assert out == "/2024/:unknown"


def test_expand_template_is_unsanitized():
    out = expand_template(":categories//:title", {"categories": "", "title": "t"})
    assert out == "//t"


def test_expand_template_escapes_slash_free_specials():
    out = expand_template("/:title", {"title": "what? [draft]"})
    assert out == "/what%3F%20%5Bdraft%5D"


def test_value_slashes_are_kept():
    out = expand_template("/:path/index.html", {"path": "docs/guide"})
    assert out == "/docs/guide/index.html"


def test_non_string_values_are_stringified():
    out = expand_template("/:year/:num", {"year": 2024, "num": 7})
    assert out == "/2024/7"


def test_none_value_drops_segment():
    out = expand_template("/:categories/:title.html", {"categories": None, "title": "t"})
    assert out == "/t.html"


@pytest.mark.parametrize(
    "placeholders",
    [
        {"cat": "c", "category": "news"},
        {"category": "news", "cat": "c"},
    ],
)
def test_longest_placeholder_name_wins_regardless_of_mapping_order(placeholders):
    out = expand_template("/:category/:cat", placeholders)
    assert out == "/news/c"


def test_given_order_substitutes_in_mapping_order():
    cfg = ExpanderConfig(order="given")
    out = expand_template("/:category/:cat", {"cat": "c", "category": "news"}, config=cfg)
    # ":cat" consumed the head of ":category"
    assert out == "/cegory/c"


def test_inserted_value_is_not_reexpanded_by_its_own_key():
    out = expand_template("/:title", {"title": ":title"})
    assert out == "/:title"


def test_empty_placeholders_leave_template_untouched():
    assert expand_template("/:a/b", {}) == "/:a/b"
    assert expand_template("/:a/b", None) == "/:a/b"


def test_none_value_inside_a_segment_drops_only_the_token():
    out = expand_template("/:title.html", {"title": None})
    assert out == ".html"
