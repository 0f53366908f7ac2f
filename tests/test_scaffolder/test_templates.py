"""Tests for the Jinja2 template renderer and its custom filters."""

from __future__ import annotations

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound, UndefinedError

from laravel_scaffold.scaffolder.templates import (
    DEFAULT_TEMPLATE_DIR,
    TemplateRenderer,
    pascal_case,
    php_list,
    php_str,
    ucfirst,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------


class TestUcfirst:
    def test_lowercase(self):
        assert ucfirst("post") == "Post"

    def test_only_first_character(self):
        assert ucfirst("blog_post") == "Blog_post"

    def test_already_capitalised(self):
        assert ucfirst("Post") == "Post"

    def test_empty(self):
        assert ucfirst("") == ""


class TestPascalCase:
    def test_underscored(self):
        assert pascal_case("blog_post") == "BlogPost"

    def test_single_word(self):
        assert pascal_case("post") == "Post"

    def test_keeps_inner_capitals(self):
        assert pascal_case("blog_postTag") == "BlogPostTag"


class TestPhpStr:
    def test_plain(self):
        assert php_str("title") == "'title'"

    def test_escapes_single_quote(self):
        assert php_str("o'neil") == "'o\\'neil'"

    def test_escapes_backslash_first(self):
        assert php_str("a\\'b") == "'a\\\\\\'b'"


class TestPhpList:
    def test_quotes_and_joins(self):
        assert php_list(["title", "body"]) == "'title', 'body'"

    def test_no_trailing_separator(self):
        assert not php_list(["title"]).endswith(", ")

    def test_empty(self):
        assert php_list([]) == ""

    def test_escapes_quotes(self):
        assert php_list(["it's"]) == "'it\\'s'"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TestTemplateRenderer:
    def test_default_template_dir(self):
        renderer = TemplateRenderer()
        assert renderer.template_dir == DEFAULT_TEMPLATE_DIR

    def test_filters_available_in_templates(self, tmp_path: Path):
        (tmp_path / "name.j2").write_text(
            "{{ name | pascal_case }}Controller {{ name | php_str }}", encoding="utf-8"
        )
        out = TemplateRenderer(tmp_path).render("name.j2", {"name": "blog_post"})
        assert out == "BlogPostController 'blog_post'"

    def test_undefined_variable_raises(self, tmp_path: Path):
        (tmp_path / "missing.j2").write_text("{{ missing }}", encoding="utf-8")
        with pytest.raises(UndefinedError):
            TemplateRenderer(tmp_path).render("missing.j2", {})

    def test_missing_template_raises(self):
        with pytest.raises(TemplateNotFound):
            TemplateRenderer().render("nope.j2", {})

    def test_custom_template_dir(self, tmp_path: Path):
        (tmp_path / "greeting.txt.j2").write_text("Hello {{ name }}!\n", encoding="utf-8")
        renderer = TemplateRenderer(tmp_path)
        assert renderer.render("greeting.txt.j2", {"name": "post"}) == "Hello post!\n"

    def test_layout_keeps_blade_expressions(self):
        out = TemplateRenderer().render("layouts/app.blade.php.j2", {})
        assert "{{ config('app.name', 'Laravel') }}" in out
        assert "@yield('content')" in out
