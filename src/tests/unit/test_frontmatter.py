"""Tests for daynotes.vault.frontmatter module."""

import logging

import pytest

from daynotes.vault.frontmatter import (
    parse_frontmatter,
    parse_frontmatter_tags,
    split_frontmatter,
)


class TestSplitFrontmatter:
    """Tests for split_frontmatter."""

    def test_no_header(self):
        assert split_frontmatter("# Title\nbody") == (None, "# Title\nbody")

    def test_header_and_body(self):
        header, body = split_frontmatter("---\ntags: a\n---\nbody\n")

        assert header == "tags: a\n"
        assert body == "body\n"

    def test_unterminated_header_is_body(self):
        content = "---\ntags: a\nbody"

        assert split_frontmatter(content) == (None, content)


class TestParseFrontmatterTags:
    """Tests for parse_frontmatter_tags."""

    def test_list_is_prefixed(self):
        assert parse_frontmatter_tags({"tags": ["work", "#personal"]}) == [
            "#work",
            "#personal",
        ]

    @pytest.mark.parametrize("raw", ["work, personal", "work personal", "#work,#personal"])
    def test_string_is_split(self, raw):
        assert parse_frontmatter_tags({"tags": raw}) == ["#work", "#personal"]

    def test_singular_key(self):
        assert parse_frontmatter_tags({"tag": "journal"}) == ["#journal"]

    def test_missing_field(self):
        assert parse_frontmatter_tags({"title": "x"}) is None

    def test_null_field(self):
        assert parse_frontmatter_tags({"tags": None}) is None


class TestParseFrontmatter:
    """Tests for parse_frontmatter."""

    def test_parses_tags_and_extra(self):
        frontmatter, body = parse_frontmatter(
            "---\ntitle: Monday\ntags: [work]\n---\nHello\n"
        )

        assert frontmatter is not None
        assert frontmatter.tags == ["#work"]
        assert frontmatter.extra == {"title": "Monday"}
        assert body == "Hello\n"

    def test_no_frontmatter(self):
        frontmatter, body = parse_frontmatter("Hello")

        assert frontmatter is None
        assert body == "Hello"

    def test_invalid_yaml_is_no_frontmatter(self, caplog):
        """Malformed YAML is logged and ignored."""
        caplog.set_level(logging.WARNING, logger="daynotes.vault.frontmatter")

        frontmatter, body = parse_frontmatter("---\ntags: [unclosed\n---\nbody")

        assert frontmatter is None
        assert body == "body"
        assert "Invalid frontmatter YAML" in caplog.text

    def test_non_mapping_is_no_frontmatter(self):
        frontmatter, _ = parse_frontmatter("---\n- a\n- b\n---\nbody")

        assert frontmatter is None
