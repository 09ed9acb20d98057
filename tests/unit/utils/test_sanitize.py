#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for attribute, URL and mention sanitization."""

import pytest

from delta2html.options import SanitizeOptions
from delta2html.utils.sanitize import (
    encode_link,
    is_url_scheme_dangerous,
    is_valid_color,
    sanitize_attributes,
    sanitize_mention,
    sanitize_url,
)


@pytest.mark.unit
class TestSanitizeUrl:
    """Tests for URL sanitization."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/page",
            "http://example.com",
            "ftp://files.example.com/a.txt",
            "mailto:someone@example.com",
            "tel:+15551234",
            "#section",
            "/relative/path",
            "data:image/png;base64,AAAA",
        ],
    )
    def test_whitelisted_urls_pass(self, url):
        assert sanitize_url(url) == url

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "vbscript:msgbox",
            "data:text/html,<script>",
            "example.com",
        ],
    )
    def test_other_urls_get_unsafe_prefix(self, url):
        assert sanitize_url(url).startswith("unsafe:")

    def test_leading_whitespace_is_stripped(self):
        assert sanitize_url("   https://example.com") == "https://example.com"

    def test_output_is_attribute_encoded(self):
        assert sanitize_url('https://x.org/?a=1&b="2"') == "https://x.org/?a=1&amp;b=&quot;2&quot;"

    def test_custom_sanitizer_wins(self):
        options = SanitizeOptions(url_sanitizer=lambda url: url.upper())
        assert sanitize_url("javascript:x", options) == "JAVASCRIPT:X"

    def test_custom_sanitizer_returning_none_falls_back(self):
        options = SanitizeOptions(url_sanitizer=lambda url: None)
        assert sanitize_url("javascript:x", options) == "unsafe:javascript:x"


@pytest.mark.unit
class TestHelpers:
    """Tests for the small validators."""

    def test_dangerous_scheme(self):
        assert is_url_scheme_dangerous("  javascript:void(0)")
        assert not is_url_scheme_dangerous("https://example.com")

    def test_encode_link_does_not_double_encode(self):
        assert encode_link("a&amp;b") == "a&amp;b"
        assert encode_link("a&b") == "a&amp;b"

    @pytest.mark.parametrize("value", ["red", "#fff", "#A0B1C2", "rgb(0, 128, 255)"])
    def test_valid_colors(self, value):
        assert is_valid_color(value)

    @pytest.mark.parametrize("value", ["url(x)", "#ggg", "rgb(300,0,0)", "red;display:none"])
    def test_invalid_colors(self, value):
        assert not is_valid_color(value)


@pytest.mark.unit
class TestSanitizeAttributes:
    """Tests for attribute cleaning."""

    def test_non_mapping(self):
        assert sanitize_attributes("bold") == {}

    def test_booleans_are_normalized(self):
        assert sanitize_attributes({"bold": "yes", "italic": 0}) == {"bold": True}

    def test_invalid_values_are_dropped(self):
        dirty = {"color": "url(x)", "font": "a;b", "list": "bogus", "align": "middle", "direction": "ltr"}
        assert sanitize_attributes(dirty) == {}

    def test_header_is_clamped(self):
        assert sanitize_attributes({"header": 9}) == {"header": 6}
        assert sanitize_attributes({"header": "2"}) == {"header": 2}
        assert sanitize_attributes({"header": 0}) == {}
        assert sanitize_attributes({"header": "big"}) == {}

    def test_indent_is_capped(self):
        assert sanitize_attributes({"indent": 50}) == {"indent": 30}
        assert sanitize_attributes({"indent": "2"}) == {"indent": 2}

    def test_code_block_language(self):
        assert sanitize_attributes({"code-block": "python"}) == {"code-block": "python"}
        assert sanitize_attributes({"code-block": "py<script>"}) == {"code-block": True}

    def test_link_is_sanitized(self):
        assert sanitize_attributes({"link": "javascript:x"}) == {"link": "unsafe:javascript:x"}

    def test_width(self):
        assert sanitize_attributes({"width": "100px"}) == {"width": "100px"}
        assert sanitize_attributes({"width": "1e9"}) == {}
        assert sanitize_attributes({"width": True}) == {}

    def test_mentions_need_both_keys(self):
        assert sanitize_attributes({"mentions": True}) == {}
        clean = sanitize_attributes({"mentions": True, "mention": {"slug": "bob", "class": "m"}})
        assert clean == {"mentions": True, "mention": {"slug": "bob", "class": "m"}}

    def test_unknown_attributes_pass_through(self):
        assert sanitize_attributes({"table": "row-1", "renderAsBlock": 1}) == {"renderAsBlock": True, "table": "row-1"}


@pytest.mark.unit
class TestSanitizeMention:
    """Tests for mention cleaning."""

    def test_invalid_fields_are_dropped(self):
        clean = sanitize_mention({"class": "<bad>", "target": "a b", "link": "javascript:x", "name": "Bob"})
        assert clean == {"link": "unsafe:javascript:x", "name": "Bob"}

    def test_non_mapping(self):
        assert sanitize_mention("bob") == {}
