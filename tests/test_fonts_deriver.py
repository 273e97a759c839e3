"""
Tests for font face derivation from file names.
"""

import pytest

from font2css.fonts import (
    FONT_STYLE_KEYWORDS,
    FONT_WEIGHT_KEYWORDS,
    FONT_WEIGHT_NAMES,
    FontFaceDescriptor,
    classify_tokens,
    derive_font_face,
    extract_family,
    resolve_format,
)
from font2css.fonts.deriver import TokenClassification, build_src_url, descriptor_tokens


def derive(filename: str) -> FontFaceDescriptor:
    stem, _, ext = filename.rpartition(".")
    return derive_font_face(stem, f".{ext}", filename)


class TestKeywordTables:
    """Test the static keyword tables."""

    def test_style_keywords(self):
        assert {"normal", "italic", "oblique"} == FONT_STYLE_KEYWORDS

    def test_weight_keywords_include_numeric_values(self):
        for value in range(100, 1000, 100):
            assert str(value) in FONT_WEIGHT_KEYWORDS
        assert {"bold", "bolder", "lighter", "normal"} <= FONT_WEIGHT_KEYWORDS

    def test_weight_names(self):
        assert FONT_WEIGHT_NAMES["thin"] == 100
        assert FONT_WEIGHT_NAMES["semibold"] == 600
        assert FONT_WEIGHT_NAMES["bold"] == 700
        assert FONT_WEIGHT_NAMES["black"] == 900

    def test_tables_are_immutable(self):
        with pytest.raises(TypeError):
            FONT_WEIGHT_NAMES["custom"] = 450
        with pytest.raises(AttributeError):
            FONT_STYLE_KEYWORDS.add("slanted")


class TestClassifyTokens:
    """Test descriptor token classification."""

    def test_descriptor_tokens_skip_family_seed(self):
        assert descriptor_tokens("Roboto-Black-Italic") == ["black", "italic"]
        assert descriptor_tokens("Roboto") == []

    def test_no_tokens(self):
        result = classify_tokens([])
        assert result == TokenClassification()
        assert result.count == 0

    def test_style_and_weight_are_independent(self):
        result = classify_tokens(["black", "italic"])
        assert result.style == "italic"
        assert result.weight == "900"
        assert result.count == 2

    def test_weight_name_wins_over_keyword(self):
        """'bold' is both a name and a keyword; the numeric value is used."""
        assert classify_tokens(["bold"]).weight == "700"

    def test_weight_keyword_kept_verbatim(self):
        assert classify_tokens(["bolder"]).weight == "bolder"
        assert classify_tokens(["300"]).weight == "300"

    def test_normal_is_a_style_but_not_a_weight(self):
        result = classify_tokens(["normal"])
        assert result.style == "normal"
        assert result.weight is None
        assert result.count == 1

    def test_last_match_wins(self):
        assert classify_tokens(["bold", "light"]).weight == "300"
        assert classify_tokens(["light", "bold"]).weight == "700"
        assert classify_tokens(["italic", "oblique"]).style == "oblique"

    def test_normal_does_not_reset_weight(self):
        assert classify_tokens(["bold", "normal"]).weight == "700"

    def test_unknown_tokens_ignored(self):
        result = classify_tokens(["web", "latin", "v2"])
        assert result.count == 0


class TestExtractFamily:
    """Test family extraction from the recognized attribute count."""

    def test_zero_count_keeps_full_name(self):
        assert extract_family("Foo-Bar", 0) == "Foo-Bar"

    def test_no_hyphen_keeps_full_name(self):
        assert extract_family("Lobster", 2) == "Lobster"

    def test_strips_trailing_tokens(self):
        assert extract_family("Roboto-Black-Italic", 2) == "Roboto"
        assert extract_family("Open-Sans-Bold", 1) == "Open-Sans"

    def test_strips_positionally(self):
        """Trailing tokens are removed whether or not they were the matching ones."""
        assert extract_family("Roboto-Italic-Web", 1) == "Roboto-Italic"

    def test_every_token_consumed_gives_empty_family(self):
        """Known edge case: dropping all tokens yields an empty family."""
        assert extract_family("Foo-Bar", 2) == ""


class TestResolveFormat:
    """Test format resolution from extensions."""

    @pytest.mark.parametrize(
        ("extension", "expected"),
        [
            (".woff2", "woff2"),
            (".woff", "woff"),
            (".ttf", "truetype"),
            (".otf", "truetype"),
            ("", "truetype"),
            (".WOFF2", "truetype"),
        ],
    )
    def test_resolve_format(self, extension, expected):
        assert resolve_format(extension) == expected

    def test_build_src_url(self):
        assert build_src_url("Roboto-Bold.ttf") == "../fonts/Roboto-Bold.ttf"
        assert build_src_url("Roboto-Bold.ttf", "/static/") == "/static/Roboto-Bold.ttf"


class TestDeriveFontFace:
    """Test end-to-end derivation and rendering."""

    def test_name_without_hyphen(self):
        descriptor = derive("Lobster.ttf")

        assert descriptor.family == "Lobster"
        assert descriptor.style is None
        assert descriptor.weight is None
        assert descriptor.declaration == (
            '@font-face{font-family:"Lobster";'
            'src:url("../fonts/Lobster.ttf") format("truetype");'
            "font-display:swap;}"
        )

    def test_bold(self):
        descriptor = derive("OpenSans-Bold.ttf")

        assert descriptor.family == "OpenSans"
        assert descriptor.weight == "700"
        assert descriptor.style is None

    def test_italic(self):
        descriptor = derive("Roboto-Italic.woff")

        assert descriptor.family == "Roboto"
        assert descriptor.style == "italic"
        assert descriptor.format == "woff"

    def test_weight_and_style(self):
        descriptor = derive("Roboto-Black-Italic.woff2")

        assert descriptor.declaration == (
            '@font-face{font-family:"Roboto";'
            'src:url("../fonts/Roboto-Black-Italic.woff2") format("woff2");'
            "font-style:italic;font-weight:900;font-display:swap;}"
        )

    def test_empty_family_from_leading_hyphen(self):
        """Known edge case: every token is stripped and the family is empty."""
        descriptor = derive("-Italic.ttf")

        assert descriptor.family == ""
        assert descriptor.declaration == (
            '@font-face{font-family:"";'
            'src:url("../fonts/-Italic.ttf") format("truetype");'
            "font-style:italic;font-display:swap;}"
        )

    def test_unrecognized_tokens(self):
        descriptor = derive("Foo-Bar.ttf")

        assert descriptor.family == "Foo-Bar"
        assert descriptor.to_properties() == {
            "font-family": '"Foo-Bar"',
            "src": 'url("../fonts/Foo-Bar.ttf") format("truetype")',
        }

    def test_case_insensitive_tokens(self):
        descriptor = derive("Inter-SEMIBOLD.woff2")
        assert descriptor.weight == "600"
        assert descriptor.family == "Inter"

    def test_original_name_used_for_src(self):
        descriptor = derive_font_face("Roboto-Bold", ".woff2", "Roboto-Bold.v3.woff2")
        assert descriptor.src_url == "../fonts/Roboto-Bold.v3.woff2"

    def test_properties_order(self):
        descriptor = derive("Roboto-Light-Oblique.ttf")
        assert list(descriptor.to_properties()) == [
            "font-family",
            "src",
            "font-style",
            "font-weight",
        ]

    def test_declaration_frame(self):
        for filename in ["A.ttf", "A-B-C.woff", "Roboto-Thin-Italic.woff2"]:
            declaration = derive(filename).declaration
            assert declaration.startswith("@font-face{")
            assert declaration.endswith("font-display:swap;}")

    def test_deterministic(self):
        first = derive_font_face("Roboto-Medium", ".ttf", "Roboto-Medium.ttf")
        second = derive_font_face("Roboto-Medium", ".ttf", "Roboto-Medium.ttf")

        assert first == second
        assert first.declaration.encode("utf-8") == second.declaration.encode("utf-8")

    def test_str_is_declaration(self):
        descriptor = derive("Roboto-Bold.ttf")
        assert str(descriptor) == descriptor.declaration
