"""Tests for DA string parsing."""

from pdf_freetext.handlers.default_appearance import fmt_number, parse_default_appearance


class TestParseDefaultAppearance:
    def test_defaults(self):
        da = parse_default_appearance(None)
        assert da.font_name == "Helv"
        assert da.font_size == 12.0
        assert da.fill_operator() == "0 g"

    def test_font_and_rgb(self):
        da = parse_default_appearance("/Cour 9 Tf 1 0 0.5 rg")
        assert da.font_name == "Cour"
        assert da.font_size == 9.0
        assert da.color == [1.0, 0.0, 0.5]
        assert da.fill_operator() == "1 0 0.5 rg"
        assert da.stroke_operator() == "1 0 0.5 RG"
        assert da.font_operator() == "/Cour 9 Tf"

    def test_cmyk(self):
        da = parse_default_appearance("0 0 0 1 k /Helv 10 Tf")
        assert da.color_operator == "k"
        assert da.color == [0.0, 0.0, 0.0, 1.0]

    def test_auto_size_keeps_default(self):
        assert parse_default_appearance("/Helv 0 Tf").font_size == 12.0

    def test_non_finite_numbers_ignored(self):
        da = parse_default_appearance("/Helv nan Tf inf 0 0 rg")
        assert da.font_name == "Helv"
        assert da.font_size == 12.0
        assert da.fill_operator() == "0 g"

    def test_malformed_tokens_ignored(self):
        da = parse_default_appearance("garbage Tf x y rg")
        assert da.font_name == "Helv"
        assert da.color_operator == "g"


def test_fmt_number():
    assert fmt_number(10.0) == "10"
    assert fmt_number(0.5) == "0.5"
    assert fmt_number(-0.0) == "0"
