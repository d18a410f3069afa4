import pytest

from lp_hedge.core.parsing import ParseResult, parse_number


class TestParseNumber:

    @pytest.mark.parametrize("text,expected", [
        ("0.7110", 0.711),
        ("2500", 2500.0),
        ("  10000  ", 10000.0),
        ("-4.5", -4.5),
        ("1e3", 1000.0),
        (42, 42.0),
    ])
    def test_valid(self, text, expected):
        result = parse_number(text)
        assert result.ok
        assert result.value == expected
        assert result.error is None

    @pytest.mark.parametrize("text", ["", "   ", "abc", "12abc", "1.2.3", None])
    def test_invalid(self, text):
        result = parse_number(text)
        assert not result.ok
        assert result.value is None
        assert result.error

    @pytest.mark.parametrize("text", ["nan", "NaN", "inf", "-inf", "Infinity"])
    def test_non_finite_rejected(self, text):
        result = parse_number(text)
        assert not result.ok
        assert "finite" in result.error

    def test_constructors(self):
        assert ParseResult.success(1.5) == ParseResult(ok=True, value=1.5)
        assert ParseResult.failure("bad") == ParseResult(ok=False, error="bad")
