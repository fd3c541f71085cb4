"""
PNN 字段字典测试（parse / safe_parse / valid / dump）
"""

import pytest

from notation import pnn
from notation.errors import InvalidArgument, InvalidFormat
from notation.pnn.dump import dump
from notation.pnn.parse import parse, safe_parse
from notation.pnn.validate import valid

VALID_STRINGS = ["k", "K", "+k", "-p", "k'", "+k'", "-P'", "Z", "+a"]

INVALID_STRINGS = [
    "",
    "1",
    "!",
    "kp",
    "king",
    "*k",
    "++k",
    "+-k",
    "k^",
    "k''",
    "+k'=",
    "k=",
    "k<",
    "k>",
    " k",
    "k ",
    "k\n",
    "'",
]


class TestValid:
    """测试 valid"""

    @pytest.mark.parametrize("value", VALID_STRINGS)
    def test_valid(self, value):
        assert valid(value)

    @pytest.mark.parametrize("value", INVALID_STRINGS)
    def test_invalid(self, value):
        assert not valid(value)

    @pytest.mark.parametrize("value", [None, 1, b"k", ["k"]])
    def test_non_string(self, value):
        """非字符串返回 False，不抛异常"""
        assert valid(value) is False

    def test_all_letters(self):
        for code in range(ord("a"), ord("z") + 1):
            assert valid(chr(code))
            assert valid(chr(code).upper())

    def test_facade(self):
        assert pnn.valid_fields("+k'")
        assert not pnn.valid_fields("+k''")


class TestParse:
    """测试 parse / safe_parse"""

    def test_letter_only(self):
        assert parse("k") == {"letter": "k"}

    def test_prefix(self):
        assert parse("+k") == {"letter": "k", "prefix": "+"}
        assert parse("-K") == {"letter": "K", "prefix": "-"}

    def test_suffix(self):
        assert parse("k'") == {"letter": "k", "suffix": "'"}

    def test_all_fields(self):
        result = parse("+k'")
        assert result == {"letter": "k", "prefix": "+", "suffix": "'"}
        assert list(result) == ["letter", "prefix", "suffix"]

    def test_absent_keys_omitted(self):
        result = parse("K")
        assert "prefix" not in result
        assert "suffix" not in result

    @pytest.mark.parametrize("value", INVALID_STRINGS)
    def test_invalid(self, value):
        with pytest.raises(InvalidFormat):
            parse(value)
        assert safe_parse(value) is None

    def test_non_string(self):
        with pytest.raises(InvalidFormat):
            parse(None)
        assert safe_parse(None) is None

    def test_error_message(self):
        with pytest.raises(InvalidFormat, match="Invalid PNN string"):
            parse("++k")

    def test_safe_parse_valid(self):
        assert safe_parse("-p'") == {"letter": "p", "prefix": "-", "suffix": "'"}

    def test_facade(self):
        assert pnn.parse_fields("+k'") == {"letter": "k", "prefix": "+", "suffix": "'"}
        assert pnn.safe_parse("kk") is None


class TestDump:
    """测试 dump"""

    def test_letter_only(self):
        assert dump(letter="k") == "k"

    def test_all_fields(self):
        assert dump(letter="k", prefix="+", suffix="'") == "+k'"
        assert dump(letter="P", prefix="-") == "-P"

    def test_round_trip(self):
        for value in VALID_STRINGS:
            assert dump(**parse(value)) == value

    def test_facade(self):
        assert pnn.dump(**pnn.parse_fields("+k'")) == "+k'"

    @pytest.mark.parametrize("letter", ["", "kk", "1", "+", None, "é"])
    def test_invalid_letter(self, letter):
        with pytest.raises(InvalidArgument, match="Letter"):
            dump(letter=letter)

    @pytest.mark.parametrize("prefix", ["", "*", "++", "'"])
    def test_invalid_prefix(self, prefix):
        with pytest.raises(InvalidArgument, match="prefix"):
            dump(letter="k", prefix=prefix)

    @pytest.mark.parametrize("suffix", ["", "^", "''", "+"])
    def test_invalid_suffix(self, suffix):
        with pytest.raises(InvalidArgument, match="suffix"):
            dump(letter="k", suffix=suffix)

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            dump("k")
