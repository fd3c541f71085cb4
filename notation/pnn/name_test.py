"""
PNN 长名称测试
"""

import pytest

from notation import pnn
from notation.errors import InvalidFormat
from notation.pnn.name import PieceName
from notation.types import Side, State


class TestPieceNameValid:
    """测试格式校验"""

    @pytest.mark.parametrize(
        "value", ["KING", "king", "+QUEEN", "-pawn", "K", "ROOK^", "+king^", "-Q^"]
    )
    def test_valid(self, value):
        assert PieceName.valid(value)
        assert pnn.valid(value)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "King",  # 大小写混用
            "kING",
            "KING1",  # 含数字
            "++KING",
            "+-KING",
            "KING^^",
            "^KING",
            "KING'",  # 派生标记不属于长名称
            "KING^'",
            " KING",
            "KING ",
            "KING\n",
            "+",
            "^",
        ],
    )
    def test_invalid(self, value):
        assert not PieceName.valid(value)
        with pytest.raises(InvalidFormat):
            PieceName.parse(value)

    def test_non_string(self):
        """非字符串不抛异常"""
        assert not PieceName.valid(None)
        assert not PieceName.valid(42)
        assert not PieceName.valid(["KING"])

    def test_parse_non_string_raises(self):
        with pytest.raises(InvalidFormat):
            PieceName(None)

    def test_error_message_contains_input(self):
        with pytest.raises(InvalidFormat, match="'King'"):
            PieceName("King")


class TestPieceNameFields:
    """测试派生属性"""

    def test_king(self):
        name = pnn.parse("KING")
        assert name.is_first_player
        assert not name.is_second_player
        assert name.base_name == "KING"
        assert name.is_normal
        assert not name.is_terminal
        assert name.side == Side.FIRST

    def test_enhanced_queen(self):
        name = pnn.parse("+queen")
        assert name.is_enhanced
        assert name.base_name == "queen"
        assert not name.is_first_player
        assert name.is_second_player
        assert name.state == State.ENHANCED

    def test_diminished_terminal(self):
        name = pnn.name("-ROOK^")
        assert name.is_diminished
        assert name.is_terminal
        assert name.base_name == "ROOK"

    @pytest.mark.parametrize("value", ["KING", "+king", "-KING^", "pawn^"])
    def test_exactly_one_state(self, value):
        name = PieceName(value)
        assert [name.is_enhanced, name.is_diminished, name.is_normal].count(True) == 1

    @pytest.mark.parametrize("value", ["KING", "+king", "-KING^", "pawn^"])
    def test_round_trip(self, value):
        assert str(PieceName.parse(value)) == value


class TestPieceNameCompare:
    """测试比较"""

    def test_same_base_name(self):
        king = PieceName("KING")
        assert king.same_base_name(PieceName("king"))
        assert king.same_base_name(PieceName("+king^"))
        assert not king.same_base_name(PieceName("QUEEN"))

    def test_same_base_name_other_kind(self):
        assert not PieceName("KING").same_base_name("KING")

    def test_equality_is_exact(self):
        assert PieceName("KING") == PieceName("KING")
        assert PieceName("KING") != PieceName("king")
        assert PieceName("KING") != PieceName("+KING")
        assert PieceName("KING") != PieceName("KING^")
        assert PieceName("KING") != "KING"

    def test_hash(self):
        assert hash(PieceName("KING")) == hash(PieceName("KING"))
        assert len({PieceName("KING"), PieceName("KING"), PieceName("king")}) == 2

    def test_immutable(self):
        name = PieceName("KING")
        with pytest.raises(AttributeError):
            name.value = "QUEEN"
