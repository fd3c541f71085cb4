"""
SNN 长名称测试
"""

import pytest

from notation import snn
from notation.errors import InvalidFormat
from notation.snn.name import StyleName


class TestStyleName:
    """测试 StyleName"""

    @pytest.mark.parametrize("value", ["Chess", "Shogi", "Xiangqi", "Chess960", "A", "M1"])
    def test_valid(self, value):
        assert StyleName.valid(value)
        assert snn.valid(value)
        assert str(snn.parse(value)) == value

    @pytest.mark.parametrize(
        "value", ["", "chess", "CHESS", "ChEss", "1Chess", "Chess-960", " Chess", "Chess\n"]
    )
    def test_invalid(self, value):
        assert not StyleName.valid(value)
        with pytest.raises(InvalidFormat):
            StyleName.parse(value)

    def test_non_string(self):
        assert not StyleName.valid(None)
        assert not StyleName.valid(960)
        with pytest.raises(InvalidFormat):
            StyleName(None)

    def test_equality(self):
        assert snn.name("Chess") == StyleName("Chess")
        assert StyleName("Chess") != StyleName("Shogi")
        assert StyleName("Chess") != "Chess"
        assert len({StyleName("Chess"), StyleName("Chess")}) == 1
