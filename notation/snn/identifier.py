"""
SNN 风格标识（简化版）

只保存原始字符串，阵营按需计算：字符串与其大写形式相同即为先手。
"""

from __future__ import annotations

from dataclasses import dataclass

from notation.errors import InvalidFormat
from notation.logging import logger
from notation.snn.style import ERROR_INVALID_SNN, STYLE_PATTERN, Style, normalize_name
from notation.types import Side


@dataclass(frozen=True)
class StyleIdentifier:
    """风格标识（不可变），相等性按原始字符串比较"""

    identifier: str

    def __post_init__(self) -> None:
        if not self.valid(self.identifier):
            logger.debug(f"Rejected SNN identifier: {self.identifier!r}")
            raise InvalidFormat(ERROR_INVALID_SNN.format(self.identifier))

    @classmethod
    def parse(cls, snn_string: str) -> StyleIdentifier:
        return cls(snn_string)

    @classmethod
    def valid(cls, snn_string: object) -> bool:
        return isinstance(snn_string, str) and STYLE_PATTERN.fullmatch(snn_string) is not None

    def __str__(self) -> str:
        return self.identifier

    @property
    def is_uppercase(self) -> bool:
        return self.identifier == self.identifier.upper()

    @property
    def is_lowercase(self) -> bool:
        return self.identifier == self.identifier.lower()

    @property
    def is_first_player(self) -> bool:
        return self.is_uppercase

    @property
    def is_second_player(self) -> bool:
        return not self.is_uppercase

    @property
    def side(self) -> Side:
        return Side.FIRST if self.is_first_player else Side.SECOND

    def flip(self) -> StyleIdentifier:
        # 数字没有大小写，swapcase 不会破坏格式
        return StyleIdentifier(self.identifier.swapcase())

    def to_style(self) -> Style:
        """转换为名称 + 阵营形式"""
        return Style(normalize_name(self.identifier), self.side)
