"""
SNN 风格标识

格式：``[A-Z][A-Z0-9]*`` 或 ``[a-z][a-z0-9]*``（不允许大小写混用）

- 全大写 = 先手，全小写 = 后手
- 名称统一为首字母大写：``CHESS960`` -> ``Chess960``
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from notation.errors import InvalidArgument, InvalidFormat
from notation.logging import logger
from notation.types import Side

STYLE_PATTERN = re.compile(r"[A-Z][A-Z0-9]*|[a-z][a-z0-9]*")
PROPER_NAME_PATTERN = re.compile(r"[A-Z][a-z0-9]*")

ERROR_INVALID_SNN = "Invalid SNN string: {!r}"
ERROR_INVALID_NAME = (
    "Name must be a string with proper capitalization "
    "(first letter uppercase, rest lowercase), got: {!r}"
)
ERROR_INVALID_SIDE = "Side must be Side.FIRST or Side.SECOND, got: {!r}"


@dataclass(frozen=True)
class Style:
    """风格（名称 + 阵营，不可变）"""

    name: str
    side: Side

    def __post_init__(self) -> None:
        self.validate_name(self.name)
        self.validate_side(self.side)

    @staticmethod
    def validate_name(name: object) -> None:
        if not isinstance(name, str) or PROPER_NAME_PATTERN.fullmatch(name) is None:
            raise InvalidArgument(ERROR_INVALID_NAME.format(name))

    @staticmethod
    def validate_side(side: object) -> None:
        if not isinstance(side, Side):
            raise InvalidArgument(ERROR_INVALID_SIDE.format(side))

    @classmethod
    def valid(cls, snn_string: object) -> bool:
        return isinstance(snn_string, str) and STYLE_PATTERN.fullmatch(snn_string) is not None

    @classmethod
    def parse(cls, snn_string: str) -> Style:
        """解析 SNN 字符串

        Raises:
            InvalidFormat: 格式错误
        """
        if not cls.valid(snn_string):
            logger.debug(f"Rejected SNN style: {snn_string!r}")
            raise InvalidFormat(ERROR_INVALID_SNN.format(snn_string))

        side = Side.FIRST if snn_string == snn_string.upper() else Side.SECOND
        return cls(normalize_name(snn_string), side)

    def __str__(self) -> str:
        return self.side.apply_case(self.name)

    def flip(self) -> Style:
        return Style(self.name, self.side.opposite)

    def with_name(self, new_name: str) -> Style:
        self.validate_name(new_name)
        if new_name == self.name:
            return self
        return Style(new_name, self.side)

    def with_side(self, new_side: Side) -> Style:
        self.validate_side(new_side)
        if new_side == self.side:
            return self
        return Style(self.name, new_side)

    @property
    def is_first_player(self) -> bool:
        return self.side == Side.FIRST

    @property
    def is_second_player(self) -> bool:
        return self.side == Side.SECOND

    def same_name(self, other: object) -> bool:
        return isinstance(other, Style) and self.name == other.name

    def same_side(self, other: object) -> bool:
        return isinstance(other, Style) and self.side == other.side


def normalize_name(identifier: str) -> str:
    """转为首字母大写、其余小写"""
    lowered = identifier.lower()
    return lowered[:1].upper() + lowered[1:]
