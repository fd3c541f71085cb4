"""
PNN 长名称（Piece Name Notation）

格式：``[+-]?([A-Z]+|[a-z]+)\\^?``

- 前缀：``+`` 增强，``-`` 削弱，无前缀为普通
- 字母串必须同大小写：全大写 = 先手，全小写 = 后手
- 后缀 ``^``：终局标记

示例：``KING``、``+queen``、``-ROOK^``
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from notation.errors import InvalidFormat
from notation.logging import logger
from notation.types import Side, State

PNN_PATTERN = re.compile(r"(?P<state>[+-]?)(?P<base_name>[A-Z]+|[a-z]+)(?P<terminal>\^?)")

ERROR_INVALID_NAME = "Invalid PNN string: {!r}"


@dataclass(frozen=True)
class PieceName:
    """棋子长名称（不可变）

    只保存原始字符串，其余属性每次按正则重新计算。
    相等性区分大小写和修饰符：``KING`` != ``king`` != ``+KING`` != ``KING^``
    """

    value: str

    def __post_init__(self) -> None:
        if not self.valid(self.value):
            logger.debug(f"Rejected PNN name: {self.value!r}")
            raise InvalidFormat(ERROR_INVALID_NAME.format(self.value))

    @classmethod
    def parse(cls, pnn_string: str) -> PieceName:
        return cls(pnn_string)

    @classmethod
    def valid(cls, pnn_string: object) -> bool:
        """检查是否为合法 PNN 名称（不抛异常）"""
        return isinstance(pnn_string, str) and PNN_PATTERN.fullmatch(pnn_string) is not None

    def __str__(self) -> str:
        return self.value

    def _match(self) -> re.Match[str]:
        match = PNN_PATTERN.fullmatch(self.value)
        assert match is not None
        return match

    @property
    def base_name(self) -> str:
        """去掉修饰符后的字母串"""
        return self._match()["base_name"]

    @property
    def state(self) -> State:
        return State.from_prefix(self._match()["state"])

    @property
    def side(self) -> Side:
        return Side.FIRST if self.base_name.isupper() else Side.SECOND

    @property
    def is_enhanced(self) -> bool:
        return self.state == State.ENHANCED

    @property
    def is_diminished(self) -> bool:
        return self.state == State.DIMINISHED

    @property
    def is_normal(self) -> bool:
        return self.state == State.NORMAL

    @property
    def is_terminal(self) -> bool:
        """是否带终局标记 ``^``"""
        return self._match()["terminal"] == "^"

    @property
    def is_first_player(self) -> bool:
        return self.side == Side.FIRST

    @property
    def is_second_player(self) -> bool:
        return self.side == Side.SECOND

    def same_base_name(self, other: object) -> bool:
        """忽略大小写和修饰符比较基础名称

        ``KING`` 与 ``king``、``+king^`` 都视为同名
        """
        if not isinstance(other, PieceName):
            return False
        return self.base_name.lower() == other.base_name.lower()
