"""
单字母棋子（类型 + 阵营 + 状态）

格式：``[+-]?[A-Za-z]``

- 字母大小写表示阵营：大写 = 先手，小写 = 后手
- 前缀表示状态：``+`` 增强，``-`` 削弱，无前缀为普通

Piece 在此基础上增加派生标记，类型/阵营/状态相关逻辑全部委托给这里。
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from notation.errors import InvalidArgument, InvalidFormat
from notation.logging import logger
from notation.types import PieceType, Side, State

PIN_PATTERN = re.compile(r"(?P<prefix>[-+])?(?P<letter>[A-Za-z])")

ERROR_INVALID_PIN = "Invalid PIN string: {!r}"
ERROR_INVALID_TYPE = "Type must be a PieceType (A-Z), got: {!r}"
ERROR_INVALID_SIDE = "Side must be Side.FIRST or Side.SECOND, got: {!r}"
ERROR_INVALID_STATE = "State must be State.NORMAL, State.ENHANCED or State.DIMINISHED, got: {!r}"


@dataclass(frozen=True)
class PinPiece:
    """单字母棋子（不可变）"""

    type: PieceType
    side: Side
    state: State = State.NORMAL

    def __post_init__(self) -> None:
        self.validate_type(self.type)
        self.validate_side(self.side)
        self.validate_state(self.state)

    # =========================================================================
    # 校验
    # =========================================================================

    @staticmethod
    def validate_type(piece_type: object) -> None:
        if not isinstance(piece_type, PieceType):
            raise InvalidArgument(ERROR_INVALID_TYPE.format(piece_type))

    @staticmethod
    def validate_side(side: object) -> None:
        if not isinstance(side, Side):
            raise InvalidArgument(ERROR_INVALID_SIDE.format(side))

    @staticmethod
    def validate_state(state: object) -> None:
        if not isinstance(state, State):
            raise InvalidArgument(ERROR_INVALID_STATE.format(state))

    # =========================================================================
    # 解析
    # =========================================================================

    @classmethod
    def valid(cls, pin_string: object) -> bool:
        """检查字符串是否为合法 PIN（不抛异常）"""
        return isinstance(pin_string, str) and PIN_PATTERN.fullmatch(pin_string) is not None

    @classmethod
    def parse(cls, pin_string: str) -> PinPiece:
        """解析 PIN 字符串

        Raises:
            InvalidFormat: 格式错误
        """
        match = PIN_PATTERN.fullmatch(pin_string) if isinstance(pin_string, str) else None
        if match is None:
            logger.debug(f"Rejected PIN string: {pin_string!r}")
            raise InvalidFormat(ERROR_INVALID_PIN.format(pin_string))

        letter = match["letter"]
        return cls(
            PieceType(letter.upper()),
            Side.FIRST if letter.isupper() else Side.SECOND,
            State.from_prefix(match["prefix"]),
        )

    # =========================================================================
    # 输出
    # =========================================================================

    @property
    def letter(self) -> str:
        """字母（大小写由阵营决定）"""
        return self.side.apply_case(self.type.value)

    @property
    def prefix(self) -> str:
        return self.state.prefix

    def __str__(self) -> str:
        return f"{self.prefix}{self.letter}"

    # =========================================================================
    # 查询
    # =========================================================================

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
    def is_first_player(self) -> bool:
        return self.side == Side.FIRST

    @property
    def is_second_player(self) -> bool:
        return self.side == Side.SECOND

    def same_type(self, other: object) -> bool:
        return isinstance(other, PinPiece) and self.type == other.type

    def same_side(self, other: object) -> bool:
        return isinstance(other, PinPiece) and self.side == other.side

    def same_state(self, other: object) -> bool:
        return isinstance(other, PinPiece) and self.state == other.state

    def flip(self) -> PinPiece:
        """交换阵营"""
        return PinPiece(self.type, self.side.opposite, self.state)
