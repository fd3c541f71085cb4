"""
PNN 单字母棋子

格式：``[+-]?[A-Za-z]'?``

在 PIN（类型 + 阵营 + 状态）基础上增加派生标记：
- 无后缀：使用本方风格（native）
- 后缀 ``'``：使用对方风格（foreign / derived）

示例：``K``、``+R'``、``-p``
"""

from __future__ import annotations

from dataclasses import dataclass, field

from notation.errors import InvalidArgument, InvalidFormat
from notation.logging import logger
from notation.pin import PinPiece
from notation.types import PieceType, Side, State

FOREIGN_SUFFIX = "'"
NATIVE_SUFFIX = ""

NATIVE = True
FOREIGN = False

ERROR_INVALID_PNN = "Invalid PNN string: {!r}"
ERROR_INVALID_DERIVATION = "Derivation must be True (native) or False (foreign), got: {!r}"


@dataclass(frozen=True)
class Piece:
    """单字母棋子（不可变）

    所有变换都返回新实例；变换无效果时直接返回自身。
    """

    type: PieceType
    side: Side
    state: State = State.NORMAL
    native: bool = NATIVE
    _pin: PinPiece = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        pin = PinPiece(self.type, self.side, self.state)
        self.validate_derivation(self.native)
        object.__setattr__(self, "_pin", pin)

    @staticmethod
    def validate_derivation(native: object) -> None:
        if not isinstance(native, bool):
            raise InvalidArgument(ERROR_INVALID_DERIVATION.format(native))

    # =========================================================================
    # 解析
    # =========================================================================

    @classmethod
    def parse(cls, pnn_string: str) -> Piece:
        """解析 PNN 字符串

        Raises:
            InvalidFormat: 格式错误（包括只有 ``'`` 的情况）
        """
        if not cls.valid(pnn_string):
            logger.debug(f"Rejected PNN piece: {pnn_string!r}")
            raise InvalidFormat(ERROR_INVALID_PNN.format(pnn_string))

        pin_part, native = _split_derivation(pnn_string)
        pin = PinPiece.parse(pin_part)
        return cls(pin.type, pin.side, pin.state, native)

    @classmethod
    def valid(cls, pnn_string: object) -> bool:
        """检查是否为合法 PNN 字符串（不抛异常）"""
        if not isinstance(pnn_string, str) or not pnn_string:
            return False
        pin_part, _ = _split_derivation(pnn_string)
        return PinPiece.valid(pin_part)

    # =========================================================================
    # 输出
    # =========================================================================

    @property
    def letter(self) -> str:
        return self._pin.letter

    @property
    def prefix(self) -> str:
        return self._pin.prefix

    @property
    def suffix(self) -> str:
        return NATIVE_SUFFIX if self.native else FOREIGN_SUFFIX

    def __str__(self) -> str:
        return f"{self.prefix}{self.letter}{self.suffix}"

    # =========================================================================
    # 状态变换
    # =========================================================================

    def enhance(self) -> Piece:
        if self.is_enhanced:
            return self
        return self.with_state(State.ENHANCED)

    def unenhance(self) -> Piece:
        if not self.is_enhanced:
            return self
        return self.with_state(State.NORMAL)

    def diminish(self) -> Piece:
        if self.is_diminished:
            return self
        return self.with_state(State.DIMINISHED)

    def undiminish(self) -> Piece:
        if not self.is_diminished:
            return self
        return self.with_state(State.NORMAL)

    def normalize(self) -> Piece:
        return self.with_state(State.NORMAL)

    # =========================================================================
    # 阵营 / 风格变换
    # =========================================================================

    def flip(self) -> Piece:
        """交换阵营，保留类型、状态和派生标记"""
        return Piece(self.type, self.side.opposite, self.state, self.native)

    def derive(self) -> Piece:
        """改用对方风格"""
        return self.with_derivation(FOREIGN)

    def underive(self) -> Piece:
        """改回本方风格"""
        return self.with_derivation(NATIVE)

    def with_type(self, new_type: PieceType) -> Piece:
        PinPiece.validate_type(new_type)
        if new_type == self.type:
            return self
        return Piece(new_type, self.side, self.state, self.native)

    def with_side(self, new_side: Side) -> Piece:
        PinPiece.validate_side(new_side)
        if new_side == self.side:
            return self
        return Piece(self.type, new_side, self.state, self.native)

    def with_state(self, new_state: State) -> Piece:
        PinPiece.validate_state(new_state)
        if new_state == self.state:
            return self
        return Piece(self.type, self.side, new_state, self.native)

    def with_derivation(self, new_native: bool) -> Piece:
        self.validate_derivation(new_native)
        if new_native == self.native:
            return self
        return Piece(self.type, self.side, self.state, new_native)

    # =========================================================================
    # 查询
    # =========================================================================

    @property
    def is_enhanced(self) -> bool:
        return self._pin.is_enhanced

    @property
    def is_diminished(self) -> bool:
        return self._pin.is_diminished

    @property
    def is_normal(self) -> bool:
        return self._pin.is_normal

    @property
    def is_first_player(self) -> bool:
        return self._pin.is_first_player

    @property
    def is_second_player(self) -> bool:
        return self._pin.is_second_player

    @property
    def is_native(self) -> bool:
        return self.native is NATIVE

    @property
    def is_derived(self) -> bool:
        return self.native is FOREIGN

    is_foreign = is_derived

    def same_type(self, other: object) -> bool:
        return isinstance(other, Piece) and self._pin.same_type(other._pin)

    def same_side(self, other: object) -> bool:
        return isinstance(other, Piece) and self._pin.same_side(other._pin)

    def same_state(self, other: object) -> bool:
        return isinstance(other, Piece) and self._pin.same_state(other._pin)

    def same_style(self, other: object) -> bool:
        return isinstance(other, Piece) and self.native == other.native


def _split_derivation(pnn_string: str) -> tuple[str, bool]:
    """拆出派生后缀，返回 (PIN 部分, 是否本方风格)"""
    if pnn_string.endswith(FOREIGN_SUFFIX):
        return pnn_string[: -len(FOREIGN_SUFFIX)], FOREIGN
    return pnn_string, NATIVE
