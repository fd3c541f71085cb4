"""
核心类型定义

阵营、状态和棋子类型（A-Z 共 26 种）
"""

from enum import Enum

from notation.errors import InvalidArgument


class Side(Enum):
    """阵营（大写 = 先手，小写 = 后手）"""

    FIRST = "first"
    SECOND = "second"

    @property
    def opposite(self) -> "Side":
        """获取对方阵营"""
        return Side.SECOND if self == Side.FIRST else Side.FIRST

    def apply_case(self, text: str) -> str:
        """按阵营转换大小写"""
        return text.upper() if self == Side.FIRST else text.lower()


class State(Enum):
    """棋子状态"""

    # 普通 - 无前缀
    NORMAL = "normal"
    # 增强 - 前缀 +
    ENHANCED = "enhanced"
    # 削弱 - 前缀 -
    DIMINISHED = "diminished"

    @property
    def prefix(self) -> str:
        """状态对应的前缀"""
        return _STATE_TO_PREFIX[self]

    @classmethod
    def from_prefix(cls, prefix: str | None) -> "State":
        """从前缀解析状态（None 或空串表示普通）"""
        state = _PREFIX_TO_STATE.get(prefix or "")
        if state is None:
            raise InvalidArgument(f"Invalid state prefix: {prefix!r}")
        return state


_STATE_TO_PREFIX: dict[State, str] = {
    State.NORMAL: "",
    State.ENHANCED: "+",
    State.DIMINISHED: "-",
}

_PREFIX_TO_STATE: dict[str, State] = {v: k for k, v in _STATE_TO_PREFIX.items()}


class PieceType(Enum):
    """棋子类型：A-Z 单个字母，身份统一用大写"""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"  # noqa: E741
    J = "J"
    K = "K"
    L = "L"
    M = "M"
    N = "N"
    O = "O"  # noqa: E741
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"

    @classmethod
    def from_letter(cls, letter: str) -> "PieceType":
        """从字母解析类型（大小写均可）"""
        if isinstance(letter, str) and len(letter) == 1 and letter.isascii() and letter.isalpha():
            return cls(letter.upper())
        raise InvalidArgument(f"Type must be a single ASCII letter (A-Z or a-z), got: {letter!r}")
