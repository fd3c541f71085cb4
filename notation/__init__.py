"""
棋子与风格记法

- PNN (Piece Name Notation)：棋子长名称、单字母棋子、字段字典
- SNN (Style Name Notation)：风格长名称、带阵营的风格标识

所有值对象不可变，解析失败抛出 InvalidFormat，构造参数错误抛出 InvalidArgument。
"""

from notation.errors import InvalidArgument, InvalidFormat, NotationError
from notation.logging import setup_logging
from notation.pin import PinPiece
from notation.pnn import Piece, PieceFields, PieceName
from notation.snn import Style, StyleIdentifier, StyleName
from notation.types import PieceType, Side, State

__all__ = [
    "NotationError",
    "InvalidFormat",
    "InvalidArgument",
    "setup_logging",
    "Side",
    "State",
    "PieceType",
    "PinPiece",
    "Piece",
    "PieceFields",
    "PieceName",
    "Style",
    "StyleIdentifier",
    "StyleName",
]
