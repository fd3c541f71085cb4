"""
PNN (Piece Name Notation)

棋子的两种记法：
- 长名称：``KING``、``+queen``、``-ROOK^`` -> PieceName
- 单字母：``K``、``+R'``、``-p`` -> Piece，或字段字典 parse_fields()/dump()
"""

from __future__ import annotations

from notation.pnn.dump import dump
from notation.pnn.name import PieceName
from notation.pnn.parse import PieceFields, safe_parse
from notation.pnn.parse import parse as parse_fields
from notation.pnn.piece import Piece
from notation.pnn.validate import valid as valid_fields


def valid(pnn_string: object) -> bool:
    """检查是否为合法 PNN 长名称"""
    return PieceName.valid(pnn_string)


def parse(pnn_string: str) -> PieceName:
    """解析 PNN 长名称"""
    return PieceName.parse(pnn_string)


def name(value: str) -> PieceName:
    """创建 PNN 长名称"""
    return PieceName(value)


def piece(pnn_string: str) -> Piece:
    """解析单字母 PNN 棋子"""
    return Piece.parse(pnn_string)


__all__ = [
    "PieceFields",
    "PieceName",
    "Piece",
    "valid",
    "parse",
    "name",
    "piece",
    "parse_fields",
    "safe_parse",
    "valid_fields",
    "dump",
]
