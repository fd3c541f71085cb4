"""
解析结果模型

Pydantic models for JSON output.
"""

from __future__ import annotations

from pydantic import BaseModel

from notation.pnn import Piece, PieceFields, PieceName
from notation.snn import Style, StyleName
from notation.types import Side, State


class PieceInfo(BaseModel):
    """单字母棋子"""

    notation: str
    type: str
    side: Side
    state: State
    native: bool
    letter: str
    prefix: str
    suffix: str

    @classmethod
    def from_piece(cls, piece: Piece) -> PieceInfo:
        return cls(
            notation=str(piece),
            type=piece.type.value,
            side=piece.side,
            state=piece.state,
            native=piece.native,
            letter=piece.letter,
            prefix=piece.prefix,
            suffix=piece.suffix,
        )


class PieceNameInfo(BaseModel):
    """棋子长名称"""

    notation: str
    base_name: str
    side: Side
    state: State
    terminal: bool

    @classmethod
    def from_name(cls, name: PieceName) -> PieceNameInfo:
        return cls(
            notation=str(name),
            base_name=name.base_name,
            side=name.side,
            state=name.state,
            terminal=name.is_terminal,
        )


class FieldsInfo(BaseModel):
    """字段字典"""

    notation: str
    letter: str
    prefix: str | None = None
    suffix: str | None = None

    @classmethod
    def from_fields(cls, notation: str, fields: PieceFields) -> FieldsInfo:
        return cls(notation=notation, **fields)


class StyleInfo(BaseModel):
    """带阵营的风格"""

    notation: str
    name: str
    side: Side

    @classmethod
    def from_style(cls, style: Style) -> StyleInfo:
        return cls(notation=str(style), name=style.name, side=style.side)


class StyleNameInfo(BaseModel):
    """风格长名称"""

    notation: str

    @classmethod
    def from_name(cls, name: StyleName) -> StyleNameInfo:
        return cls(notation=str(name))


class ValidationResult(BaseModel):
    """单个字符串的校验结果"""

    kind: str
    value: str
    valid: bool
