"""
SNN (Style Name Notation)

风格的几种记法：
- 长名称：``Chess``、``Chess960`` -> StyleName
- 单方标识：``CHESS``（先手）、``chess``（后手） -> Style / StyleIdentifier
"""

from __future__ import annotations

from notation.snn.identifier import StyleIdentifier
from notation.snn.name import StyleName
from notation.snn.style import Style


def valid(snn_string: object) -> bool:
    """检查是否为合法 SNN 长名称"""
    return StyleName.valid(snn_string)


def parse(snn_string: str) -> StyleName:
    """解析 SNN 长名称"""
    return StyleName.parse(snn_string)


def name(value: str) -> StyleName:
    """创建 SNN 长名称"""
    return StyleName(value)


def style(snn_string: str) -> Style:
    """解析带阵营的风格标识"""
    return Style.parse(snn_string)


def identifier(snn_string: str) -> StyleIdentifier:
    """解析风格标识（只保存原始字符串）"""
    return StyleIdentifier.parse(snn_string)


__all__ = [
    "StyleName",
    "Style",
    "StyleIdentifier",
    "valid",
    "parse",
    "name",
    "style",
    "identifier",
]
