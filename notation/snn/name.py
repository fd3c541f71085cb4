"""
SNN 长名称（Style Name Notation）

格式：``[A-Z][a-z0-9]*``，首字母大写，其余为小写字母或数字。
没有状态、终局标记或阵营的概念。

示例：``Chess``、``Shogi``、``Chess960``
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from notation.errors import InvalidFormat
from notation.logging import logger

SNN_PATTERN = re.compile(r"[A-Z][a-z0-9]*")

ERROR_INVALID_NAME = "Invalid SNN string: {!r}"


@dataclass(frozen=True)
class StyleName:
    """风格长名称（不可变）"""

    value: str

    def __post_init__(self) -> None:
        if not self.valid(self.value):
            logger.debug(f"Rejected SNN name: {self.value!r}")
            raise InvalidFormat(ERROR_INVALID_NAME.format(self.value))

    @classmethod
    def parse(cls, snn_string: str) -> StyleName:
        return cls(snn_string)

    @classmethod
    def valid(cls, snn_string: object) -> bool:
        return isinstance(snn_string, str) and SNN_PATTERN.fullmatch(snn_string) is not None

    def __str__(self) -> str:
        return self.value
