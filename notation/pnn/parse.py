"""PNN 字符串解析为字段字典"""

from __future__ import annotations

import re
from typing import TypedDict

from notation.errors import InvalidFormat
from notation.logging import logger

PNN_FIELDS_PATTERN = re.compile(r"(?P<prefix>[-+])?(?P<letter>[A-Za-z])(?P<suffix>')?")

ERROR_INVALID_PNN = "Invalid PNN string: {!r}"

# 输出顺序
COMPONENT_KEYS = ("letter", "prefix", "suffix")


class PieceFields(TypedDict, total=False):
    """解析结果：只包含实际出现的字段"""

    letter: str
    prefix: str
    suffix: str


def parse(pnn_string: str) -> PieceFields:
    """解析 PNN 字符串

    Args:
        pnn_string: PNN 字符串

    Returns:
        字段字典，例如 ``{"letter": "k", "prefix": "+", "suffix": "'"}``

    Raises:
        InvalidFormat: 格式错误

    Examples:
        >>> parse("k")
        {'letter': 'k'}
        >>> parse("+k'")
        {'letter': 'k', 'prefix': '+', 'suffix': "'"}
    """
    match = PNN_FIELDS_PATTERN.fullmatch(pnn_string) if isinstance(pnn_string, str) else None
    if match is None:
        logger.debug(f"Rejected PNN fields: {pnn_string!r}")
        raise InvalidFormat(ERROR_INVALID_PNN.format(pnn_string))

    fields = PieceFields()
    for key in COMPONENT_KEYS:
        value = match[key]
        if value:
            fields[key] = value
    return fields


def safe_parse(pnn_string: str) -> PieceFields | None:
    """解析 PNN 字符串，格式错误时返回 None"""
    try:
        return parse(pnn_string)
    except InvalidFormat:
        return None
