"""PNN 字段格式验证"""

from __future__ import annotations

import re

PNN_FIELDS_PATTERN = re.compile(r"[-+]?[A-Za-z]'?")


def valid(pnn_string: object) -> bool:
    """检查字符串是否为合法 PNN（不抛异常）

    非字符串输入（包括 None）直接返回 False
    """
    if not isinstance(pnn_string, str):
        return False
    return PNN_FIELDS_PATTERN.fullmatch(pnn_string) is not None
