"""PNN 字段序列化"""

from __future__ import annotations

import re

from notation.errors import InvalidArgument

VALID_PREFIXES = ("+", "-", None)
VALID_SUFFIXES = ("'", None)

LETTER_PATTERN = re.compile(r"[A-Za-z]")

ERROR_INVALID_LETTER = "Letter must be a single ASCII letter (a-z or A-Z): {!r}"
ERROR_INVALID_PREFIX = "Invalid prefix: {!r}. Must be '+', '-', or None."
ERROR_INVALID_SUFFIX = "Invalid suffix: {!r}. Must be \"'\" or None."


def dump(*, letter: str, prefix: str | None = None, suffix: str | None = None) -> str:
    """字段序列化为 PNN 字符串

    Args:
        letter: 单个 ASCII 字母
        prefix: ``+``、``-`` 或 None
        suffix: ``'`` 或 None

    Raises:
        InvalidArgument: 任一字段不合法

    Examples:
        >>> dump(letter="k", suffix="'")
        "k'"
    """
    if not isinstance(letter, str) or LETTER_PATTERN.fullmatch(letter) is None:
        raise InvalidArgument(ERROR_INVALID_LETTER.format(letter))
    if prefix not in VALID_PREFIXES:
        raise InvalidArgument(ERROR_INVALID_PREFIX.format(prefix))
    if suffix not in VALID_SUFFIXES:
        raise InvalidArgument(ERROR_INVALID_SUFFIX.format(suffix))

    return f"{prefix or ''}{letter}{suffix or ''}"
