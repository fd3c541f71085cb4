"""
记法错误类型

所有错误都继承自 ValueError，调用方用 ``except ValueError`` 也能捕获。
"""


class NotationError(ValueError):
    """记法相关错误的基类"""


class InvalidFormat(NotationError):
    """字符串不符合记法语法"""


class InvalidArgument(NotationError):
    """构造参数超出取值范围（类型、阵营、状态、派生标记、名称）"""
