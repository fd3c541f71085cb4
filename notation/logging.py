"""
中央日志配置

库内部统一使用 loguru 的 logger。作为库被导入时默认静默，
由 CLI 或调用方通过 setup_logging() 打开。
"""

import sys
from pathlib import Path

from loguru import logger

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{line} - {message}"

logger.disable("notation")


def setup_logging(level: str = DEFAULT_LOG_LEVEL, log_file: Path | str | None = None) -> None:
    """配置日志输出

    Args:
        level: 日志级别（DEBUG/INFO/WARNING/...）
        log_file: 可选的日志文件路径，按 10 MB 轮转，保留 7 天
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper(), format=LOG_FORMAT)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            path,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )

    logger.enable("notation")
    logger.debug(f"Logging configured: level={level.upper()}, file={log_file}")


__all__ = ["logger", "setup_logging", "DEFAULT_LOG_LEVEL", "LOG_FORMAT"]
