"""日志配置模块

基于 loguru 的日志配置,日志统一输出到 stderr,报告本身输出到 stdout。

Examples:
    基础使用::

        from packages.file_consistency.logger import setup_logger

        log = setup_logger("file-audit", level="DEBUG")
        log.info("开始审计")
"""

import sys

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def setup_logger(
    name: str,
    level: str = "INFO",
    format_string: str | None = None,
    colorize: bool | None = None,
):
    """配置并返回 logger

    会移除之前添加的所有 handler,重复调用不会产生重复输出。

    Args:
        name: logger 名称,绑定到 extra["name"]
        level: 日志级别(DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: 自定义格式字符串(可选)
        colorize: 是否着色, None 表示根据终端自动判断

    Returns:
        配置好的 loguru logger

    Examples:
        >>> log = setup_logger("file-audit", level="DEBUG")
        >>> log.debug("调试信息")
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format=format_string or DEFAULT_FORMAT,
        level=level,
        colorize=colorize,
    )

    return logger.bind(name=name)
