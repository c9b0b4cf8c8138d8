"""日志管理 - 统一的日志配置。

提供：
- 统一的日志配置
- 类专用日志器

SDK 本身不会在导入时添加任何输出，由调用方通过 setup_logging 或
loguru 自行配置。setup_logging 只管理自己添加的 sink，不影响宿主应用
已经添加的 sink。
"""

from __future__ import annotations

import sys

from loguru import logger

# 作为库使用时默认静默，调用 setup_logging 后开启
logger.disable("topsdk")

# setup_logging 添加的 sink
_handler_ids: list[int] = []


def _remove_own_handlers() -> None:
    while _handler_ids:
        logger.remove(_handler_ids.pop())


def setup_logging(log_level: str = "INFO", log_file: str | None = None) -> None:
    """设置日志配置。

    重复调用会替换上一次添加的 sink。

    Args:
        log_level: 日志级别（默认：INFO）
        log_file: 日志文件路径（可选）
    """
    log_level = log_level.upper()

    _remove_own_handlers()
    logger.enable("topsdk")

    # 控制台输出
    _handler_ids.append(logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True,
    ))

    # 文件输出
    if log_file:
        _handler_ids.append(logger.add(
            log_file,
            rotation="00:00",
            retention="7 days",
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            encoding="utf-8",
            enqueue=True,
        ))

    logger.info(f"日志系统初始化完成，级别: {log_level}")


def teardown_logging() -> None:
    """移除 setup_logging 添加的 sink，并恢复默认静默。"""
    _remove_own_handlers()
    logger.disable("topsdk")


class LoggerMixin:
    """日志混入类。

    使用示例:
        class MyClient(LoggerMixin):
            def do_something(self):
                self.logger.info("执行操作")
    """

    @property
    def logger(self):
        """获取类专用的日志器。"""
        class_name = self.__class__.__name__
        module_name = self.__class__.__module__
        return logger.bind(name=f"{module_name}.{class_name}")


__all__ = [
    "LoggerMixin",
    "logger",
    "setup_logging",
    "teardown_logging",
]
