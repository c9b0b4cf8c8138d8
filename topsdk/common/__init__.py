"""Common 层模块。

最基础层，提供：
- 异常基类
- 日志系统
"""

from .exceptions import (
    ConfigurationError,
    ParameterMissingError,
    ResponseFormatError,
    ServiceError,
    TopSDKError,
    TransportError,
    UnsupportedFeatureError,
)
from .logging import LoggerMixin, logger, setup_logging, teardown_logging

__all__ = [
    # 异常
    "ConfigurationError",
    "ParameterMissingError",
    "ResponseFormatError",
    "ServiceError",
    "TopSDKError",
    "TransportError",
    "UnsupportedFeatureError",
    # 日志
    "LoggerMixin",
    "logger",
    "setup_logging",
    "teardown_logging",
]
