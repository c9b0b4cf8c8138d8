"""topsdk - 开放平台网关 Python SDK。

对指定的远程方法构建签名请求，以表单方式提交，并从 JSON 响应中取出结果。

模块结构：
- common: 最基础层（异常、日志）
- config: 配置（ClientConfig、TopSettings）
- toolkit: 工具包（摘要、时间格式化、HTTP 传输）
- client: 网关客户端（签名、请求、响应处理）
"""

from .client import FailureDetection, TopClient
from .common import (
    ConfigurationError,
    ParameterMissingError,
    ResponseFormatError,
    ServiceError,
    TopSDKError,
    TransportError,
    UnsupportedFeatureError,
    setup_logging,
)
from .config import ClientConfig, TopSettings

__version__ = "0.1.0"
__all__ = [
    "ClientConfig",
    "ConfigurationError",
    "FailureDetection",
    "ParameterMissingError",
    "ResponseFormatError",
    "ServiceError",
    "TopClient",
    "TopSDKError",
    "TopSettings",
    "TransportError",
    "UnsupportedFeatureError",
    "setup_logging",
]
