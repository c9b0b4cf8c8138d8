"""SDK 异常定义。

所有异常都继承自 TopSDKError，调用方可以统一捕获。

异常类型：
- ConfigurationError: 客户端配置错误（缺少 appKey / appSecret）
- ParameterMissingError: 缺少必填参数（例如 method）
- UnsupportedFeatureError: 不支持的功能（文件上传 / multipart）
- TransportError: HTTP 传输层错误
- ResponseFormatError: 响应不是合法 JSON 或为空
- ServiceError: 网关返回了结构化的失败信息
"""

from __future__ import annotations

from typing import Any


class TopSDKError(Exception):
    """SDK 异常基类。

    Attributes:
        message: 错误消息
    """

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """转换为字典。"""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} message={self.message}>"


class ConfigurationError(TopSDKError):
    """客户端配置错误。"""

    def __init__(self, message: str = "appKey or appSecret need!") -> None:
        super().__init__(message)


class ParameterMissingError(TopSDKError):
    """缺少必填参数。

    Attributes:
        key: 缺失的参数名
    """

    def __init__(self, key: str, message: str | None = None) -> None:
        super().__init__(message or f"`{key}` required")
        self.key = key

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["key"] = self.key
        return data


class UnsupportedFeatureError(TopSDKError):
    """不支持的功能。"""

    pass


class TransportError(TopSDKError):
    """HTTP 传输层错误基类。"""

    pass


class ResponseFormatError(TopSDKError):
    """响应格式错误。

    Attributes:
        body_text: 原始响应文本（可能为空）
    """

    def __init__(self, message: str = "empty response", body_text: str | None = None) -> None:
        super().__init__(message)
        self.body_text = body_text


class ServiceError(TopSDKError):
    """网关返回的业务失败。

    Attributes:
        envelope: 失败信息所在的完整对象，便于排查
    """

    def __init__(self, message: str, envelope: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.envelope = envelope or {}

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["envelope"] = self.envelope
        return data

    def __str__(self) -> str:
        if self.envelope:
            return f"Request error: {self.message} ({self.envelope})"
        return f"Request error: {self.message}"


__all__ = [
    "ConfigurationError",
    "ParameterMissingError",
    "ResponseFormatError",
    "ServiceError",
    "TopSDKError",
    "TransportError",
    "UnsupportedFeatureError",
]
