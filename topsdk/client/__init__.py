"""网关客户端。

提供签名、请求发送和响应处理。
"""

from .client import RequestHeaders, RequestParams, TopClient
from .response import (
    FailureDetection,
    JsonObject,
    JsonValue,
    check_response,
    extract_response_path,
    parse_response_body,
    project_response,
)
from .signing import build_sign_base_string, sign

__all__ = [
    "FailureDetection",
    "JsonObject",
    "JsonValue",
    "RequestHeaders",
    "RequestParams",
    "TopClient",
    "build_sign_base_string",
    "check_response",
    "extract_response_path",
    "parse_response_body",
    "project_response",
    "sign",
]
