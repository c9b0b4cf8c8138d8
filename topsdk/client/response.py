"""响应解析、失败检测和键投影。"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
import json
from typing import Any, Union

from topsdk.common.exceptions import ResponseFormatError, ServiceError

JsonValue = Union[str, int, float, bool, None, "JsonObject", list["JsonValue"]]
JsonObject = dict[str, JsonValue]


class FailureDetection(str, Enum):
    """失败检测策略。

    - NULL_BODY: 响应解析结果为 null 视为错误
    - FLAG_FAILURE: response.flag == "failure" 视为业务失败
    - BOTH: 两者都检查
    """

    NULL_BODY = "null_body"
    FLAG_FAILURE = "flag_failure"
    BOTH = "both"


def parse_response_body(text: str) -> JsonValue:
    """把响应文本解析为 JSON。

    Raises:
        ResponseFormatError: 响应为空或不是合法 JSON
    """
    if not text or not text.strip():
        raise ResponseFormatError("empty response", body_text=text)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ResponseFormatError(f"invalid JSON response: {exc}", body_text=text) from exc


def check_response(body: JsonValue, detection: FailureDetection = FailureDetection.BOTH) -> JsonValue:
    """检查响应是否表示失败，成功时原样返回。

    Raises:
        ResponseFormatError: 响应为 null
        ServiceError: response.flag == "failure"
    """
    if detection in (FailureDetection.NULL_BODY, FailureDetection.BOTH) and body is None:
        raise ResponseFormatError("empty response")

    if detection in (FailureDetection.FLAG_FAILURE, FailureDetection.BOTH) and isinstance(body, dict):
        envelope = body.get("response")
        if isinstance(envelope, dict) and envelope.get("flag") == "failure":
            raise ServiceError(str(envelope.get("message", "")), envelope=envelope)

    return body


def project_response(body: JsonValue, keys: Iterable[str] | None) -> JsonValue:
    """只保留指定的顶层键，不存在的键直接忽略。keys 为空时返回完整响应。"""
    keys = list(keys or [])
    if not keys:
        return body
    if not isinstance(body, dict):
        raise ResponseFormatError(
            f"cannot select keys from a {type(body).__name__} response"
        )
    return {key: body[key] for key in keys if key in body}


def extract_response_path(body: JsonValue, names: Sequence[str] | None) -> Any:
    """按路径逐层取值，任一层不存在返回 None。"""
    result: Any = body
    for name in names or []:
        if not isinstance(result, dict) or name not in result:
            return None
        result = result[name]
    return result


__all__ = [
    "FailureDetection",
    "JsonObject",
    "JsonValue",
    "check_response",
    "extract_response_path",
    "parse_response_body",
    "project_response",
]
