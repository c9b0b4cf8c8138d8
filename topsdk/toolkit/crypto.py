"""摘要工具。

支持 MD5 / SHA-1，输出 hex 或 base64。
"""

from __future__ import annotations

import base64
import hashlib
import json
from typing import Any, Literal

HashMethod = Literal["md5", "sha1"]
HashFormat = Literal["hex", "base64"]

_METHODS = {
    "md5": hashlib.md5,
    "sha1": hashlib.sha1,
    "sha-1": hashlib.sha1,
}


def _to_bytes(value: Any) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    raise TypeError(f"Unsupported type: {type(value).__name__}")


def hash(method: str, value: Any, fmt: HashFormat = "hex") -> str:  # noqa: A001
    """计算摘要。

    Args:
        method: 摘要算法，md5 或 sha1（不区分大小写）
        value: 字符串（按 UTF-8 编码）、字节或可 JSON 序列化的对象
        fmt: 输出格式，hex 或 base64，默认 hex

    Returns:
        str: 摘要字符串（hex 为小写）

    Raises:
        ValueError: 不支持的算法或输出格式
        TypeError: 不支持的数据类型
    """
    factory = _METHODS.get(method.lower())
    if factory is None:
        raise ValueError(f"Unsupported hash method: {method}")

    digest = factory(_to_bytes(value)).digest()
    if fmt == "hex":
        return digest.hex()
    if fmt == "base64":
        return base64.b64encode(digest).decode("ascii")
    raise ValueError(f"Unsupported hash format: {fmt}")


def md5(value: Any, fmt: HashFormat = "hex") -> str:
    """MD5 摘要。"""
    return hash("md5", value, fmt)


def sha1(value: Any, fmt: HashFormat = "hex") -> str:
    """SHA-1 摘要。"""
    return hash("sha1", value, fmt)


__all__ = [
    "HashFormat",
    "HashMethod",
    "hash",
    "md5",
    "sha1",
]
