"""请求签名。

签名串 = secret + key1 + value1 + key2 + value2 + ... + secret，
key 按码点升序排列，对签名串做 MD5 后取大写 hex。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from topsdk.toolkit.crypto import md5
from topsdk.toolkit.utils import stringify_value

SIGN_KEY = "sign"


def build_sign_base_string(params: Mapping[str, Any], secret: str) -> str:
    """构建签名串。

    sign 本身和值为 None 的参数不参与签名。
    """
    parts = [secret]
    for key in sorted(params):
        value = params[key]
        if key == SIGN_KEY or value is None:
            continue
        parts.append(key)
        parts.append(stringify_value(value))
    parts.append(secret)
    return "".join(parts)


def sign(params: Mapping[str, Any], secret: str) -> str:
    """计算签名（大写 hex MD5）。"""
    return md5(build_sign_base_string(params, secret)).upper()


__all__ = [
    "SIGN_KEY",
    "build_sign_base_string",
    "sign",
]
