"""网关协议常量。"""

from __future__ import annotations

DEFAULT_URL = "http://gw.api.taobao.com/router/rest"

API_VERSION = "2.0"
FORMAT = "json"
SIGN_METHOD = "md5"
PARTNER_ID = "top-sdk-deno-20230905"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# 以此开头的参数值表示文件上传
FILE_PARAM_PREFIX = "@"

__all__ = [
    "API_VERSION",
    "DEFAULT_URL",
    "FILE_PARAM_PREFIX",
    "FORMAT",
    "FORM_CONTENT_TYPE",
    "PARTNER_ID",
    "SIGN_METHOD",
]
