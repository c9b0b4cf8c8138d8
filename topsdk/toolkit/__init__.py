"""工具包。

- crypto: 摘要计算
- utils: 时间格式化、参数检查等通用函数
- http: HTTP 传输
"""

from .crypto import hash, md5, sha1
from .utils import (
    check_required,
    format_datetime,
    get_api_response_name,
    get_local_ip_address,
    stringify_value,
)

__all__ = [
    "check_required",
    "format_datetime",
    "get_api_response_name",
    "get_local_ip_address",
    "hash",
    "md5",
    "sha1",
    "stringify_value",
]
