"""通用工具函数。"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
import json
import socket
from typing import Any

from topsdk.common.exceptions import ParameterMissingError


def format_datetime(value: datetime, date_sep: str = "-", time_sep: str = ":") -> str:
    """格式化时间为 yyyy-MM-dd HH:mm:ss。

    Args:
        value: 时间（按其自身时区显示，不做转换）
        date_sep: 日期分隔符
        time_sep: 时间分隔符
    """
    return value.strftime(f"%Y{date_sep}%m{date_sep}%d %H{time_sep}%M{time_sep}%S")


def check_required(params: Mapping[str, Any], keys: str | Iterable[str]) -> None:
    """检查必填参数。

    Raises:
        ParameterMissingError: 第一个缺失的参数
    """
    if isinstance(keys, str):
        keys = [keys]

    for key in keys:
        if key not in params:
            raise ParameterMissingError(key)


def get_api_response_name(api_name: str) -> str:
    """根据 API 名称得到响应中的数据键。

    例如 taobao.user.seller.get -> user_seller_get_response
    """
    if api_name.startswith("taobao"):
        api_name = api_name[7:]
    return api_name.replace(".", "_") + "_response"


def _is_usable_ipv4(address: str) -> bool:
    return not address.startswith("127.") and address != "0.0.0.0"


def get_local_ip_address() -> str | None:
    """获取本机第一个非回环 IPv4 地址。

    先取默认路由出口网卡的地址（UDP connect 只选路由，不发送数据），
    没有默认路由时退回到主机名解析结果。都取不到返回 None。
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect(("10.254.254.254", 1))
            address = sock.getsockname()[0]
        if _is_usable_ipv4(address):
            return address
    except OSError:
        # 没有可用路由
        pass

    try:
        infos = socket.getaddrinfo(socket.gethostname(), None, socket.AF_INET)
    except OSError:
        return None

    for info in infos:
        address = info[4][0]
        if _is_usable_ipv4(address):
            return address
    return None


def stringify_value(value: Any) -> str:
    """参数值转换为字符串（签名和表单编码共用）。"""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return str(value)


__all__ = [
    "check_required",
    "format_datetime",
    "get_api_response_name",
    "get_local_ip_address",
    "stringify_value",
]
