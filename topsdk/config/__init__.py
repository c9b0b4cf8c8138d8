"""配置管理。"""

from .settings import ClientConfig, TopSettings

__all__ = [
    "ClientConfig",
    "TopSettings",
]
