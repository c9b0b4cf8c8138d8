"""客户端配置。

- ClientConfig: 客户端构造参数，创建后不可修改
- TopSettings: 基于 pydantic-settings 的环境变量配置，供宿主应用使用

注意：TopClient 本身不读取环境变量，只有显式调用
TopClient.from_settings 时才会使用 TopSettings。
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from topsdk.constants import DEFAULT_URL


class ClientConfig(BaseModel):
    """网关客户端配置（Pydantic，不可变）。"""

    url: str = Field(
        default=DEFAULT_URL,
        description="网关地址"
    )
    app_key: str = Field(
        default="",
        description="应用 appKey"
    )
    app_secret: str = Field(
        default="",
        repr=False,
        description="应用 appSecret"
    )
    target_app_key: str = Field(
        default="",
        description="目标应用 appKey"
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="请求超时时间（秒）"
    )

    model_config = ConfigDict(frozen=True)


class TopSettings(BaseSettings):
    """网关配置。

    环境变量前缀: TOP_
    示例: TOP_APP_KEY, TOP_APP_SECRET, TOP_URL, TOP_TARGET_APP_KEY
    """

    url: str = Field(
        default=DEFAULT_URL,
        description="网关地址"
    )
    app_key: str = Field(
        default="",
        description="应用 appKey"
    )
    app_secret: str = Field(
        default="",
        repr=False,
        description="应用 appSecret"
    )
    target_app_key: str = Field(
        default="",
        description="目标应用 appKey"
    )
    timeout: float = Field(
        default=30.0,
        description="请求超时时间（秒）"
    )

    model_config = SettingsConfigDict(
        env_prefix="TOP_",
        case_sensitive=False,
    )

    def to_client_config(self) -> ClientConfig:
        """转换为客户端配置。"""
        return ClientConfig(
            url=self.url,
            app_key=self.app_key,
            app_secret=self.app_secret,
            target_app_key=self.target_app_key,
            timeout=self.timeout,
        )


__all__ = [
    "ClientConfig",
    "TopSettings",
]
