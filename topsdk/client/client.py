"""网关客户端实现。"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any
from urllib.parse import urlencode

from topsdk.client.response import (
    FailureDetection,
    JsonValue,
    check_response,
    extract_response_path,
    parse_response_body,
    project_response,
)
from topsdk.client.signing import SIGN_KEY, sign
from topsdk.common.exceptions import (
    ConfigurationError,
    ResponseFormatError,
    ServiceError,
    UnsupportedFeatureError,
)
from topsdk.common.logging import LoggerMixin
from topsdk.config.settings import ClientConfig, TopSettings
from topsdk.constants import (
    API_VERSION,
    DEFAULT_URL,
    FILE_PARAM_PREFIX,
    FORM_CONTENT_TYPE,
    FORMAT,
    PARTNER_ID,
    SIGN_METHOD,
)
from topsdk.toolkit.http import HttpClient, HttpRequest
from topsdk.toolkit.utils import check_required, format_datetime, get_api_response_name, stringify_value

RequestParams = Mapping[str, Any]
RequestHeaders = Mapping[str, str]


class TopClient(LoggerMixin):
    """开放平台网关客户端。

    负责为每次调用补齐协议参数、签名、发送表单请求并解析 JSON 响应。
    客户端只持有不可变配置，每次调用都在自己的参数副本上工作。

    使用示例:
        async with TopClient(app_key="key", app_secret="secret") as client:
            result = await client.execute(
                {"method": "taobao.user.seller.get", "fields": "nick"},
                ["user_seller_get_response"],
            )

            # 按 API 名取出 xxx_response
            user = await client.call("taobao.user.seller.get", {"fields": "nick"})
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        app_key: str | None = None,
        app_secret: str | None = None,
        url: str | None = None,
        target_app_key: str | None = None,
        http_client: HttpClient | None = None,
        clock: Callable[[], datetime] | None = None,
        failure_detection: FailureDetection = FailureDetection.BOTH,
    ) -> None:
        """初始化客户端。

        Args:
            config: 客户端配置，与下面的关键字参数二选一（关键字参数优先）
            app_key: 应用 appKey
            app_secret: 应用 appSecret
            url: 网关地址，默认正式环境地址
            target_app_key: 目标应用 appKey
            http_client: HTTP 传输，默认按配置超时新建
            clock: 当前时间来源，默认本地时间
            failure_detection: 失败检测策略

        Raises:
            ConfigurationError: 缺少 appKey 或 appSecret
        """
        base = config or ClientConfig()
        overrides = {
            name: value
            for name, value in (
                ("app_key", app_key),
                ("app_secret", app_secret),
                ("url", url),
                ("target_app_key", target_app_key),
            )
            if value is not None
        }
        if overrides:
            base = base.model_copy(update=overrides)

        if not base.app_key or not base.app_secret:
            raise ConfigurationError()

        if not base.url:
            base = base.model_copy(update={"url": DEFAULT_URL})

        self._config = base
        self._owns_http_client = http_client is None
        self._http_client = http_client or HttpClient(timeout=base.timeout)
        self._clock = clock or datetime.now
        self._failure_detection = FailureDetection(failure_detection)

    @classmethod
    def from_settings(cls, settings: TopSettings | None = None, **kwargs: Any) -> TopClient:
        """从环境变量配置创建客户端。"""
        settings = settings or TopSettings()
        return cls(settings.to_client_config(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def url(self) -> str:
        return self._config.url

    @property
    def app_key(self) -> str:
        return self._config.app_key

    @property
    def target_app_key(self) -> str:
        return self._config.target_app_key

    def timestamp(self) -> str:
        """当前时间戳，格式 yyyy-MM-dd HH:mm:ss。"""
        return format_datetime(self._clock())

    def sign(self, params: RequestParams) -> str:
        """对参数签名。"""
        return sign(params, self._config.app_secret)

    def _protocol_args(self, method: str) -> dict[str, str]:
        return {
            "method": method,
            "timestamp": self.timestamp(),
            "format": FORMAT,
            "app_key": self._config.app_key,
            "v": API_VERSION,
            "sign_method": SIGN_METHOD,
            "target_app_key": self._config.target_app_key,
            "partner_id": PARTNER_ID,
        }

    @staticmethod
    def _form_fields(params: RequestParams) -> dict[str, str]:
        fields: dict[str, str] = {}
        for key, value in params.items():
            if value is None:
                continue
            if isinstance(value, str) and value.startswith(FILE_PARAM_PREFIX):
                raise UnsupportedFeatureError(
                    f"file upload is not supported (parameter `{key}`)"
                )
            fields[key] = stringify_value(value)
        return fields

    @staticmethod
    def _merge_headers(headers: RequestHeaders | None) -> dict[str, str]:
        merged = {
            key: value
            for key, value in (headers or {}).items()
            if key.lower() != "content-type"
        }
        merged["Content-Type"] = FORM_CONTENT_TYPE
        return merged

    def build_request(
        self,
        params: RequestParams,
        headers: RequestHeaders | None = None,
        http_method: str = "POST",
    ) -> HttpRequest:
        """构建已签名的请求（不发送）。

        Args:
            params: 调用参数，必须包含 method
            headers: 额外请求头
            http_method: POST 或 GET

        Returns:
            HttpRequest: 协议参数在查询字符串中，其余参数在表单请求体中
                （GET 时一并放入查询字符串）

        Raises:
            ParameterMissingError: 缺少 method
            UnsupportedFeatureError: 参数值以 @ 开头（文件上传）
        """
        check_required(params, "method")

        http_method = http_method.upper()
        args = self._protocol_args(str(params["method"]))
        args[SIGN_KEY] = self.sign({**params, **args})

        body_params = {key: value for key, value in params.items() if key != "method"}
        fields = self._form_fields(body_params)

        self.logger.debug(f"签名参数: {sorted({**body_params, **args})}")

        query = urlencode(args)
        content: str | None = urlencode(fields)
        if http_method == "GET":
            if content:
                query = f"{query}&{content}"
            content = None

        return HttpRequest(
            method=http_method,
            url=f"{self._config.url}?{query}",
            headers=self._merge_headers(headers),
            content=content,
        )

    async def request(
        self,
        params: RequestParams,
        response_keys: Sequence[str] | None = None,
        headers: RequestHeaders | None = None,
        http_method: str = "POST",
    ) -> JsonValue:
        """发送请求并解析响应。

        Args:
            params: 调用参数，必须包含 method
            response_keys: 只保留响应中的这些顶层键
            headers: 额外请求头
            http_method: POST 或 GET

        Returns:
            JsonValue: 解析后的响应（可能已投影）

        Raises:
            ParameterMissingError: 缺少 method
            UnsupportedFeatureError: 文件上传参数
            TransportError: 网络或 HTTP 错误
            ResponseFormatError: 响应为空或不是合法 JSON
            ServiceError: 网关返回失败
        """
        request = self.build_request(params, headers, http_method)
        self.logger.debug(f"url: {request.url}")

        response = await self._http_client.send(request)
        body = parse_response_body(response.text)
        try:
            check_response(body, self._failure_detection)
        except (ResponseFormatError, ServiceError) as exc:
            self.logger.warning(f"网关返回错误: {params['method']} | {exc}")
            raise

        return project_response(body, response_keys)

    async def execute(
        self,
        params: RequestParams,
        response_keys: Sequence[str] | None = None,
        headers: RequestHeaders | None = None,
    ) -> JsonValue:
        """以 POST 调用网关。"""
        return await self.request(params, response_keys, headers, "POST")

    async def invoke(
        self,
        api_name: str,
        params: RequestParams,
        response_names: Sequence[str] | None = None,
        headers: RequestHeaders | None = None,
        http_method: str = "POST",
    ) -> Any:
        """按 API 名调用，并按 response_names 逐层取出结果。

        任一层不存在时返回 None。
        """
        result = await self.request({**params, "method": api_name}, None, headers, http_method)
        return extract_response_path(result, response_names)

    async def call(
        self,
        api_name: str,
        params: RequestParams,
        headers: RequestHeaders | None = None,
    ) -> Any:
        """POST 调用，返回 <api>_response 的内容。"""
        return await self.invoke(
            api_name, params, [get_api_response_name(api_name)], headers, "POST"
        )

    async def get(self, api_name: str, params: RequestParams) -> Any:
        """GET 调用，返回 <api>_response 的内容。"""
        return await self.invoke(
            api_name, params, [get_api_response_name(api_name)], None, "GET"
        )

    async def close(self) -> None:
        """关闭客户端（只关闭自己创建的 HTTP 客户端）。"""
        if self._owns_http_client:
            await self._http_client.close()

    async def __aenter__(self) -> TopClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<TopClient url={self._config.url} app_key={self._config.app_key}>"


__all__ = [
    "RequestHeaders",
    "RequestParams",
    "TopClient",
]
