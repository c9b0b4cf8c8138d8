"""HTTP客户端 - 网关请求的传输层。

特性：
- 请求/响应拦截器
- 超时控制
- 错误处理
- 请求日志

基于 httpx 实现，全异步无阻塞。不做重试，不做连接池调优。
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx

from topsdk.common.exceptions import TransportError
from topsdk.common.logging import logger


@dataclass
class HttpRequest:
    """请求对象（用于拦截器）。

    url 已包含完整的查询字符串，content 为已编码的请求体。
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content: str | None = None


@dataclass
class HttpResponse:
    """响应对象（用于拦截器和返回）。"""

    status_code: int
    url: str
    headers: dict[str, str]
    text: str
    content: bytes
    elapsed_seconds: float

    def raise_for_status(self) -> None:
        """如果状态码表示错误，抛出异常。"""
        if self.status_code >= 400:
            raise HttpStatusError(
                f"HTTP {self.status_code}",
                status_code=self.status_code,
                response=self,
            )


class HttpError(TransportError):
    """HTTP 错误基类。"""

    pass


class HttpStatusError(HttpError):
    """HTTP 状态码错误。"""

    def __init__(self, message: str, status_code: int, response: HttpResponse) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class HttpTimeoutError(HttpError):
    """HTTP 超时错误。"""

    pass


class HttpNetworkError(HttpError):
    """HTTP 网络错误。"""

    pass


class RequestInterceptor(ABC):
    """请求拦截器接口。"""

    @abstractmethod
    async def before_request(self, request: HttpRequest) -> HttpRequest:
        """请求前处理。"""
        pass

    @abstractmethod
    async def after_response(self, response: HttpResponse) -> HttpResponse:
        """响应后处理。"""
        pass


class LoggingInterceptor(RequestInterceptor):
    """日志拦截器。"""

    async def before_request(self, request: HttpRequest) -> HttpRequest:
        """记录请求日志。"""
        logger.debug(
            f"HTTP请求: {request.method} {request.url} | "
            f"Headers: {request.headers}"
        )
        return request

    async def after_response(self, response: HttpResponse) -> HttpResponse:
        """记录响应日志。"""
        logger.debug(
            f"HTTP响应: {response.status_code} {response.url} | "
            f"耗时: {response.elapsed_seconds:.3f}s"
        )
        return response


class HttpClient:
    """网关 HTTP 客户端（基于 httpx）。

    使用示例:
        client = HttpClient(timeout=10)
        response = await client.send(
            HttpRequest(method="POST", url="https://gw.example.com/router/rest?a=1")
        )

        # 测试时注入 httpx 传输
        client = HttpClient(transport=httpx.MockTransport(handler))
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
        interceptors: list[RequestInterceptor] | None = None,
    ) -> None:
        """初始化HTTP客户端。

        Args:
            timeout: 超时时间（秒）
            follow_redirects: 是否跟随重定向
            transport: 自定义 httpx 传输（测试用）
            interceptors: 拦截器列表，默认只有日志拦截器
        """
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._transport = transport
        self._interceptors: list[RequestInterceptor] = (
            list(interceptors) if interceptors is not None else [LoggingInterceptor()]
        )
        # 延迟创建
        self._client: httpx.AsyncClient | None = None

        logger.debug(f"HTTP客户端初始化: timeout={timeout}")

    def _get_client(self) -> httpx.AsyncClient:
        """获取 httpx 客户端（懒加载）。"""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            )
        return self._client

    async def send(self, request: HttpRequest) -> HttpResponse:
        """发送请求。

        Args:
            request: 已构建好的请求

        Returns:
            HttpResponse: 响应对象

        Raises:
            HttpStatusError: 状态码 >= 400
            HttpTimeoutError: 请求超时
            HttpNetworkError: 网络错误
        """
        for interceptor in self._interceptors:
            request = await interceptor.before_request(request)

        client = self._get_client()
        start_time = time.perf_counter()
        try:
            resp = await client.request(
                method=request.method,
                url=request.url,
                headers=request.headers or None,
                content=request.content,
            )
        except httpx.TimeoutException as exc:
            raise HttpTimeoutError(f"请求超时: {request.url}") from exc
        except httpx.HTTPError as exc:
            logger.error(
                f"HTTP请求失败: {request.method} {request.url} | "
                f"错误: {type(exc).__name__}: {exc}"
            )
            raise HttpNetworkError(f"网络错误: {exc}") from exc

        elapsed = time.perf_counter() - start_time
        content = resp.content
        response = HttpResponse(
            status_code=resp.status_code,
            url=str(resp.url),
            headers=dict(resp.headers),
            text=content.decode("utf-8", errors="replace"),
            content=content,
            elapsed_seconds=elapsed,
        )

        for interceptor in self._interceptors:
            response = await interceptor.after_response(response)

        response.raise_for_status()
        return response

    async def close(self) -> None:
        """关闭客户端。"""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None
        logger.debug("HTTP客户端已关闭")

    async def __aenter__(self) -> HttpClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<HttpClient timeout={self._timeout}>"


__all__ = [
    "HttpClient",
    "HttpError",
    "HttpNetworkError",
    "HttpRequest",
    "HttpResponse",
    "HttpStatusError",
    "HttpTimeoutError",
    "LoggingInterceptor",
    "RequestInterceptor",
]
