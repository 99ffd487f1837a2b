"""JSON-RPC over HTTP Provider.

请求格式为标准 JSON-RPC 2.0：
- URL: 网络配置中的 url
- Body: {"jsonrpc": "2.0", "id": n, "method": ..., "params": [...]}

错误映射：
- 连接失败/超时 -> ProviderNetworkError
- HTTP >= 400 -> ProviderApiError
- 响应中带 error 对象 -> ProviderRpcError
"""

import itertools
from typing import Any, Dict, Optional, Sequence

import httpx

from buidler_core.domain.exceptions import ProviderApiError, ProviderNetworkError, ProviderRpcError
from buidler_core.infrastructure.logging.logger import get_logger


log = get_logger("providers")


class HttpProvider:
    """基于 httpx 的同步 JSON-RPC 客户端。"""

    def __init__(self, url: str, timeout: float, network_name: str = "unknown"):
        self.url = url
        self.timeout = timeout
        self.network_name = network_name
        self._ids = itertools.count(1)

    def request(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        payload = self._build_payload(method, params)
        try:
            with httpx.Client(timeout=self.timeout, trust_env=False) as client:
                resp = client.post(
                    self.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.RequestError as e:
            raise ProviderNetworkError(self.network_name, method, str(e), parent=e)
        if resp.status_code >= 400:
            raise ProviderApiError(self.network_name, method, resp.status_code, resp.text)
        try:
            data = resp.json()
        except ValueError as exc:
            raise ProviderNetworkError(self.network_name, method, "invalid JSON response", parent=exc)
        return self._parse_response(method, data)

    def send(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        return self.request(method, params)

    def _build_payload(self, method: str, params: Optional[Sequence[Any]]) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": list(params or []),
        }

    def _parse_response(self, method: str, data: Any) -> Any:
        if not isinstance(data, dict):
            raise ProviderNetworkError(self.network_name, method, "JSON-RPC response is not an object")
        error = data.get("error")
        if error is not None:
            log.debug("RPC error from %s: %s", self.network_name, error)
            if not isinstance(error, dict):
                raise ProviderRpcError(self.network_name, method, rpc_code=-32603, error=str(error))
            raise ProviderRpcError(
                self.network_name,
                method,
                rpc_code=error.get("code", -32603),
                error=error.get("message", ""),
                data=error.get("data"),
            )
        return data.get("result")

    def __repr__(self) -> str:
        return f"HttpProvider(network={self.network_name!r}, url={self.url!r})"
