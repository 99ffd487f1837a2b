"""Provider 抽象接口。

Environment 不直接依赖具体的节点客户端，而是依赖此协议（EIP-1193 风格）：

- request(method, params): 执行一次 JSON-RPC 调用并返回 result 字段。
- send(method, params): request 的旧式别名。
"""

from typing import Any, Optional, Protocol, Sequence


class EthereumProvider(Protocol):
    """节点 Provider 协议。"""

    def request(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        ...

    def send(self, method: str, params: Optional[Sequence[Any]] = None) -> Any:
        ...
