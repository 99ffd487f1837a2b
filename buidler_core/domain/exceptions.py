"""统一业务异常模型。

所有跨模块抛出的运行时错误都继承自 BuidlerError，
便于在 CLI 层统一捕获并按错误编号提示用户。
"""

import re
from typing import Any, Mapping, Optional

from .errors_list import ERRORS, ErrorDescriptor


_PLACEHOLDER = re.compile(r"%([A-Za-z_][A-Za-z0-9_]*)%")


def render_message(template: str, message_args: Mapping[str, Any]) -> str:
    """把模板中的 %name% 替换为参数值；缺失的参数原样保留。"""

    def _sub(match: "re.Match[str]") -> str:
        key = match.group(1)
        if key not in message_args:
            return match.group(0)
        return str(message_args[key])

    return _PLACEHOLDER.sub(_sub, template)


class BuidlerError(Exception):
    """运行时异常基类。

    Attributes:
        descriptor: 错误描述（编号、标题、消息模板）。
        number: 错误编号，例如 303。
        code: 机器可读错误码，例如 "BDLR303"。
        message: 渲染后的用户可读错误信息。
        message_args: 渲染模板使用的参数，同时作为结构化字段供上层读取。
        parent: 触发本错误的底层异常（可选）。
        extra: 其他补充字段（例如 trace_id、插件名等）。
    """

    def __init__(
        self,
        descriptor: ErrorDescriptor,
        message_args: Optional[Mapping[str, Any]] = None,
        parent: Optional[BaseException] = None,
        **extra: Any,
    ):
        self.descriptor = descriptor
        self.number = descriptor.number
        self.code = descriptor.code
        self.title = descriptor.title
        self.message_args = dict(message_args or {})
        self.message = render_message(descriptor.message, self.message_args)
        self.parent = parent
        self.extra = extra
        super().__init__(f"{self.code}: {self.message}")


class InvalidConfigError(BuidlerError):
    """项目配置结构不合法。"""

    def __init__(self, errors: str):
        super().__init__(ERRORS.GENERAL.INVALID_CONFIG, {"errors": errors})
        self.errors = errors


class NetworkConfigNotFoundError(BuidlerError):
    """选中的网络在配置中不存在，Environment 构造失败。"""

    def __init__(self, network: str):
        super().__init__(ERRORS.NETWORK.CONFIG_NOT_FOUND, {"network": network})
        self.network = network


class UnrecognizedTaskError(BuidlerError):
    """run 调用了未注册的任务名。"""

    def __init__(self, task: str):
        super().__init__(ERRORS.ARGUMENTS.UNRECOGNIZED_TASK, {"task": task})
        self.task = task


class RunSuperNotAvailableError(BuidlerError):
    """在非覆盖任务中调用了 run_super。"""

    def __init__(self, task_name: str):
        super().__init__(ERRORS.TASK_DEFINITIONS.RUNSUPER_NOT_AVAILABLE, {"task_name": task_name})
        self.task_name = task_name


class ProviderConfigError(BuidlerError):
    """网络配置不足以构造 Provider（例如缺少 url）。"""

    def __init__(self, network: str):
        super().__init__(ERRORS.NETWORK.PROVIDER_NOT_CONFIGURED, {"network": network})
        self.network = network


class ProviderNetworkError(BuidlerError):
    """连接失败、超时等传输层错误。"""

    def __init__(self, network: str, method: str, error: str, parent: Optional[BaseException] = None):
        super().__init__(
            ERRORS.NETWORK.REQUEST_FAILED,
            {"network": network, "method": method, "error": error},
            parent=parent,
        )


class ProviderApiError(ProviderNetworkError):
    """节点返回了非 2xx 的 HTTP 状态码。"""

    def __init__(self, network: str, method: str, http_status: int, body: str):
        super().__init__(network, method, f"HTTP {http_status}: {body}")
        self.http_status = http_status


class ProviderRpcError(BuidlerError):
    """节点返回了 JSON-RPC error 对象。"""

    def __init__(self, network: str, method: str, rpc_code: int, error: str, data: Any = None):
        super().__init__(
            ERRORS.NETWORK.RPC_ERROR,
            {"network": network, "method": method, "rpc_code": rpc_code, "error": error},
        )
        self.rpc_code = rpc_code
        self.data = data
