"""错误描述表。

每个 ErrorDescriptor 拥有一个稳定的编号（对外显示为 BDLR<number>）、
标题以及带 %name% 占位符的消息模板。编号按范围分组：

- 0-99: 通用错误（配置文件等）
- 100-199: 网络 / Provider
- 200-299: 任务定义
- 300-399: 参数
"""

from dataclasses import dataclass


ERROR_PREFIX = "BDLR"


@dataclass(frozen=True)
class ErrorDescriptor:
    number: int
    title: str
    message: str

    @property
    def code(self) -> str:
        return f"{ERROR_PREFIX}{self.number}"


class _General:
    INVALID_CONFIG = ErrorDescriptor(
        number=8,
        title="Invalid config",
        message="There's one or more errors in your config file: %errors%",
    )
    CONFIG_FILE_NOT_FOUND = ErrorDescriptor(
        number=9,
        title="Config file not found",
        message="Config file %path% not found",
    )


class _Network:
    CONFIG_NOT_FOUND = ErrorDescriptor(
        number=100,
        title="Selected network doesn't exist",
        message="Network %network% doesn't exist",
    )
    PROVIDER_NOT_CONFIGURED = ErrorDescriptor(
        number=101,
        title="Network has no provider",
        message="Network %network% has no url configured, can't create a provider for it",
    )
    REQUEST_FAILED = ErrorDescriptor(
        number=102,
        title="JSON-RPC request failed",
        message="Request %method% to network %network% failed: %error%",
    )
    RPC_ERROR = ErrorDescriptor(
        number=103,
        title="JSON-RPC error response",
        message="Network %network% answered %method% with error %rpc_code%: %error%",
    )


class _TaskDefinitions:
    RUNSUPER_NOT_AVAILABLE = ErrorDescriptor(
        number=210,
        title="`runSuper` not available",
        message="Tried to call runSuper from a non-overridden definition of task %task_name%",
    )


class _Arguments:
    UNRECOGNIZED_TASK = ErrorDescriptor(
        number=303,
        title="Unrecognized task",
        message="Unrecognized task %task%",
    )


class ERRORS:
    GENERAL = _General
    NETWORK = _Network
    TASK_DEFINITIONS = _TaskDefinitions
    ARGUMENTS = _Arguments
