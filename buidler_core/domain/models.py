"""运行时共享的数据模型。

- NetworkConfig / SolcConfig / ProjectPaths / ResolvedConfig: 解析完成的项目配置，
  构造后只读（frozen dataclass + MappingProxyType）。
- BuidlerArguments: CLI 解析后的全局参数。
- Network: 当前选中网络的绑定（名称、配置、惰性 Provider）。
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple


TaskArguments = Dict[str, Any]


@dataclass(frozen=True)
class NetworkConfig:
    """单个网络的配置。

    - url: JSON-RPC 节点地址；为空时无法创建 HTTP Provider。
    - extra: 未识别的字段，原样保留供插件读取。
    """

    url: Optional[str] = None
    chain_id: Optional[int] = None
    from_address: Optional[str] = None
    gas: Optional[int] = None
    gas_price: Optional[int] = None
    timeout: Optional[float] = None
    accounts: Tuple[str, ...] = ()
    extra: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class SolcConfig:
    version: str
    optimizer_enabled: bool = False
    optimizer_runs: int = 200


@dataclass(frozen=True)
class ProjectPaths:
    """项目路径，全部为绝对路径。"""

    root: Path
    config_file: Optional[Path]
    sources: Path
    cache: Path
    artifacts: Path
    tests: Path


@dataclass(frozen=True)
class ResolvedConfig:
    default_network: str
    networks: Mapping[str, NetworkConfig]
    solc: SolcConfig
    paths: ProjectPaths

    def __post_init__(self) -> None:
        if not isinstance(self.networks, MappingProxyType):
            object.__setattr__(self, "networks", MappingProxyType(dict(self.networks)))


@dataclass(frozen=True)
class BuidlerArguments:
    """CLI 全局参数。network 为空表示使用配置中的 default_network。"""

    network: Optional[str] = None
    show_stack_traces: bool = False
    verbose: bool = False
    emoji: bool = False
    help: bool = False
    version: bool = False
    config: Optional[str] = None


@dataclass
class Network:
    """当前 Environment 绑定的网络。provider 为惰性对象，首次读取时才构造。"""

    name: str
    config: NetworkConfig
    provider: Any = field(repr=False, compare=False)
