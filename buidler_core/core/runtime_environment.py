"""Buidler 运行时环境。

Environment 是任务执行的聚合根：持有解析完成的配置、CLI 参数、任务表、
当前网络绑定（惰性 Provider）以及插件 extender 挂载的字段。
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Dict, List, Optional, Sequence

from buidler_core.core.ambient import MISSING, AmbientNamespace, ambient
from buidler_core.domain.exceptions import NetworkConfigNotFoundError, UnrecognizedTaskError
from buidler_core.domain.models import BuidlerArguments, Network, NetworkConfig, ProjectPaths, ResolvedConfig
from buidler_core.infrastructure.logging.logger import get_logger
from buidler_core.providers import EthereumProvider, create_provider
from buidler_core.tasks.definitions import TaskDefinition, TasksMap
from buidler_core.tasks.run_super import RunSuperFunction
from buidler_core.util.lazy import lazy_object


log = get_logger("bre")

EnvironmentExtender = Callable[["Environment"], None]
ProviderFactory = Callable[[str, NetworkConfig, str, ProjectPaths], EthereumProvider]

RUN_SUPER_SLOT = "run_super"


class Environment:
    """任务执行时可见的运行时环境。

    注入到 ambient 命名空间的字段是一个显式列表：BASE_EXPOSED_FIELDS，
    加上 extender 挂载的公开属性（按挂载顺序记录）。下划线开头的属性从不注入。
    """

    BASE_EXPOSED_FIELDS = ("config", "buidler_arguments", "tasks", "network", "ethereum", "run")
    DEFAULT_BLACKLIST = ("inject_to_global", "_run_task_definition")

    def __init__(
        self,
        config: ResolvedConfig,
        buidler_arguments: BuidlerArguments,
        tasks: TasksMap,
        extenders: Optional[Sequence[EnvironmentExtender]] = None,
        *,
        provider_factory: ProviderFactory = create_provider,
        namespace: AmbientNamespace = ambient,
    ):
        """初始化运行时环境并依次执行 extender。

        extender 的顺序即配置文件与插件的加载顺序，必须原样保留。

        Raises:
            NetworkConfigNotFoundError: 选中的网络不在 config.networks 中。
        """
        object.__setattr__(self, "_exposed_fields", list(self.BASE_EXPOSED_FIELDS))
        log.debug("Creating BuidlerRuntimeEnvironment")

        network_name = (
            buidler_arguments.network
            if buidler_arguments.network is not None
            else config.default_network
        )
        network_config = config.networks.get(network_name)
        if network_config is None:
            raise NetworkConfigNotFoundError(network=network_name)

        def _create() -> EthereumProvider:
            log.debug("Creating provider for network %s", network_name)
            return provider_factory(network_name, network_config, config.solc.version, config.paths)

        provider = lazy_object(_create)

        self._namespace = namespace
        self._extenders: List[EnvironmentExtender] = list(extenders or [])
        self.config = config
        self.buidler_arguments = buidler_arguments
        self.tasks = tasks
        self.network = Network(name=network_name, config=network_config, provider=provider)
        self.ethereum = provider

        for extender in self._extenders:
            extender(self)

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and name not in self._exposed_fields:
            self._exposed_fields.append(name)
        object.__setattr__(self, name, value)

    @property
    def exposed_fields(self) -> List[str]:
        return list(self._exposed_fields)

    async def run(self, name: str, task_arguments: Optional[Dict[str, Any]] = None) -> Any:
        """执行指定名称的任务。

        Raises:
            UnrecognizedTaskError: 没有该名称的任务（BDLR303）。
        """
        task_definition = self.tasks.get(name)
        log.debug("Running task %s", name)
        if task_definition is None:
            raise UnrecognizedTaskError(task=name)
        if task_arguments is None:
            task_arguments = {}
        return await self._run_task_definition(task_definition, task_arguments)

    def inject_to_global(self, blacklist: Sequence[str] = DEFAULT_BLACKLIST) -> Callable[[], None]:
        """把公开字段注入 ambient 命名空间，返回恢复函数。

        恢复后每个槽位都回到注入前的状态；注入前不存在的槽位会被删除。
        恢复函数只生效一次，重复调用无副作用。
        """
        namespace = self._namespace
        previous_values: Dict[str, Any] = {}

        restored = False

        def restore() -> None:
            nonlocal restored
            if restored:
                return
            restored = True
            for key, previous in previous_values.items():
                namespace.set(key, previous)

        try:
            for key in list(self._exposed_fields):
                if key in blacklist:
                    continue
                value = getattr(self, key, MISSING)
                if value is MISSING:
                    continue
                previous_values[key] = namespace.get(key, MISSING)
                namespace.set(key, value)
        except BaseException:
            restore()
            raise

        return restore

    async def _run_task_definition(self, task_definition: TaskDefinition, task_arguments: Dict[str, Any]) -> Any:
        run_super = RunSuperFunction(task_definition, task_arguments, self._run_task_definition)

        namespace = self._namespace
        previous_run_super = namespace.get(RUN_SUPER_SLOT, MISSING)
        namespace.set(RUN_SUPER_SLOT, run_super)
        try:
            uninject_from_global = self.inject_to_global()
            try:
                # 真正的任务逻辑（可能由用户定义）
                result = task_definition.action(task_arguments, self, run_super)
                if inspect.isawaitable(result):
                    result = await result
                return result
            finally:
                uninject_from_global()
        finally:
            namespace.set(RUN_SUPER_SLOT, previous_run_super)

    def __repr__(self) -> str:
        return f"<Environment network={self.network.name!r} tasks={len(self.tasks)}>"
