"""run_super 句柄。"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict, Optional

from buidler_core.domain.exceptions import RunSuperNotAvailableError
from buidler_core.infrastructure.logging.logger import get_logger

from .definitions import OverriddenTaskDefinition, TaskDefinition


log = get_logger("bre")

DefinitionRunner = Callable[[TaskDefinition, Dict[str, Any]], Awaitable[Any]]


class RunSuperFunction:
    """绑定在覆盖链某一层上的可调用对象。

    ``await run_super()`` 使用本层收到的参数执行上一层定义；
    ``await run_super(custom_args)`` 使用替换参数。
    ``is_defined`` 当且仅当本层是覆盖定义时为 True。
    """

    def __init__(
        self,
        definition: TaskDefinition,
        task_arguments: Dict[str, Any],
        runner: DefinitionRunner,
    ):
        self._definition = definition
        self._task_arguments = task_arguments
        self._runner = runner

    @property
    def is_defined(self) -> bool:
        return isinstance(self._definition, OverriddenTaskDefinition)

    async def __call__(self, task_arguments: Optional[Dict[str, Any]] = None) -> Any:
        match self._definition:
            case OverriddenTaskDefinition(parent=parent):
                log.debug("Running %s's super", self._definition.name)
                args = self._task_arguments if task_arguments is None else task_arguments
                return await self._runner(parent, args)
            case _:
                raise RunSuperNotAvailableError(task_name=self._definition.name)

    def __repr__(self) -> str:
        return f"<RunSuperFunction task={self._definition.name!r} is_defined={self.is_defined}>"
