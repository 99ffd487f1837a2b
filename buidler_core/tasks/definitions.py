"""任务定义与覆盖链。

TaskDefinition 是基础定义；OverriddenTaskDefinition 包装一个已有定义，
形成从新到旧的单向链表。覆盖只能通过 ``definition.override(action)`` 创建，
因此链一定有限且无环。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Iterator, Optional, Union

if TYPE_CHECKING:
    from buidler_core.core.runtime_environment import Environment
    from .run_super import RunSuperFunction


TaskAction = Callable[
    [Dict[str, Any], "Environment", "RunSuperFunction"],
    Union[Any, Awaitable[Any]],
]


@dataclass(frozen=True)
class TaskDefinition:
    """一个具名任务及其 action。"""

    name: str
    action: TaskAction
    description: Optional[str] = None

    @property
    def is_override(self) -> bool:
        return False

    def override(self, action: TaskAction, description: Optional[str] = None) -> "OverriddenTaskDefinition":
        """返回覆盖当前定义的新定义，原定义保留为 parent。"""

        return OverriddenTaskDefinition(
            name=self.name,
            action=action,
            description=description if description is not None else self.description,
            parent=self,
        )

    def chain(self) -> Iterator["TaskDefinition"]:
        """从当前定义开始，依次产出整条链（最新的在前）。"""

        yield self


@dataclass(frozen=True)
class OverriddenTaskDefinition(TaskDefinition):
    parent: TaskDefinition = field(default=None, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.parent, TaskDefinition):
            raise TypeError("OverriddenTaskDefinition requires a parent TaskDefinition")
        if self.parent.name != self.name:
            raise ValueError(
                f"Override name {self.name!r} doesn't match its parent {self.parent.name!r}"
            )

    @property
    def is_override(self) -> bool:
        return True

    def chain(self) -> Iterator[TaskDefinition]:
        yield self
        yield from self.parent.chain()


TasksMap = Dict[str, TaskDefinition]


def override_task(tasks: TasksMap, name: str, action: TaskAction, description: Optional[str] = None) -> OverriddenTaskDefinition:
    """用新 action 覆盖 tasks 中已存在的任务，并写回 tasks。"""

    try:
        current = tasks[name]
    except KeyError:
        raise KeyError(f"Can't override unknown task {name!r}") from None
    overridden = current.override(action, description)
    tasks[name] = overridden
    return overridden
