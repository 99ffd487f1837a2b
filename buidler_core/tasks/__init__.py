"""Task definitions, override chains and the run_super handle."""

from .definitions import OverriddenTaskDefinition, TaskAction, TaskDefinition, TasksMap, override_task
from .run_super import RunSuperFunction

__all__ = [
    "OverriddenTaskDefinition",
    "RunSuperFunction",
    "TaskAction",
    "TaskDefinition",
    "TasksMap",
    "override_task",
]
