"""Buidler Core 顶层包。

该包提供任务型构建工具的执行运行时：
任务分发与覆盖链（run_super）、ambient 命名空间注入、
惰性 Provider 绑定以及项目配置解析。
"""

from buidler_core.core import Environment, ambient
from buidler_core.tasks import TaskDefinition, override_task

__all__ = ["Environment", "TaskDefinition", "ambient", "override_task"]
