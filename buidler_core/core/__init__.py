"""运行时核心：Environment 与 ambient 命名空间。"""

from .ambient import MISSING, AmbientNamespace, ambient
from .runtime_environment import Environment, EnvironmentExtender

__all__ = ["MISSING", "AmbientNamespace", "Environment", "EnvironmentExtender", "ambient"]
