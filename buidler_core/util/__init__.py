"""通用工具。"""

from .lazy import LazyObject, is_lazy_initialized, lazy_function, lazy_object

__all__ = ["LazyObject", "is_lazy_initialized", "lazy_function", "lazy_object"]
