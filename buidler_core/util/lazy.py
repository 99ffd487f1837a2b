"""惰性对象。

LazyObject 包装一个工厂函数，首次被使用时才调用它，之后所有访问都转发给缓存的真实对象。
调用方不需要显式解包：属性读写、调用、下标、迭代、比较等都会透明代理。

工厂抛出异常时不缓存结果，下一次访问会重新调用工厂。
"""

import threading
from typing import Any, Callable, Generic, TypeVar

from buidler_core.infrastructure.logging.logger import get_logger


log = get_logger("lazy")


T = TypeVar("T")

_UNSET = object()


class LazyObject(Generic[T]):
    """首次访问时才构造真实对象的透明代理。"""

    __slots__ = ("_lazy_factory", "_lazy_value", "_lazy_lock", "_lazy_building")

    def __init__(self, factory: Callable[[], T]):
        object.__setattr__(self, "_lazy_factory", factory)
        object.__setattr__(self, "_lazy_value", _UNSET)
        object.__setattr__(self, "_lazy_lock", threading.RLock())
        object.__setattr__(self, "_lazy_building", False)

    def _lazy_resolve(self) -> T:
        value = object.__getattribute__(self, "_lazy_value")
        if value is not _UNSET:
            return value
        with object.__getattribute__(self, "_lazy_lock"):
            value = object.__getattribute__(self, "_lazy_value")
            if value is _UNSET:
                if object.__getattribute__(self, "_lazy_building"):
                    raise RuntimeError("Lazy object factory accessed the object it is creating")
                log.debug("Initializing lazy object")
                object.__setattr__(self, "_lazy_building", True)
                try:
                    value = object.__getattribute__(self, "_lazy_factory")()
                finally:
                    object.__setattr__(self, "_lazy_building", False)
                object.__setattr__(self, "_lazy_value", value)
        return value

    # ---- 属性 ----

    def __getattr__(self, name: str) -> Any:
        return getattr(self._lazy_resolve(), name)

    def __setattr__(self, name: str, value: Any) -> None:
        setattr(self._lazy_resolve(), name, value)

    def __delattr__(self, name: str) -> None:
        delattr(self._lazy_resolve(), name)

    def __dir__(self):
        return dir(self._lazy_resolve())

    # ---- 调用 / 容器 ----

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._lazy_resolve()(*args, **kwargs)

    def __getitem__(self, key: Any) -> Any:
        return self._lazy_resolve()[key]

    def __setitem__(self, key: Any, value: Any) -> None:
        self._lazy_resolve()[key] = value

    def __delitem__(self, key: Any) -> None:
        del self._lazy_resolve()[key]

    def __iter__(self):
        return iter(self._lazy_resolve())

    def __len__(self) -> int:
        return len(self._lazy_resolve())

    def __contains__(self, item: Any) -> bool:
        return item in self._lazy_resolve()

    def __bool__(self) -> bool:
        return bool(self._lazy_resolve())

    # ---- 比较 / 展示 ----

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, LazyObject):
            other = other._lazy_resolve()
        return self._lazy_resolve() == other

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self._lazy_resolve())

    def __repr__(self) -> str:
        return repr(self._lazy_resolve())

    def __str__(self) -> str:
        return str(self._lazy_resolve())


def is_lazy_initialized(obj: LazyObject) -> bool:
    """工厂是否已经执行过。不会触发构造。"""

    return object.__getattribute__(obj, "_lazy_value") is not _UNSET


def lazy_object(factory: Callable[[], T]) -> T:
    """返回一个外观与 T 一致的惰性代理。"""

    return LazyObject(factory)  # type: ignore[return-value]


def lazy_function(factory: Callable[[], Callable[..., Any]]) -> Callable[..., Any]:
    """包装一个返回函数的工厂；首次调用时才创建真实函数。"""

    return LazyObject(factory)
