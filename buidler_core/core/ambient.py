"""进程级共享的环境命名空间。

任务代码可以不接收参数而直接访问当前 Environment 的字段::

    from buidler_core.core.ambient import ambient

    async def action(args, env, run_super):
        await ambient.run("compile")

Environment 在执行任务期间把自己的字段注入 ``ambient``，结束后按栈序精确恢复。
同一时刻只能有一棵调用树依赖它：并发的顶层 ``run`` 会互相破坏恢复顺序，
调用方必须串行化顶层调用。
"""

from typing import Any, Dict, Iterator


class _Missing:
    """表示槽位不存在（区别于值为 None）。"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


class AmbientNamespace:
    """可按属性访问的槽位表。"""

    def __init__(self) -> None:
        object.__setattr__(self, "_slots", {})

    def __getattr__(self, name: str) -> Any:
        slots: Dict[str, Any] = object.__getattribute__(self, "_slots")
        try:
            return slots[name]
        except KeyError:
            raise AttributeError(f"ambient namespace has no {name!r}") from None

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        if name not in self._slots:
            raise AttributeError(name)
        self.delete(name)

    def __contains__(self, name: object) -> bool:
        return name in self._slots

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._slots))

    def get(self, name: str, default: Any = MISSING) -> Any:
        return self._slots.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """写入槽位；value 为 MISSING 时等价于删除。"""

        if value is MISSING:
            self.delete(name)
        else:
            self._slots[name] = value

    def delete(self, name: str) -> None:
        self._slots.pop(name, None)

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._slots)

    def __repr__(self) -> str:
        return f"<AmbientNamespace {sorted(self._slots)}>"


ambient = AmbientNamespace()
