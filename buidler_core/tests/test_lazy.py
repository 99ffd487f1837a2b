import logging
import threading

import pytest

from buidler_core.util.lazy import LazyObject, is_lazy_initialized, lazy_function, lazy_object


class Counter:
    def __init__(self):
        self.value = 0
        self.items = [1, 2, 3]

    def bump(self):
        self.value += 1
        return self.value


def test_factory_not_called_until_first_access():
    calls = []
    proxy = lazy_object(lambda: calls.append(1) or Counter())
    assert calls == []
    assert not is_lazy_initialized(proxy)
    assert proxy.value == 0
    assert calls == [1]
    assert is_lazy_initialized(proxy)


def test_factory_called_once_across_reads():
    calls = []

    def factory():
        calls.append(1)
        return Counter()

    proxy = LazyObject(factory)
    proxy.bump()
    proxy.bump()
    proxy.value = 10
    assert proxy.value == 10
    assert len(proxy.items) == 3
    assert calls == [1]


def test_proxies_containers_and_comparison():
    proxy = lazy_object(lambda: {"a": 1})
    assert proxy["a"] == 1
    assert "a" in proxy
    assert list(proxy) == ["a"]
    assert len(proxy) == 1
    proxy["b"] = 2
    assert proxy == {"a": 1, "b": 2}
    assert repr(proxy) == repr({"a": 1, "b": 2})


def test_failed_factory_is_retried():
    attempts = []

    def factory():
        attempts.append(1)
        if len(attempts) == 1:
            raise RuntimeError("boom")
        return Counter()

    proxy = lazy_object(factory)
    with pytest.raises(RuntimeError):
        proxy.value
    assert proxy.value == 0
    assert len(attempts) == 2


def test_concurrent_first_reads_construct_once():
    calls = []
    gate = threading.Event()

    def factory():
        gate.wait(1)
        calls.append(1)
        return Counter()

    proxy = lazy_object(factory)
    threads = [threading.Thread(target=lambda: proxy.value) for _ in range(8)]
    for t in threads:
        t.start()
    gate.set()
    for t in threads:
        t.join()
    assert calls == [1]


def test_lazy_function():
    calls = []

    def factory():
        calls.append(1)
        return lambda x: x * 2

    fn = lazy_function(factory)
    assert calls == []
    assert fn(2) == 4
    assert fn(3) == 6
    assert calls == [1]


def test_factory_reading_its_own_proxy_fails():
    holder = {}

    def factory():
        return holder["proxy"].value

    holder["proxy"] = lazy_object(factory)
    with pytest.raises(RuntimeError, match="accessed the object it is creating"):
        holder["proxy"].value
    assert not is_lazy_initialized(holder["proxy"])


def test_initialization_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="buidler_core.lazy")
    proxy = lazy_object(Counter)
    proxy.value
    proxy.value
    records = [r for r in caplog.records if r.name == "buidler_core.lazy"]
    assert len(records) == 1
