import pytest

from buidler_core.tasks import OverriddenTaskDefinition, TaskDefinition, override_task


async def _noop(task_args, env, run_super):
    return None


def test_override_keeps_parent_and_name():
    base = TaskDefinition("compile", _noop, description="Compiles the project")
    overridden = base.override(_noop)
    assert isinstance(overridden, OverriddenTaskDefinition)
    assert overridden.parent is base
    assert overridden.name == "compile"
    assert overridden.description == "Compiles the project"
    assert overridden.is_override
    assert not base.is_override


def test_chain_is_newest_first():
    base = TaskDefinition("t", _noop)
    first = base.override(_noop)
    second = first.override(_noop, description="newest")
    assert list(second.chain()) == [second, first, base]
    assert second.description == "newest"


def test_override_task_replaces_registry_entry():
    base = TaskDefinition("t", _noop)
    tasks = {"t": base}
    overridden = override_task(tasks, "t", _noop)
    assert tasks["t"] is overridden
    assert overridden.parent is base


def test_override_unknown_task():
    with pytest.raises(KeyError):
        override_task({}, "missing", _noop)


def test_override_requires_matching_parent():
    base = TaskDefinition("a", _noop)
    with pytest.raises(ValueError):
        OverriddenTaskDefinition(name="b", action=_noop, parent=base)
    with pytest.raises(TypeError):
        OverriddenTaskDefinition(name="a", action=_noop)
