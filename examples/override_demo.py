"""Minimal demonstration of task overrides and run_super."""

import asyncio

from buidler_core import Environment, TaskDefinition, ambient, override_task
from buidler_core.config.resolution import resolve_config
from buidler_core.domain.models import BuidlerArguments


async def compile_action(args, env, run_super):
    return f"compiled sources in {env.config.paths.sources}"


async def compile_with_banner(args, env, run_super):
    print("Network:", ambient.network.name)
    return "[banner] " + await run_super()


if __name__ == "__main__":
    tasks = {"compile": TaskDefinition("compile", compile_action)}
    override_task(tasks, "compile", compile_with_banner)
    env = Environment(resolve_config({}), BuidlerArguments(), tasks)
    print(asyncio.run(env.run("compile")))
