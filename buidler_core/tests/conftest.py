from pathlib import Path

import pytest

from buidler_core.config.resolution import resolve_config
from buidler_core.core.ambient import AmbientNamespace
from buidler_core.domain.models import BuidlerArguments


class FakeProvider:
    def __init__(self, network_name, network_config, solc_version, paths):
        self.network_name = network_name
        self.network_config = network_config
        self.solc_version = solc_version
        self.paths = paths
        self.calls = []

    def request(self, method, params=None):
        self.calls.append((method, params))
        return "0x1"

    def send(self, method, params=None):
        return self.request(method, params)


class CountingFactory:
    def __init__(self):
        self.created = []

    def __call__(self, network_name, network_config, solc_version, paths):
        provider = FakeProvider(network_name, network_config, solc_version, paths)
        self.created.append(provider)
        return provider


@pytest.fixture
def config():
    return resolve_config(
        {
            "defaultNetwork": "dev",
            "networks": {
                "dev": {"url": "http://127.0.0.1:8545", "chainId": 31337},
                "staging": {"url": "http://staging.example:8545"},
            },
            "solc": {"version": "0.5.15"},
        },
        config_path=Path("/tmp/project/buidler.config.yaml"),
    )


@pytest.fixture
def args():
    return BuidlerArguments()


@pytest.fixture
def factory():
    return CountingFactory()


@pytest.fixture
def namespace():
    return AmbientNamespace()
