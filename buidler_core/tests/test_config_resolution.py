import tempfile
from pathlib import Path

import pytest

from buidler_core.config.resolution import DEFAULT_NETWORK_NAME, load_config_file, resolve_config
from buidler_core.domain.exceptions import BuidlerError, InvalidConfigError


def test_defaults():
    config = resolve_config({}, config_path="/tmp/proj/buidler.config.yaml")
    assert config.default_network == DEFAULT_NETWORK_NAME
    assert config.networks["localhost"].url == "http://127.0.0.1:8545"
    assert config.solc.version == "0.5.15"
    assert config.paths.root == Path("/tmp/proj").resolve()
    assert config.paths.sources == config.paths.root / "contracts"
    assert config.paths.tests == config.paths.root / "test"


def test_camel_and_snake_case_keys():
    config = resolve_config(
        {
            "default_network": "dev",
            "networks": {
                "dev": {"url": "http://dev", "chainId": 5, "gasPrice": 1, "gas": "auto", "from": "0xabc", "custom": 1},
            },
            "solc": {"version": "0.6.0", "optimizer": {"enabled": True, "runs": 50}},
        }
    )
    dev = config.networks["dev"]
    assert config.default_network == "dev"
    assert dev.chain_id == 5
    assert dev.gas_price == 1
    assert dev.gas is None
    assert dev.from_address == "0xabc"
    assert dev.extra == {"custom": 1}
    assert config.solc.optimizer_enabled is True
    assert config.solc.optimizer_runs == 50


def test_resolved_config_is_read_only():
    config = resolve_config({"networks": {"dev": {"url": "http://dev"}}})
    with pytest.raises(TypeError):
        config.networks["other"] = config.networks["dev"]
    with pytest.raises(AttributeError):
        config.default_network = "dev"


def test_unknown_default_network_is_not_rejected_here():
    config = resolve_config({"defaultNetwork": "ghost"})
    assert config.default_network == "ghost"
    assert "ghost" not in config.networks


def test_invalid_config_collects_errors():
    with pytest.raises(InvalidConfigError) as exc_info:
        resolve_config({"networks": {"dev": {"url": 1, "chainId": "x"}, "bad": []}})
    errors = exc_info.value.errors
    assert "networks.dev.url" in errors
    assert "networks.dev.chain_id" in errors
    assert "networks.bad" in errors


def test_load_config_file():
    with tempfile.TemporaryDirectory() as d:
        path = Path(d) / "buidler.config.yaml"
        path.write_text(
            "defaultNetwork: dev\n"
            "networks:\n"
            "  dev:\n"
            "    url: http://127.0.0.1:7545\n"
            "paths:\n"
            "  sources: src\n",
            encoding="utf-8",
        )
        config = load_config_file(path)
        assert config.networks["dev"].url == "http://127.0.0.1:7545"
        assert config.paths.config_file == path.resolve()
        assert config.paths.sources == path.resolve().parent / "src"


def test_load_missing_config_file():
    with pytest.raises(BuidlerError) as exc_info:
        load_config_file("/nonexistent/buidler.config.yaml")
    assert exc_info.value.code == "BDLR9"


def test_invalid_solc_optimizer_runs():
    with pytest.raises(InvalidConfigError) as exc_info:
        resolve_config({"solc": {"optimizer": {"runs": "many", "enabled": "yes"}, "version": 5}})
    errors = exc_info.value.errors
    assert "solc.optimizer.runs" in errors
    assert "solc.optimizer.enabled" in errors
    assert "solc.version" in errors


def test_invalid_path_types():
    with pytest.raises(InvalidConfigError) as exc_info:
        resolve_config({"paths": {"sources": 3, "root": ["a"], "cache": None}})
    errors = exc_info.value.errors
    assert "paths.sources" in errors
    assert "paths.root" in errors
    assert "paths.cache" in errors
