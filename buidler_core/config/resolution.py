"""项目配置解析。

把用户配置（YAML 文件或 dict，键可用 camelCase 或 snake_case）与默认值合并，
产出只读的 ResolvedConfig。Environment 构造时才校验选中的网络是否存在，
因为 CLI 的 --network 可以覆盖 default_network。
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml

from buidler_core.domain.errors_list import ERRORS
from buidler_core.domain.exceptions import BuidlerError, InvalidConfigError
from buidler_core.domain.models import NetworkConfig, ProjectPaths, ResolvedConfig, SolcConfig


DEFAULT_NETWORK_NAME = "localhost"
DEFAULT_SOLC_VERSION = "0.5.15"
DEFAULT_NETWORKS: Mapping[str, Mapping[str, Any]] = {
    "localhost": {"url": "http://127.0.0.1:8545"},
}
DEFAULT_PATHS = {
    "sources": "contracts",
    "cache": "cache",
    "artifacts": "artifacts",
    "tests": "test",
}

_NETWORK_KEYS = {
    "url": "url",
    "chainId": "chain_id",
    "chain_id": "chain_id",
    "from": "from_address",
    "from_address": "from_address",
    "gas": "gas",
    "gasPrice": "gas_price",
    "gas_price": "gas_price",
    "timeout": "timeout",
    "accounts": "accounts",
}


def _pick(data: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return default


def _resolve_network(name: str, raw: Any, errors: List[str]) -> Optional[NetworkConfig]:
    if not isinstance(raw, Mapping):
        errors.append(f"networks.{name} should be a mapping")
        return None

    known: Dict[str, Any] = {}
    extra: Dict[str, Any] = {}
    for key, value in raw.items():
        target = _NETWORK_KEYS.get(key)
        if target is None:
            extra[key] = value
        else:
            known[target] = value

    url = known.get("url")
    if url is not None and not isinstance(url, str):
        errors.append(f"networks.{name}.url should be a string")
    for field_name in ("chain_id", "gas_price"):
        value = known.get(field_name)
        if value is not None and (not isinstance(value, int) or isinstance(value, bool)):
            errors.append(f"networks.{name}.{field_name} should be an integer")
    gas = known.get("gas")
    if gas == "auto":
        known["gas"] = None
    elif gas is not None and (not isinstance(gas, int) or isinstance(gas, bool)):
        errors.append(f"networks.{name}.gas should be an integer or 'auto'")
    timeout = known.get("timeout")
    if timeout is not None and (not isinstance(timeout, (int, float)) or timeout <= 0):
        errors.append(f"networks.{name}.timeout should be a positive number")
    accounts = known.get("accounts", ())
    if not isinstance(accounts, (list, tuple)) or not all(isinstance(a, str) for a in accounts):
        errors.append(f"networks.{name}.accounts should be a list of strings")
        accounts = ()
    known["accounts"] = tuple(accounts)

    return NetworkConfig(extra=MappingProxyType(extra), **known)


def _resolve_paths(raw: Mapping[str, Any], config_path: Optional[Path]) -> ProjectPaths:
    if config_path is not None:
        default_root = config_path.parent
    else:
        default_root = Path.cwd()
    root = Path(raw.get("root", default_root)).expanduser()
    if not root.is_absolute():
        root = default_root / root
    root = root.resolve()

    def _under_root(key: str) -> Path:
        value = Path(raw.get(key, DEFAULT_PATHS[key])).expanduser()
        return value if value.is_absolute() else root / value

    return ProjectPaths(
        root=root,
        config_file=config_path,
        sources=_under_root("sources"),
        cache=_under_root("cache"),
        artifacts=_under_root("artifacts"),
        tests=_under_root("tests"),
    )


def _resolve_solc(raw: Any, errors: List[str]) -> SolcConfig:
    if not isinstance(raw, Mapping):
        errors.append("solc should be a mapping")
        return SolcConfig(version=DEFAULT_SOLC_VERSION)
    optimizer = raw.get("optimizer", {}) or {}
    if not isinstance(optimizer, Mapping):
        errors.append("solc.optimizer should be a mapping")
        optimizer = {}
    version = raw.get("version", DEFAULT_SOLC_VERSION)
    if not isinstance(version, str):
        errors.append("solc.version should be a string")
        version = DEFAULT_SOLC_VERSION
    enabled = optimizer.get("enabled", False)
    if not isinstance(enabled, bool):
        errors.append("solc.optimizer.enabled should be a boolean")
        enabled = False
    runs = optimizer.get("runs", 200)
    if not isinstance(runs, int) or isinstance(runs, bool) or runs < 0:
        errors.append("solc.optimizer.runs should be a non-negative integer")
        runs = 200
    return SolcConfig(version=version, optimizer_enabled=enabled, optimizer_runs=runs)


def resolve_config(
    user_config: Optional[Mapping[str, Any]] = None,
    config_path: Optional[Union[str, Path]] = None,
) -> ResolvedConfig:
    """合并默认值与用户配置，返回 ResolvedConfig。

    Raises:
        InvalidConfigError: 配置结构不合法，错误信息汇总在 errors 字段。
    """

    user_config = user_config or {}
    if not isinstance(user_config, Mapping):
        raise InvalidConfigError("config should be a mapping")
    path = Path(config_path).expanduser().resolve() if config_path else None
    errors: List[str] = []

    default_network = _pick(user_config, "defaultNetwork", "default_network", default=DEFAULT_NETWORK_NAME)
    if not isinstance(default_network, str):
        errors.append("defaultNetwork should be a string")

    raw_networks = dict(DEFAULT_NETWORKS)
    user_networks = user_config.get("networks", {}) or {}
    if not isinstance(user_networks, Mapping):
        errors.append("networks should be a mapping")
        user_networks = {}
    raw_networks.update(user_networks)

    networks: Dict[str, NetworkConfig] = {}
    for name, raw in raw_networks.items():
        network = _resolve_network(str(name), raw, errors)
        if network is not None:
            networks[str(name)] = network

    raw_paths = user_config.get("paths", {}) or {}
    if not isinstance(raw_paths, Mapping):
        errors.append("paths should be a mapping")
        raw_paths = {}
    for key in ("root", *DEFAULT_PATHS):
        if key in raw_paths and not isinstance(raw_paths[key], (str, Path)):
            errors.append(f"paths.{key} should be a string")
    solc = _resolve_solc(user_config.get("solc", {}) or {}, errors)

    if errors:
        raise InvalidConfigError("; ".join(errors))

    return ResolvedConfig(
        default_network=default_network,
        networks=networks,
        solc=solc,
        paths=_resolve_paths(raw_paths, path),
    )


def load_config_file(config_path: Union[str, Path]) -> ResolvedConfig:
    """读取 YAML 配置文件并解析。"""

    path = Path(config_path).expanduser()
    if not path.exists():
        raise BuidlerError(ERRORS.GENERAL.CONFIG_FILE_NOT_FOUND, {"path": str(path)})
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise InvalidConfigError(f"can't parse {path}: {exc}") from exc
    return resolve_config(data, path)
