"""节点 Provider 集成层。

该包下的模块负责：
- 定义 Provider 协议 (base)。
- 提供 JSON-RPC HTTP 实现 (http_provider)。
- 根据网络配置创建 Provider (create_provider)。
"""

from typing import Optional

from buidler_core.config.settings import settings
from buidler_core.domain.exceptions import ProviderConfigError
from buidler_core.domain.models import NetworkConfig, ProjectPaths
from buidler_core.infrastructure.logging.logger import get_logger
from buidler_core.providers.base import EthereumProvider
from buidler_core.providers.http_provider import HttpProvider


log = get_logger("providers")


def create_provider(
    network_name: str,
    network_config: NetworkConfig,
    solc_version: Optional[str] = None,
    paths: Optional[ProjectPaths] = None,
) -> EthereumProvider:
    """根据网络配置创建 Provider。目前只支持带 url 的 HTTP 网络。"""

    if not network_config.url:
        raise ProviderConfigError(network=network_name)
    timeout = network_config.timeout or settings.http_timeout
    log.debug("Creating HTTP provider for %s at %s (solc %s)", network_name, network_config.url, solc_version)
    return HttpProvider(network_config.url, timeout=timeout, network_name=network_name)


__all__ = ["EthereumProvider", "HttpProvider", "create_provider"]
