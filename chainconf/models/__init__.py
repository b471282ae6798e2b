"""
配置数据模型

模块：
- config: 配置结构、默认值与校验约束
"""

from chainconf.models.config import (
    ADDRESS_PATTERN,
    PRIVATE_KEY_PATTERN,
    ZERO_ADDRESS,
    ZERO_PRIVATE_KEY,
    DEFAULT_RPC_URL,
    DEFAULT_PRIVATE_KEY_FILE,
    DEFAULT_SCHEMA_REF,
    NetworkConfig,
    ContractAddresses,
    PrivateKeys,
    ApplicationConfig,
    ContractsConfig,
    Configuration,
    default_config,
)

__all__ = [
    "ADDRESS_PATTERN",
    "PRIVATE_KEY_PATTERN",
    "ZERO_ADDRESS",
    "ZERO_PRIVATE_KEY",
    "DEFAULT_RPC_URL",
    "DEFAULT_PRIVATE_KEY_FILE",
    "DEFAULT_SCHEMA_REF",
    "NetworkConfig",
    "ContractAddresses",
    "PrivateKeys",
    "ApplicationConfig",
    "ContractsConfig",
    "Configuration",
    "default_config",
]
