"""
链上交互配置数据模型

定义配置文件的结构、默认值与校验规则。
每个字段只声明一次（类型 + 默认值 + 约束），由 pydantic 统一解释：
- 校验任意解析后的输入
- 为缺失字段填充默认值
- 导出 JSON Schema
"""

from typing import Annotated, Any, Dict

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError


# ===== 约束与默认值 =====

ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"
PRIVATE_KEY_PATTERN = r"^0x[a-fA-F0-9]{64}$"

ZERO_ADDRESS = "0x" + "0" * 40
ZERO_PRIVATE_KEY = "0x" + "0" * 64

DEFAULT_RPC_URL = "https://ethereum.api.example.com"
DEFAULT_PRIVATE_KEY_FILE = "./.projects/dir/pks.json"
DEFAULT_SCHEMA_REF = "./config.schema.json"

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """校验URL格式，保留原始字符串（AnyUrl 会补全末尾的 /）"""
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError:
        raise PydanticCustomError("url", "Invalid url")
    return value


UrlStr = Annotated[str, AfterValidator(_check_url)]


class _Section(BaseModel):
    """配置段基类：磁盘上使用 camelCase 键，构造后不可变"""
    model_config = ConfigDict(alias_generator=to_camel, frozen=True)


class NetworkConfig(_Section):
    """网络配置"""
    rpc_url: UrlStr = Field(
        default=DEFAULT_RPC_URL,
        description="JSON-RPC endpoint URL",
        json_schema_extra={"format": "uri"},
    )


class ContractAddresses(_Section):
    """合约地址"""
    token: str = Field(default=ZERO_ADDRESS, pattern=ADDRESS_PATTERN, description="Token contract address")
    pair: str = Field(default=ZERO_ADDRESS, pattern=ADDRESS_PATTERN, description="Pair contract address")
    router: str = Field(default=ZERO_ADDRESS, pattern=ADDRESS_PATTERN, description="Router contract address")


class PrivateKeys(_Section):
    """私钥（占位值，真实私钥由外部文件管理）"""
    base_wallet: str = Field(
        default=ZERO_PRIVATE_KEY,
        pattern=PRIVATE_KEY_PATTERN,
        description="Base wallet private key",
    )


class ApplicationConfig(_Section):
    """应用配置"""
    private_key_file: str = Field(
        default=DEFAULT_PRIVATE_KEY_FILE,
        description="Path to the private key file (never read by this tool)",
    )


class ContractsConfig(_Section):
    """合约相关配置"""
    contract_addresses: ContractAddresses
    private_keys: PrivateKeys
    application: ApplicationConfig


class Configuration(_Section):
    """完整配置

    各配置段必须存在，段内字段缺失时使用默认值。
    未知键（包括 $schema 标记）被忽略。
    """
    network: NetworkConfig
    contracts: ContractsConfig

    def to_document(self) -> Dict[str, Any]:
        """转换为磁盘格式（camelCase 键）"""
        return self.model_dump(mode="json", by_alias=True)


# 所有段均为空对象的最小文档，校验后即得到全部默认值
_SKELETON: Dict[str, Any] = {
    "network": {},
    "contracts": {
        "contractAddresses": {},
        "privateKeys": {},
        "application": {},
    },
}


def default_config() -> Configuration:
    """返回全部取默认值的配置"""
    return Configuration.model_validate(_SKELETON)
