"""
配置文件校验

读取 → 解析 JSON → 按配置模型校验，返回填充默认值后的 Configuration。
错误不在此处恢复，直接抛给调用方。
"""

import json
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from chainconf.errors import FieldViolation, ParseError, ValidationError
from chainconf.files._fs import PathLike, read_text
from chainconf.models.config import Configuration


def parse_config_text(text: str, source: str = "<string>") -> Any:
    """解析 JSON 文本（拒绝 NaN / Infinity 等非标准字面量）"""

    def reject_constant(name: str) -> Any:
        raise ParseError(source, f"invalid JSON literal {name}")

    try:
        return json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(source, e.msg, line=e.lineno, column=e.colno) from e


def _to_violations(exc: PydanticValidationError) -> List[FieldViolation]:
    violations = []
    for err in exc.errors():
        path = ".".join(str(part) for part in err["loc"]) or "<root>"
        violations.append(
            FieldViolation(
                path=path,
                constraint=err["type"],
                message=err["msg"],
                value=err.get("input"),
            )
        )
    return violations


def validate_config_data(data: Any, source: Optional[str] = None) -> Configuration:
    """校验已解析的配置数据

    Raises:
        ValidationError: 任一字段不满足约束
    """
    try:
        return Configuration.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(_to_violations(e), path=source) from e


def validate_config_file(path: PathLike) -> Configuration:
    """读取并校验配置文件

    Raises:
        FilesystemError: 读取失败
        ParseError: 内容不是合法 JSON
        ValidationError: 内容不满足约束
    """
    text = read_text(path)
    data = parse_config_text(text, source=str(path))
    return validate_config_data(data, source=str(path))
