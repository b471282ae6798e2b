"""
配置生成错误类型

- FilesystemError: 目录创建、写入、读取、stat 失败
- ParseError: 文件内容不是合法 JSON
- ValidationError: JSON 合法但不满足配置约束
"""

from dataclasses import dataclass
from typing import Any, List, Optional


class ConfigSetupError(Exception):
    """配置生成流程中所有已分类错误的基类"""


class FilesystemError(ConfigSetupError):
    """文件系统操作失败"""

    def __init__(self, path: str, operation: str, cause: Exception):
        self.path = str(path)
        self.operation = operation
        self.cause = cause
        reason = getattr(cause, "strerror", None) or str(cause)
        super().__init__(f"Failed to {operation} {self.path}: {reason}")


class ParseError(ConfigSetupError):
    """文件内容无法解析为 JSON"""

    def __init__(
        self,
        path: str,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.path = str(path)
        self.message = message
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"Failed to parse {self.path}: {message}{location}")


@dataclass(frozen=True)
class FieldViolation:
    """单个字段的约束违反"""
    path: str           # 点分路径，如 network.rpcUrl
    constraint: str     # 约束名，如 string_pattern_mismatch
    message: str
    value: Any = None


class ValidationError(ConfigSetupError):
    """配置不满足约束，携带全部字段级错误"""

    def __init__(self, violations: List[FieldViolation], path: Optional[str] = None):
        self.violations = list(violations)
        self.path = str(path) if path is not None else None
        source = f" for {self.path}" if self.path else ""
        details = "\n".join(
            f"- {v.path}: {v.message} ({v.constraint})" for v in self.violations
        )
        super().__init__(f"Configuration validation failed{source}:\n{details}")

    @property
    def fields(self) -> List[str]:
        """出错字段路径列表"""
        return [v.path for v in self.violations]
