"""
配置文件读写

模块：
- default_writer: 默认配置写入
- schema_exporter: JSON Schema 导出
- validator: 配置文件读取与校验
"""

from chainconf.files.default_writer import (
    build_default_document,
    schema_reference,
    write_default_config,
)
from chainconf.files.schema_exporter import build_schema_document, export_schema
from chainconf.files.validator import (
    parse_config_text,
    validate_config_data,
    validate_config_file,
)

__all__ = [
    "build_default_document",
    "schema_reference",
    "write_default_config",
    "build_schema_document",
    "export_schema",
    "parse_config_text",
    "validate_config_data",
    "validate_config_file",
]
