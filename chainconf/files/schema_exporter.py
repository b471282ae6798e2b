"""
Schema 导出

将配置模型转换为 JSON Schema 并写入文件，写入后通过 stat 确认文件大小
"""

from typing import Any, Dict, Type

from pydantic import BaseModel

from chainconf.events import EventLogger
from chainconf.files._fs import PathLike, ensure_parent_dir, file_size, write_json
from chainconf.models.config import Configuration

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"

# 配置文件中的 $schema 标记，仅供编辑器发现 schema
_SCHEMA_MARKER_PROPERTY = {
    "type": "string",
    "description": "Relative path to this JSON Schema (editor hint, not validated)",
}


def build_schema_document(model: Type[BaseModel] = Configuration) -> Dict[str, Any]:
    """生成 JSON Schema 文档"""
    schema = model.model_json_schema(by_alias=True, mode="validation")

    document: Dict[str, Any] = {"$schema": JSON_SCHEMA_DIALECT}
    document.update(schema)
    properties = {"$schema": dict(_SCHEMA_MARKER_PROPERTY)}
    properties.update(schema.get("properties", {}))
    document["properties"] = properties
    return document


def export_schema(
    path: PathLike,
    events: EventLogger,
    model: Type[BaseModel] = Configuration,
) -> int:
    """导出 schema 到文件

    Args:
        path: 目标文件路径
        events: 日志协作者
        model: 要导出的模型

    Returns:
        写入文件的字节数
    """
    try:
        document = build_schema_document(model)
        events.info(f"Attempting to write schema to {path}")

        ensure_parent_dir(path)
        write_json(path, document)
        events.info(f"Successfully wrote schema to {path}")

        size = file_size(path)
        events.info(f"File size: {size} bytes")
        return size
    except Exception as e:
        events.error("Failed to export schema", e)
        raise
