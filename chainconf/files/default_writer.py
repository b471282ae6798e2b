"""
默认配置写入器

生成默认配置文档（包含供编辑器使用的 $schema 标记）并写入磁盘
"""

import os
from pathlib import PurePath
from typing import Any, Dict

from chainconf.events import EventLogger
from chainconf.files._fs import PathLike, ensure_parent_dir, write_json
from chainconf.models.config import DEFAULT_SCHEMA_REF, default_config


def schema_reference(config_path: PathLike, schema_path: PathLike) -> str:
    """计算配置文件指向 schema 文件的相对路径

    Args:
        config_path: 配置文件路径
        schema_path: schema 文件路径

    Returns:
        POSIX 风格相对路径，如 ./config.schema.json
    """
    start = os.path.dirname(os.path.abspath(config_path))
    relative = os.path.relpath(os.path.abspath(schema_path), start=start)
    ref = PurePath(relative).as_posix()
    if not ref.startswith("."):
        ref = f"./{ref}"
    return ref


def build_default_document(schema_ref: str = DEFAULT_SCHEMA_REF) -> Dict[str, Any]:
    """构建默认配置文档"""
    document: Dict[str, Any] = {"$schema": schema_ref}
    document.update(default_config().to_document())
    return document


def write_default_config(
    path: PathLike,
    events: EventLogger,
    schema_ref: str = DEFAULT_SCHEMA_REF,
) -> Dict[str, Any]:
    """写入默认配置，覆盖已有文件

    Args:
        path: 目标文件路径
        events: 日志协作者
        schema_ref: $schema 字段的值

    Returns:
        写入的文档
    """
    document = build_default_document(schema_ref)
    ensure_parent_dir(path)
    write_json(path, document)
    events.info(f"Default config written to {path}")
    return document
