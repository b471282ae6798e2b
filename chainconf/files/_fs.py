"""文件系统辅助函数：OSError 统一转换为 FilesystemError"""

import json
from pathlib import Path
from typing import Any, Union

from chainconf.errors import FilesystemError, ParseError

PathLike = Union[str, Path]


def ensure_parent_dir(path: PathLike) -> None:
    """创建目标文件的父目录（已存在时不报错）"""
    parent = Path(path).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except (OSError, ValueError) as e:
        raise FilesystemError(str(parent), "create directory", e) from e


def write_json(path: PathLike, data: Any) -> None:
    """以缩进格式写入 JSON，覆盖已有文件"""
    text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    try:
        Path(path).write_text(text, encoding="utf-8")
    except (OSError, ValueError) as e:
        raise FilesystemError(str(path), "write", e) from e


def read_text(path: PathLike) -> str:
    """读取完整文本内容"""
    try:
        return Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(str(path), f"not valid UTF-8 text ({e.reason})") from e
    except (OSError, ValueError) as e:
        raise FilesystemError(str(path), "read", e) from e


def file_size(path: PathLike) -> int:
    """文件字节数"""
    try:
        return Path(path).stat().st_size
    except (OSError, ValueError) as e:
        raise FilesystemError(str(path), "stat", e) from e
