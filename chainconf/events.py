"""
事件日志

配置流程不直接依赖全局日志对象，而是接收一个显式传入的 EventLogger。
默认实现转发到标准 logging，终端输出由 rich 着色。
"""

import json
import logging
from typing import Any, Dict, Optional, Protocol

from rich.logging import RichHandler


class EventLogger(Protocol):
    """日志协作者接口"""

    def info(self, message: str, payload: Optional[Dict[str, Any]] = None) -> None:
        ...

    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        ...


class LoggingEventLogger:
    """基于标准 logging 的事件日志"""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("chainconf")

    def info(self, message: str, payload: Optional[Dict[str, Any]] = None) -> None:
        if payload is None:
            self._logger.info(message)
        else:
            rendered = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
            self._logger.info(f"{message}\n{rendered}")

    def error(self, message: str, cause: Optional[BaseException] = None) -> None:
        if cause is None:
            self._logger.error(message)
            return
        self._logger.error(f"{message}: {cause}")
        # 完整堆栈只在 DEBUG 级别输出
        self._logger.debug("Traceback", exc_info=(type(cause), cause, cause.__traceback__))


def setup_logging(level: str = "INFO") -> None:
    """配置根日志，使用 RichHandler 输出彩色日志"""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, markup=False, show_path=False)],
        force=True,
    )
