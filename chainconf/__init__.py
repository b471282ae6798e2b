"""
链上交互配置生成

导出配置 JSON Schema、写入默认配置并校验
"""

from chainconf.errors import (
    ConfigSetupError,
    FilesystemError,
    ParseError,
    ValidationError,
    FieldViolation,
)
from chainconf.events import EventLogger, LoggingEventLogger
from chainconf.models.config import Configuration, default_config
from chainconf.sequencer import SetupPhase, SetupResult, run_setup

__all__ = [
    "ConfigSetupError",
    "FilesystemError",
    "ParseError",
    "ValidationError",
    "FieldViolation",
    "EventLogger",
    "LoggingEventLogger",
    "Configuration",
    "default_config",
    "SetupPhase",
    "SetupResult",
    "run_setup",
]
