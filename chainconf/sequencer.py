"""
配置生成流程

按固定顺序执行：导出 schema → 写入默认配置 → 校验配置。
任一阶段失败立即终止，不重试；结果以 SetupResult 返回，由调用方决定退出码。
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from chainconf.errors import ConfigSetupError
from chainconf.events import EventLogger
from chainconf.files._fs import PathLike
from chainconf.files.default_writer import schema_reference, write_default_config
from chainconf.files.schema_exporter import export_schema
from chainconf.files.validator import validate_config_file
from chainconf.models.config import Configuration


class SetupPhase(str, Enum):
    """流程阶段"""
    EXPORT_SCHEMA = "export_schema"
    WRITE_DEFAULT = "write_default"
    VALIDATE = "validate"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SetupResult:
    """流程结果"""
    phase: SetupPhase
    config: Optional[Configuration] = None
    failed_phase: Optional[SetupPhase] = None
    error: Optional[ConfigSetupError] = None
    files_written: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.phase == SetupPhase.DONE

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


def run_setup(
    config_path: PathLike,
    schema_path: PathLike,
    events: EventLogger,
    schema_ref: Optional[str] = None,
) -> SetupResult:
    """执行完整配置生成流程

    Args:
        config_path: 配置文件路径
        schema_path: schema 文件路径
        events: 日志协作者
        schema_ref: 写入配置的 $schema 值，默认按两个路径计算相对路径

    Returns:
        DONE（含校验后的配置）或 FAILED（含失败阶段与错误）
    """
    if schema_ref is None:
        schema_ref = schema_reference(config_path, schema_path)

    result = SetupResult(phase=SetupPhase.EXPORT_SCHEMA)
    try:
        export_schema(schema_path, events)
        result.files_written.append(str(schema_path))

        result.phase = SetupPhase.WRITE_DEFAULT
        write_default_config(config_path, events, schema_ref=schema_ref)
        result.files_written.append(str(config_path))

        result.phase = SetupPhase.VALIDATE
        config = validate_config_file(config_path)
    except ConfigSetupError as e:
        events.error(
            f"An error occurred during configuration setup ({result.phase.value})", e
        )
        result.failed_phase = result.phase
        result.phase = SetupPhase.FAILED
        result.error = e
        return result

    result.phase = SetupPhase.DONE
    result.config = config
    events.info("Validated config", config.to_document())
    return result
