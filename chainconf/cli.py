#!/usr/bin/env python3
"""
链上交互配置生成工具
==================

导出 JSON Schema、写入默认配置并重新校验

运行方式：
    chainconf-setup                                # 使用默认路径
    chainconf-setup --config out/config.json --schema out/config.schema.json
    chainconf-setup --check                        # 只校验已有配置
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from chainconf.errors import ConfigSetupError
from chainconf.events import EventLogger, LoggingEventLogger, setup_logging
from chainconf.files.validator import validate_config_file
from chainconf.sequencer import run_setup
from chainconf.settings import LOG_LEVELS, Settings

console = Console()


def check_config(config_path: str, events: EventLogger) -> int:
    """只校验已有配置文件，不写入任何文件"""
    try:
        config = validate_config_file(config_path)
    except ConfigSetupError as e:
        events.error(f"Config check failed for {config_path}", e)
        return 1
    events.info("Validated config", config.to_document())
    return 0


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Blockchain app configuration setup")
    parser.add_argument(
        "--config", "-c",
        default=settings.config_path,
        help=f"配置文件路径 (默认: {settings.config_path})"
    )
    parser.add_argument(
        "--schema", "-s",
        default=settings.schema_path,
        help=f"JSON Schema 输出路径 (默认: {settings.schema_path})"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help=f"日志级别 (默认: {settings.log_level})"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="只校验已有配置文件"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = Settings()
    except PydanticValidationError as e:
        console.print(f"[red]✗ 环境配置无效[/red]\n{escape(str(e))}")
        return 1
    args = build_parser(settings).parse_args(argv)

    setup_logging(args.log_level)
    events = LoggingEventLogger()

    if args.check:
        return check_config(args.config, events)

    console.print(Panel.fit(
        f"[bold]配置生成[/bold]\n"
        f"schema: {args.schema}\n"
        f"config: {args.config}",
        border_style="blue"
    ))

    result = run_setup(args.config, args.schema, events)

    if result.ok:
        console.print("[bold green]✓ 配置生成完成！[/bold green]")
    else:
        console.print(f"[red]✗ 阶段 {result.failed_phase.value} 失败[/red]")
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
