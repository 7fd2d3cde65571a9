"""File Consistency Audit - 文件一致性审计命令行工具

检测"文件混乱": 创建 FooUpdated.js、foo.js/Foo.js 之类的新版本文件,而不是原地修改原文件。
存在 error 级别问题时以非零状态退出,可直接用于 CI。

Examples:
    审计当前目录::

        $ python -m apps.cli.file_audit

    审计指定目录并输出 JSON::

        $ python -m apps.cli.file_audit src --format json

    使用配置文件::

        $ python -m apps.cli.file_audit src --config file-audit.yaml
"""

import json
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from loguru import logger
from rich.console import Console

from packages.file_consistency import __version__
from packages.file_consistency.auditor import run_audit
from packages.file_consistency.config import LOG_LEVELS, load_config
from packages.file_consistency.errors import AuditError
from packages.file_consistency.logger import setup_logger
from packages.file_consistency.reporter import render_json, render_report

app = typer.Typer(
    name="file-consistency-audit",
    help="文件一致性审计工具: 检测重复/改名副本文件和导入大小写问题",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """输出格式枚举"""

    TEXT = "text"
    JSON = "json"


def _print_phase(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


@app.command()
def audit(
    directory: Path = typer.Argument(Path("."), help="要审计的根目录,默认当前目录"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="配置文件路径(.yaml/.yml/.json)",
        dir_okay=False,
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        help="输出格式",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="日志级别,覆盖配置文件和环境变量",
    ),
) -> None:
    """审计目录中的文件命名和导入一致性

    Args:
        directory: 要审计的根目录
        config_path: 配置文件路径(可选)
        output_format: 输出格式(text 或 json)
        log_level: 日志级别(可选)
    """
    if log_level is not None and log_level.upper() not in LOG_LEVELS:
        raise typer.BadParameter(f"可选值: {', '.join(LOG_LEVELS)}", param_hint="--log-level")

    try:
        config = load_config(config_path)
        if log_level:
            level = log_level.upper()
        else:
            level = "DEBUG" if config.debug else config.log_level
        setup_logger("file-audit", level=level)
        logger.debug(f"file-consistency-audit v{__version__}, 配置: {config.to_dict()}")

        on_phase = _print_phase if output_format == OutputFormat.TEXT else None
        result = run_audit(directory, config.build_rules(), on_phase=on_phase)

    except AuditError as e:
        logger.error(f"审计失败: {e}")
        err_console.print(
            f"❌ 审计失败: {e}", markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        payload, code = render_json(result)
        console.print_json(json.dumps(payload, ensure_ascii=False))
    else:
        text, code = render_report(result)
        console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)

    raise typer.Exit(code=code)


def main() -> None:
    """控制台入口."""

    app()


if __name__ == "__main__":
    main()
