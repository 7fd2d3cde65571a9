"""
@PURPOSE: 审计报告渲染,把 AuditResult 转换为文本/JSON 和进程退出码
@OUTLINE:
  - SEVERITY_ORDER: 报告中严重级别的输出顺序
  - def exit_code_for(): 根据结果计算退出码
  - def render_report(): 渲染文本报告
  - def render_json(): 渲染 JSON 报告数据
@GOTCHAS:
  - 退出码只由 error 级别问题决定,warning 再多也返回 0
  - 渲染函数不做任何输出,由调用方决定写到哪里
@DEPENDENCIES:
  - 内部: .models
"""

from __future__ import annotations

from typing import Any

from packages.file_consistency.models import AuditResult, Severity

SEVERITY_ORDER: tuple[Severity, ...] = (Severity.ERROR, Severity.WARNING, Severity.INFO)

SEVERITY_ICONS: dict[Severity, str] = {
    Severity.ERROR: "❌",
    Severity.WARNING: "⚠️ ",
    Severity.INFO: "ℹ️ ",
}

BANNER = "📊 文件一致性审计报告"
EXIT_OK = 0
EXIT_ERRORS = 1


def exit_code_for(result: AuditResult) -> int:
    return EXIT_ERRORS if result.has_errors else EXIT_OK


def render_report(result: AuditResult) -> tuple[str, int]:
    """渲染文本报告.

    结构: 标题 -> 按 error/warning/info 分组的问题 -> 汇总。

    Args:
        result: 审计结果

    Returns:
        (报告文本, 退出码)
    """
    lines: list[str] = ["", BANNER, "=" * 32, ""]

    if not result.issues:
        lines.append("✅ 未发现问题! 文件命名保持一致。")

    for severity in SEVERITY_ORDER:
        issues = result.by_severity(severity)
        if not issues:
            continue

        lines.append("")
        lines.append(f"{severity.value.upper()} ({len(issues)} 个问题):")
        lines.append("-" * 50)
        for issue in issues:
            lines.append("")
            lines.append(f"{SEVERITY_ICONS[severity]} {issue.message}")
            lines.append(f"   文件: {issue.file}")
            if issue.suggestion:
                lines.append(f"   💡 {issue.suggestion}")

    summary = result.summary()
    lines.extend(
        [
            "",
            "📋 汇总:",
            f"   扫描文件总数: {summary['files_scanned']}",
            f"   问题总数: {summary['total_issues']}",
            f"   错误: {summary['errors']}",
            f"   警告: {summary['warnings']}",
            f"   提示: {summary['infos']}",
        ]
    )

    code = exit_code_for(result)
    if code != EXIT_OK:
        lines.extend(["", "❌ 请先修复错误再继续。"])

    return "\n".join(lines), code


def render_json(result: AuditResult) -> tuple[dict[str, Any], int]:
    """渲染 JSON 报告数据.

    Returns:
        (可序列化的字典, 退出码)
    """
    payload = {
        "root": result.root,
        "summary": result.summary(),
        "issues": [issue.to_dict() for issue in result.issues],
    }
    return payload, exit_code_for(result)
