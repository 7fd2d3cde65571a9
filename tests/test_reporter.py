"""
@PURPOSE: 问题模型与报告渲染测试
@OUTLINE:
  - test_severity_is_fixed_per_kind: 严重级别由问题类型决定
  - test_render_report_*: 文本报告结构与退出码
  - test_render_json_payload: JSON 报告结构
"""

from __future__ import annotations

import pytest

from packages.file_consistency.models import AuditResult, Issue, IssueKind, Severity
from packages.file_consistency.reporter import exit_code_for, render_json, render_report

ERROR_ISSUE = Issue(
    kind=IssueKind.DUPLICATE_FILE,
    file="/repo/b/foo.ts",
    message="检测到重复文件: 'b/foo.ts' 与 'a/Foo.js' 冲突(忽略大小写匹配)。",
    suggestion="合并为单个文件或使用不同的名称,并同步更新所有 import。",
)
WARNING_ISSUE = Issue(
    kind=IssueKind.CASE_INCONSISTENCY,
    file="/repo/src/UserService.js",
    message="文件 'UserService' 不符合预期的 camelCase 命名风格。",
    suggestion="",
)


@pytest.mark.parametrize(
    "kind,severity",
    [
        (IssueKind.FORBIDDEN_FILENAME, Severity.ERROR),
        (IssueKind.DUPLICATE_FILE, Severity.ERROR),
        (IssueKind.IMPORT_CASE_MISMATCH, Severity.ERROR),
        (IssueKind.CASE_INCONSISTENCY, Severity.WARNING),
    ],
)
def test_severity_is_fixed_per_kind(kind: IssueKind, severity: Severity) -> None:
    assert Issue(kind=kind, file="x", message="m").severity == severity


def test_render_report_orders_by_severity() -> None:
    result = AuditResult(root="/repo", files_scanned=7, issues=(WARNING_ISSUE, ERROR_ISSUE))

    text, code = render_report(result)

    assert code == 1
    assert text.index("ERROR (1 个问题):") < text.index("WARNING (1 个问题):")
    assert "INFO" not in text
    assert "   文件: /repo/b/foo.ts" in text
    assert "   💡 合并为单个文件" in text
    assert "扫描文件总数: 7" in text
    assert "问题总数: 2" in text
    assert "错误: 1" in text
    assert "警告: 1" in text
    assert text.rstrip().endswith("❌ 请先修复错误再继续。")


def test_render_report_skips_empty_suggestion() -> None:
    result = AuditResult(root="/repo", files_scanned=1, issues=(WARNING_ISSUE,))

    text, _ = render_report(result)

    assert "💡" not in text


def test_render_report_warnings_do_not_fail() -> None:
    result = AuditResult(root="/repo", files_scanned=3, issues=(WARNING_ISSUE, WARNING_ISSUE))

    text, code = render_report(result)

    assert code == 0
    assert "WARNING (2 个问题):" in text
    assert "请先修复错误" not in text


def test_render_report_without_issues() -> None:
    result = AuditResult(root="/repo", files_scanned=3, issues=())

    text, code = render_report(result)

    assert code == 0
    assert "未发现问题" in text
    assert "扫描文件总数: 3" in text
    assert "问题总数: 0" in text


def test_exit_code_law() -> None:
    assert exit_code_for(AuditResult(root="/repo", files_scanned=0, issues=())) == 0
    assert exit_code_for(AuditResult(root="/repo", files_scanned=1, issues=(WARNING_ISSUE,))) == 0
    assert exit_code_for(AuditResult(root="/repo", files_scanned=1, issues=(ERROR_ISSUE,))) == 1


def test_render_json_payload() -> None:
    result = AuditResult(root="/repo", files_scanned=2, issues=(ERROR_ISSUE, WARNING_ISSUE))

    payload, code = render_json(result)

    assert code == 1
    assert payload["root"] == "/repo"
    assert payload["summary"] == {
        "files_scanned": 2,
        "total_issues": 2,
        "errors": 1,
        "warnings": 1,
        "infos": 0,
    }
    assert payload["issues"][0] == {
        "kind": "duplicate_file",
        "severity": "error",
        "file": "/repo/b/foo.ts",
        "message": ERROR_ISSUE.message,
        "suggestion": ERROR_ISSUE.suggestion,
    }
