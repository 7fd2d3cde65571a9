"""
@PURPOSE: 四项规则检查,每项都是 Inventory -> list[Issue] 的函数
@OUTLINE:
  - def check_forbidden_filenames(): 禁用文件名模式检查
  - def check_case_consistency(): 命名风格一致性检查
  - def check_duplicate_files(): 忽略大小写的重复文件检查
  - def check_import_consistency(): 导入路径大小写检查
  - CHECKS: 按执行顺序排列的 (阶段名称, 检查函数)
@GOTCHAS:
  - 禁用模式检查会对每个命中的模式分别报告,不是"命中一条即停"
  - 重复检查以遍历顺序中第一次出现的文件为准,只报告后出现的文件
  - 导入检查只关心大小写漂移,真正缺失的文件静默忽略
@DEPENDENCIES:
  - 内部: .case_rules, .models, .patterns, .scanner
"""

from __future__ import annotations

import os
from collections.abc import Callable, Hashable
from pathlib import Path

from packages.file_consistency.case_rules import classify_case, infer_expected_case, matches_case
from packages.file_consistency.models import FileRecord, ImportEdge, Issue, IssueKind
from packages.file_consistency.patterns import DEFAULT_RULES, RuleSet
from packages.file_consistency.scanner import Inventory

Check = Callable[[Inventory, RuleSet], list[Issue]]


# ========== 禁用文件名 ==========


def is_allowed(record: FileRecord, rules: RuleSet = DEFAULT_RULES) -> bool:
    """检查文件是否命中例外模式(路径或文件名任一命中即可)."""
    full_path = Path(record.path).as_posix()
    return any(
        rule.search(full_path) or rule.search(record.filename) for rule in rules.allowed
    )


def check_forbidden_filenames(inventory: Inventory, rules: RuleSet = DEFAULT_RULES) -> list[Issue]:
    """检查禁用文件名模式.

    Args:
        inventory: 扫描结果
        rules: 规则集

    Returns:
        每个 (文件, 命中模式) 一条 error
    """
    issues: list[Issue] = []

    for record in inventory:
        if is_allowed(record, rules):
            continue

        for rule in rules.forbidden:
            if rule.search(record.filename) or rule.search(record.stem):
                issues.append(
                    Issue(
                        kind=IssueKind.FORBIDDEN_FILENAME,
                        file=record.path,
                        message=(
                            f"文件 '{record.filename}' 使用了禁用模式 '{rule.source}'"
                            f"({rule.rationale})。这通常意味着\"文件混乱\": "
                            "应该更新原文件,而不是创建新版本。"
                        ),
                        suggestion=(
                            f"直接在原文件中修改,不要创建 '{record.filename}'。保持命名一致。"
                        ),
                    )
                )

    return issues


# ========== 命名风格 ==========


def check_case_consistency(inventory: Inventory, rules: RuleSet = DEFAULT_RULES) -> list[Issue]:
    """检查文件名是否符合推断出的命名风格."""
    issues: list[Issue] = []

    for record in inventory:
        expected = infer_expected_case(record, rules.tooling_extensions)
        if expected is None or matches_case(record.stem, expected):
            continue

        current = classify_case(record.stem)
        current_note = f"(当前: {', '.join(c.value for c in current)})" if current else ""
        issues.append(
            Issue(
                kind=IssueKind.CASE_INCONSISTENCY,
                file=record.path,
                message=f"文件 '{record.stem}' 不符合预期的 {expected.value} 命名风格{current_note}。",
                suggestion=f"按 {expected.value} 风格重命名,或同步更新相关 import。",
            )
        )

    return issues


# ========== 重复文件 ==========


def _duplicate_key(record: FileRecord, scope: str) -> Hashable:
    if scope == "directory":
        return (record.relative_directory, record.stem.lower())
    return record.stem.lower()


def check_duplicate_files(inventory: Inventory, rules: RuleSet = DEFAULT_RULES) -> list[Issue]:
    """检查忽略大小写后 stem 相同的文件.

    默认不区分目录和扩展名: src/index.js 与 lib/Index.ts 也视为重复。
    """
    issues: list[Issue] = []
    first_seen: dict[Hashable, FileRecord] = {}

    for record in inventory:
        key = _duplicate_key(record, rules.duplicate_scope)
        existing = first_seen.get(key)
        if existing is None:
            first_seen[key] = record
            continue

        issues.append(
            Issue(
                kind=IssueKind.DUPLICATE_FILE,
                file=record.path,
                message=(
                    f"检测到重复文件: '{record.relative_path}' 与 "
                    f"'{existing.relative_path}' 冲突(忽略大小写匹配)。"
                ),
                suggestion="合并为单个文件或使用不同的名称,并同步更新所有 import。",
            )
        )

    return issues


# ========== 导入大小写 ==========


def _list_dir(directory: str) -> list[str] | None:
    try:
        return sorted(os.listdir(directory))
    except OSError:
        return None


def _corrected_specifier(specifier: str, corrected_name: str) -> str:
    head, sep, _ = specifier.rstrip("/").rpartition("/")
    return f"{head}{sep}{corrected_name}"


def _check_import(edge: ImportEdge, rules: RuleSet) -> Issue | None:
    resolved = os.path.normpath(os.path.join(os.path.dirname(edge.from_path), edge.specifier))
    parent, target = os.path.split(resolved)

    entries = _list_dir(parent)
    if entries is None:
        return None

    # 精确大小写存在(含补全扩展名)则没有问题
    if target in entries or any(target + ext in entries for ext in rules.resolve_extensions):
        return None

    candidates = {target.lower()} | {(target + ext).lower() for ext in rules.resolve_extensions}
    match = next((entry for entry in entries if entry.lower() in candidates), None)
    if match is None:
        return None

    corrected = _corrected_specifier(edge.specifier, match[: len(target)])
    return Issue(
        kind=IssueKind.IMPORT_CASE_MISMATCH,
        file=edge.from_path,
        message=f"导入 '{edge.specifier}' 引用了 '{target}',但磁盘上的文件名是 '{match}'。",
        suggestion=f"修正导入大小写: '{corrected}'",
    )


def check_import_consistency(inventory: Inventory, rules: RuleSet = DEFAULT_RULES) -> list[Issue]:
    """检查相对导入与磁盘文件名的大小写是否一致.

    Args:
        inventory: 扫描结果
        rules: 规则集(解析时补全的扩展名)

    Returns:
        每条大小写不一致的导入一条 error
    """
    issues: list[Issue] = []
    for edge in inventory.imports:
        issue = _check_import(edge, rules)
        if issue is not None:
            issues.append(issue)
    return issues


CHECKS: tuple[tuple[str, Check], ...] = (
    ("禁用文件名模式", check_forbidden_filenames),
    ("命名风格一致性", check_case_consistency),
    ("重复文件", check_duplicate_files),
    ("导入路径大小写", check_import_consistency),
)
