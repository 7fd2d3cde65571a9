"""
@PURPOSE: 审计流程编排: 扫描 -> 四项检查 -> AuditResult
@OUTLINE:
  - PhaseCallback: 阶段通知回调类型
  - def run_audit(): 执行一次完整审计
@GOTCHAS:
  - 每次调用都从空清单开始,不在调用之间保留任何状态
  - 规则违规以 Issue 返回;只有遍历失败会抛出 TraversalError
@DEPENDENCIES:
  - 内部: .checks, .models, .patterns, .scanner
  - 外部: loguru
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from loguru import logger

from packages.file_consistency.checks import CHECKS
from packages.file_consistency.models import AuditResult, Issue
from packages.file_consistency.patterns import DEFAULT_RULES, RuleSet
from packages.file_consistency.scanner import scan_tree

PhaseCallback = Callable[[str], None]


def run_audit(
    root: Path | str = ".",
    rules: RuleSet = DEFAULT_RULES,
    on_phase: PhaseCallback | None = None,
) -> AuditResult:
    """执行一次完整审计.

    Args:
        root: 审计根目录,默认当前目录
        rules: 规则集
        on_phase: 每个阶段开始时调用,参数为阶段说明

    Returns:
        AuditResult 对象

    Raises:
        TraversalError: 根目录不存在或无法遍历

    Examples:
        >>> result = run_audit("src")
        >>> result.has_errors
        False
    """

    def announce(text: str) -> None:
        logger.info(text)
        if on_phase is not None:
            on_phase(text)

    announce("🔍 开始文件一致性审计...")
    inventory = scan_tree(root, rules)

    issues: list[Issue] = []
    for phase_name, check in CHECKS:
        announce(f"🔍 正在检查{phase_name}...")
        found = check(inventory, rules)
        logger.debug(f"{phase_name}: 发现 {len(found)} 个问题")
        issues.extend(found)

    result = AuditResult(
        root=str(inventory.root),
        files_scanned=len(inventory),
        issues=tuple(issues),
    )
    logger.info(f"审计完成: {result.summary()}")
    return result
