"""
@PURPOSE: 文件一致性审计引擎,检测"文件混乱"(创建新版本文件而不是原地修改)
@OUTLINE:
  - run_audit: 执行一次完整审计
  - scan_tree: 扫描目录树
  - render_report / render_json: 渲染报告
  - AuditConfig / load_config: 审计配置
  - setup_logger: 日志配置函数
@DEPENDENCIES:
  - 内部: .auditor, .config, .logger, .models, .patterns, .reporter, .scanner
"""

__version__ = "0.1.0"

from packages.file_consistency.auditor import run_audit
from packages.file_consistency.config import AuditConfig, load_config
from packages.file_consistency.errors import AuditError, ConfigError, TraversalError
from packages.file_consistency.logger import setup_logger
from packages.file_consistency.models import AuditResult, FileRecord, ImportEdge, Issue, IssueKind, Severity
from packages.file_consistency.patterns import DEFAULT_RULES, RuleSet
from packages.file_consistency.reporter import render_json, render_report
from packages.file_consistency.scanner import Inventory, scan_tree

__all__ = [
    "AuditConfig",
    "AuditError",
    "AuditResult",
    "ConfigError",
    "DEFAULT_RULES",
    "FileRecord",
    "ImportEdge",
    "Inventory",
    "Issue",
    "IssueKind",
    "RuleSet",
    "Severity",
    "TraversalError",
    "load_config",
    "render_json",
    "render_report",
    "run_audit",
    "scan_tree",
    "setup_logger",
]
