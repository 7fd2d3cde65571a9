"""
@PURPOSE: 审计过程中的异常体系,区分致命错误与规则违规
@OUTLINE:
  - class AuditError: 所有审计异常的基类
  - class TraversalError: 目录遍历失败(根目录不存在/无权限)
  - class ConfigError: 配置文件读取或校验失败
@GOTCHAS:
  - 规则违规不是异常,而是 Issue 数据记录,永远不要 raise
"""

from __future__ import annotations

from pathlib import Path


class AuditError(Exception):
    """审计异常基类."""


class TraversalError(AuditError):
    """目录遍历失败,整个审计中止.

    Attributes:
        path: 出错的路径
    """

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"无法遍历目录 {self.path}: {reason}")


class ConfigError(AuditError):
    """配置文件无法读取或内容无效."""
