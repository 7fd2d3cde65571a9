"""
@PURPOSE: 定义审计引擎的数据模型
@OUTLINE:
  - class Severity: 问题严重级别
  - class IssueKind: 问题类型
  - SEVERITY_BY_KIND: 问题类型到严重级别的固定映射
  - class FileRecord: 单个文件的路径信息
  - class ImportEdge: 源文件中的相对导入
  - class Issue: 单条审计发现
  - class AuditResult: 一次审计的完整结果
@DEPENDENCIES:
  - 标准库: dataclasses, enum
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """问题严重级别,按报告输出顺序声明."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueKind(str, Enum):
    """问题类型."""

    FORBIDDEN_FILENAME = "forbidden_filename"
    CASE_INCONSISTENCY = "case_inconsistency"
    DUPLICATE_FILE = "duplicate_file"
    IMPORT_CASE_MISMATCH = "import_case_mismatch"


SEVERITY_BY_KIND: dict[IssueKind, Severity] = {
    IssueKind.FORBIDDEN_FILENAME: Severity.ERROR,
    IssueKind.CASE_INCONSISTENCY: Severity.WARNING,
    IssueKind.DUPLICATE_FILE: Severity.ERROR,
    IssueKind.IMPORT_CASE_MISMATCH: Severity.ERROR,
}


@dataclass(frozen=True)
class FileRecord:
    """文件信息.

    Attributes:
        path: 绝对路径(唯一键)
        relative_path: 相对审计根目录的 POSIX 路径
        filename: 文件名(含扩展名)
        stem: 文件名(不含扩展名)
        extension: 小写扩展名,含前导点,无扩展名时为空字符串
        directory: 所在目录的绝对路径
        relative_directory: 所在目录相对审计根目录的 POSIX 路径,根目录为空字符串
    """

    path: str
    relative_path: str
    filename: str
    stem: str
    extension: str
    directory: str
    relative_directory: str


@dataclass(frozen=True)
class ImportEdge:
    """源文件中的一条相对导入."""

    from_path: str
    specifier: str


@dataclass(frozen=True)
class Issue:
    """单条审计发现.

    severity 由 kind 决定,不允许单独指定。
    """

    kind: IssueKind
    file: str
    message: str
    suggestion: str = ""

    @property
    def severity(self) -> Severity:
        return SEVERITY_BY_KIND[self.kind]

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["kind"] = self.kind.value
        data["severity"] = self.severity.value
        return data


@dataclass(frozen=True)
class AuditResult:
    """一次审计的完整结果.

    Attributes:
        root: 审计根目录
        files_scanned: 扫描到的文件数量
        issues: 按发现顺序排列的问题
    """

    root: str
    files_scanned: int
    issues: tuple[Issue, ...]

    def by_severity(self, severity: Severity) -> list[Issue]:
        return [issue for issue in self.issues if issue.severity == severity]

    def count(self, severity: Severity) -> int:
        return len(self.by_severity(severity))

    @property
    def has_errors(self) -> bool:
        return any(issue.severity == Severity.ERROR for issue in self.issues)

    def summary(self) -> dict[str, int]:
        """汇总统计.

        Returns:
            包含扫描文件数、问题总数和各级别数量的字典
        """
        return {
            "files_scanned": self.files_scanned,
            "total_issues": len(self.issues),
            "errors": self.count(Severity.ERROR),
            "warnings": self.count(Severity.WARNING),
            "infos": self.count(Severity.INFO),
        }
