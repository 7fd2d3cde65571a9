"""
@PURPOSE: 命名风格识别,以及根据目录/文件上下文推断应遵循的命名风格
@OUTLINE:
  - class CaseConvention: 五种命名风格
  - CASE_PATTERNS: 命名风格到正则的映射
  - def matches_case(): 检查 stem 是否符合指定风格
  - def classify_case(): 返回 stem 符合的所有风格
  - def infer_expected_case(): 推断文件应遵循的风格
@GOTCHAS:
  - 默认风格为 camelCase,components 目录之外的 PascalCase 文件总会产生警告
  - 目录判断使用文件所在目录的完整路径,审计根目录本身叫 components 时同样生效
@DEPENDENCIES:
  - 内部: .models, .patterns
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import Enum
from pathlib import Path

from packages.file_consistency.models import FileRecord
from packages.file_consistency.patterns import DEFAULT_TOOLING_EXTENSIONS


class CaseConvention(str, Enum):
    """命名风格枚举"""

    PASCAL = "PascalCase"
    CAMEL = "camelCase"
    KEBAB = "kebab-case"
    SNAKE = "snake_case"
    UPPER_SNAKE = "UPPER_SNAKE"


CASE_PATTERNS: dict[CaseConvention, re.Pattern[str]] = {
    CaseConvention.PASCAL: re.compile(r"^[A-Z][a-zA-Z0-9]*$"),  # UserController
    CaseConvention.CAMEL: re.compile(r"^[a-z][a-zA-Z0-9]*$"),  # userController
    CaseConvention.KEBAB: re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$"),  # user-controller
    CaseConvention.SNAKE: re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$"),  # user_controller
    CaseConvention.UPPER_SNAKE: re.compile(r"^[A-Z0-9]+(?:_[A-Z0-9]+)*$"),  # USER_CONTROLLER
}

DOCUMENTATION_PATTERN = re.compile(
    r"^(README|CHANGELOG|LICENSE|CONTRIBUTING|AUDIT-GUIDE)", re.IGNORECASE
)
AUDIT_MARKER = "audit-"


def matches_case(stem: str, convention: CaseConvention) -> bool:
    return bool(CASE_PATTERNS[convention].match(stem))


def classify_case(stem: str) -> list[CaseConvention]:
    """返回 stem 符合的全部命名风格.

    单个小写单词(如 "index")同时符合 camelCase/kebab-case/snake_case。

    Args:
        stem: 不含扩展名的文件名

    Returns:
        按 CaseConvention 声明顺序排列的风格列表,可能为空
    """
    return [convention for convention in CaseConvention if matches_case(stem, convention)]


def infer_expected_case(
    record: FileRecord,
    tooling_extensions: Iterable[str] = DEFAULT_TOOLING_EXTENSIONS,
) -> CaseConvention | None:
    """推断文件应遵循的命名风格.

    按固定优先级判断,命中第一条即返回:
    1. 文档类文件(README/CHANGELOG 等) -> 不检查
    2. 审计脚本或工具脚本扩展名 -> 不检查
    3. 目录包含 components -> PascalCase
    4. 目录包含 utils/helpers -> camelCase
    5. 文件名包含 config -> camelCase
    6. 其他 -> camelCase

    Args:
        record: 文件信息
        tooling_extensions: 视为工具脚本的扩展名

    Returns:
        期望的命名风格, None 表示跳过检查
    """
    stem = record.stem
    directory = Path(record.directory).as_posix()

    if DOCUMENTATION_PATTERN.match(stem):
        return None

    if AUDIT_MARKER in stem or record.extension in tooling_extensions:
        return None

    if "components" in directory.lower():
        return CaseConvention.PASCAL

    if "utils" in directory or "helpers" in directory:
        return CaseConvention.CAMEL

    if "config" in stem.lower():
        return CaseConvention.CAMEL

    return CaseConvention.CAMEL
