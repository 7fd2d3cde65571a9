"""
@PURPOSE: 目录树扫描器,单次深度优先遍历构建文件清单和相对导入列表
@OUTLINE:
  - IMPORT_PATTERN: import ... from '...' 词法匹配
  - class Inventory: 扫描结果(文件清单 + 导入列表),扫描后只读
  - def extract_imports(): 从源码文本提取相对导入
  - def scan_tree(): 扫描目录树
@GOTCHAS:
  - import 提取是浅层词法启发式,只识别 import <绑定> from '<路径>' 一种语句形式
  - 非相对路径(包导入)在提取阶段直接丢弃
  - 无法读取的文件仍然计入清单,只是没有导入记录
  - 子目录无权限访问时整个审计中止(TraversalError)
  - 不跟随指向目录的符号链接(避免循环),指向文件的符号链接照常计入
@DEPENDENCIES:
  - 内部: .errors, .models, .paths, .patterns
  - 外部: loguru
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from loguru import logger

from packages.file_consistency.errors import TraversalError
from packages.file_consistency.models import FileRecord, ImportEdge
from packages.file_consistency.paths import is_source_file, make_file_record, should_skip_directory
from packages.file_consistency.patterns import DEFAULT_RULES, RuleSet

# 绑定可以是 {a, b}、* as name 或单个标识符;引号可以是单引号或双引号
IMPORT_PATTERN = re.compile(
    r"""import\s+(?:\{[^}]*\}|\*\s+as\s+\w+|\w+)\s+from\s+['"]([^'"]+)['"]"""
)


@dataclass(frozen=True)
class Inventory:
    """扫描结果.

    Attributes:
        root: 审计根目录(绝对路径)
        records: 路径 -> FileRecord,按遍历顺序排列
        imports: 全部相对导入,按遍历顺序排列
    """

    root: Path
    records: Mapping[str, FileRecord]
    imports: tuple[ImportEdge, ...]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[FileRecord]:
        return iter(self.records.values())


def extract_imports(content: str) -> list[str]:
    """从源码中提取相对导入路径.

    Args:
        content: 源码文本

    Returns:
        以 "." 开头的导入路径列表,按出现顺序

    Examples:
        >>> extract_imports("import x from './c'\\nimport React from 'react'")
        ['./c']
    """
    return [
        match.group(1)
        for match in IMPORT_PATTERN.finditer(content)
        if match.group(1).startswith(".")
    ]


def _read_imports(file_path: Path) -> list[str]:
    try:
        content = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug(f"跳过无法读取的文件 {file_path}: {exc}")
        return []
    return extract_imports(content)


def scan_tree(root: Path | str, rules: RuleSet = DEFAULT_RULES) -> Inventory:
    """扫描目录树.

    Args:
        root: 审计根目录
        rules: 规则集(跳过目录、源码扩展名)

    Returns:
        Inventory 对象

    Raises:
        TraversalError: 根目录不存在、不是目录或子目录无法访问
    """
    root_path = Path(root).resolve()
    if not root_path.exists():
        raise TraversalError(root_path, "目录不存在")
    if not root_path.is_dir():
        raise TraversalError(root_path, "不是目录")

    records: dict[str, FileRecord] = {}
    imports: list[ImportEdge] = []

    def walk(current: Path) -> None:
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            raise TraversalError(current, exc.strerror or str(exc)) from exc

        for entry in entries:
            entry_path = Path(entry.path)

            if entry.is_dir(follow_symlinks=False):
                if should_skip_directory(entry.name, rules.skip_dirs):
                    logger.debug(f"跳过目录: {entry_path}")
                    continue
                walk(entry_path)
            elif entry.is_file():
                record = make_file_record(entry_path, root_path)
                records[record.path] = record
                if is_source_file(record.extension, rules.source_extensions):
                    imports.extend(
                        ImportEdge(from_path=record.path, specifier=specifier)
                        for specifier in _read_imports(entry_path)
                    )

    walk(root_path)
    logger.info(f"扫描完成: {len(records)} 个文件, {len(imports)} 条相对导入")

    return Inventory(
        root=root_path,
        records=MappingProxyType(records),
        imports=tuple(imports),
    )
