"""
@PURPOSE: 路径分类,从路径提取文件信息并判断目录是否跳过
@OUTLINE:
  - def make_file_record(): 根据文件路径构建 FileRecord
  - def should_skip_directory(): 检查是否应该跳过目录
  - def is_source_file(): 检查扩展名是否属于需要提取 import 的源码
@DEPENDENCIES:
  - 内部: .models, .patterns
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from packages.file_consistency.models import FileRecord
from packages.file_consistency.patterns import DEFAULT_SKIP_DIRS, SOURCE_EXTENSIONS


def make_file_record(file_path: Path, root: Path) -> FileRecord:
    """构建文件信息.

    扩展名规则与 os.path.splitext 一致: ".gitignore" 没有扩展名,
    "a.tar.gz" 的扩展名是 ".gz"。

    Args:
        file_path: 文件绝对路径
        root: 审计根目录(绝对路径)

    Returns:
        FileRecord 对象
    """
    filename = file_path.name
    stem, extension = os.path.splitext(filename)
    relative = file_path.relative_to(root)
    relative_dir = relative.parent.as_posix()

    return FileRecord(
        path=str(file_path),
        relative_path=relative.as_posix(),
        filename=filename,
        stem=stem,
        extension=extension.lower(),
        directory=str(file_path.parent),
        relative_directory="" if relative_dir == "." else relative_dir,
    )


def should_skip_directory(dir_name: str, skip_dirs: Iterable[str] = DEFAULT_SKIP_DIRS) -> bool:
    """检查是否应该跳过目录(只比较目录名本身)."""
    return dir_name in skip_dirs


def is_source_file(extension: str, source_extensions: Iterable[str] = SOURCE_EXTENSIONS) -> bool:
    return extension.lower() in source_extensions
