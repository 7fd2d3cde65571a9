"""
@PURPOSE: Pytest 配置和通用 fixtures
@OUTLINE:
  - make_tree: 在临时目录中按 {相对路径: 内容} 创建文件树
  - reset_logger: 每个测试后移除 loguru handler,避免写入已关闭的流
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from loguru import logger

TreeFactory = Callable[..., Path]


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """创建文件树.

    内容为 bytes 时按二进制写入,否则按 UTF-8 文本写入。
    同一个测试中可以用不同的 root_name 创建多棵互不影响的树。
    """

    def _make(files: dict[str, str | bytes], root_name: str = "project") -> Path:
        root = tmp_path / root_name
        root.mkdir(parents=True, exist_ok=True)
        for relative, content in files.items():
            file_path = root / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                file_path.write_bytes(content)
            else:
                file_path.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture(autouse=True)
def reset_logger():
    """CLI 测试会把 handler 绑定到 CliRunner 的临时 stderr,测试结束后统一移除."""
    yield
    logger.remove()
