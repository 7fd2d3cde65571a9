"""
@PURPOSE: 规则表定义,禁用文件名模式、例外模式、跳过目录和扩展名集合
@OUTLINE:
  - class PatternRule: 编译后的正则 + 可读说明
  - FORBIDDEN_PATTERNS: 暗示"文件混乱"的文件名模式(有序)
  - ALLOWED_PATTERNS: 覆盖禁用模式的例外(有序)
  - DEFAULT_SKIP_DIRS: 遍历时整体跳过的目录
  - SOURCE_EXTENSIONS: 需要提取 import 的源码扩展名
  - RESOLVE_EXTENSIONS: 解析无扩展名 import 时尝试的扩展名
  - class RuleSet: 一次审计使用的不可变规则集合
  - DEFAULT_RULES: 内置默认规则集
@GOTCHAS:
  - 所有模式均忽略大小写
  - "test" 模式用于捕获随手写的测试文件,真正的测试目录由 ALLOWED_PATTERNS 放行
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class PatternRule:
    """编译后的规则模式.

    Attributes:
        pattern: 编译后的正则
        rationale: 命中时向用户展示的说明
    """

    pattern: re.Pattern[str]
    rationale: str

    @classmethod
    def compile(cls, source: str, rationale: str) -> PatternRule:
        return cls(pattern=re.compile(source, re.IGNORECASE), rationale=rationale)

    @property
    def source(self) -> str:
        return self.pattern.pattern

    def search(self, text: str) -> bool:
        return self.pattern.search(text) is not None


FORBIDDEN_PATTERNS: tuple[PatternRule, ...] = (
    PatternRule.compile(r"_v\d+", "版本号后缀"),
    PatternRule.compile(r"_updated", "更新版本后缀"),
    PatternRule.compile(r"_enhanced", "增强版本后缀"),
    PatternRule.compile(r"_new", "新版本后缀"),
    PatternRule.compile(r"_improved", "改进版本后缀"),
    PatternRule.compile(r"_fixed", "修复版本后缀"),
    PatternRule.compile(r"_corrected", "更正版本后缀"),
    PatternRule.compile(r"_modified", "修改版本后缀"),
    PatternRule.compile(r"copy", "副本"),
    PatternRule.compile(r"backup", "备份"),
    PatternRule.compile(r"old", "旧版本"),
    PatternRule.compile(r"temp", "临时文件"),
    PatternRule.compile(r"test", "测试目录外的临时测试文件"),
    PatternRule.compile(r"draft", "草稿"),
    PatternRule.compile(r"working", "工作中副本"),
    PatternRule.compile(r"final", "最终版副本"),
    PatternRule.compile(r"latest", "最新版副本"),
    PatternRule.compile(r"current", "当前版副本"),
)

ALLOWED_PATTERNS: tuple[PatternRule, ...] = (
    PatternRule.compile(r"\.test\.", "测试文件后缀 .test."),
    PatternRule.compile(r"\.spec\.", "测试文件后缀 .spec."),
    PatternRule.compile(r"(?:^|/)test/", "test/ 目录"),
    PatternRule.compile(r"(?:^|/)tests/", "tests/ 目录"),
    PatternRule.compile(r"(?:^|/)__tests__/", "__tests__/ 目录"),
    PatternRule.compile(r"\.backup$", ".backup 扩展名"),
    PatternRule.compile(r"\.bak$", ".bak 扩展名"),
)

# 依赖缓存、版本控制、编辑器配置、构建产物、日志/临时目录
DEFAULT_SKIP_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        ".vscode",
        ".idea",
        "dist",
        "build",
        "coverage",
        ".nyc_output",
        "logs",
        "tmp",
        "temp",
        ".venv",
        "__pycache__",
    }
)

SOURCE_EXTENSIONS: frozenset[str] = frozenset({".js", ".jsx", ".ts", ".tsx", ".vue", ".svelte"})

RESOLVE_EXTENSIONS: tuple[str, ...] = (".js", ".jsx", ".ts", ".tsx")

DEFAULT_TOOLING_EXTENSIONS: frozenset[str] = frozenset({".cjs"})


@dataclass(frozen=True)
class RuleSet:
    """一次审计使用的全部规则,运行期间不可变.

    Attributes:
        forbidden: 禁用文件名模式
        allowed: 例外模式
        skip_dirs: 跳过的目录名
        source_extensions: 提取 import 的扩展名
        resolve_extensions: 解析 import 时补全的扩展名
        tooling_extensions: 不做命名风格检查的脚本扩展名
        duplicate_scope: 重复检测范围, "global" 或 "directory"
    """

    forbidden: tuple[PatternRule, ...] = FORBIDDEN_PATTERNS
    allowed: tuple[PatternRule, ...] = ALLOWED_PATTERNS
    skip_dirs: frozenset[str] = DEFAULT_SKIP_DIRS
    source_extensions: frozenset[str] = SOURCE_EXTENSIONS
    resolve_extensions: tuple[str, ...] = RESOLVE_EXTENSIONS
    tooling_extensions: frozenset[str] = DEFAULT_TOOLING_EXTENSIONS
    duplicate_scope: str = "global"


DEFAULT_RULES = RuleSet()
