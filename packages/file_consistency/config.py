"""配置管理模块

使用 Pydantic Settings 管理审计配置,支持环境变量、.env 文件以及 YAML/JSON 配置文件。

Examples:
    从配置文件加载::

        from packages.file_consistency.config import load_config

        config = load_config(Path("file-audit.yaml"))
        rules = config.build_rules()

    配置文件示例 (YAML)::

        duplicate_scope: directory
        extra_skip_dirs: [vendor]
        extra_forbidden_patterns:
          - pattern: "_wip"
            rationale: 未完成副本
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from packages.file_consistency.errors import ConfigError
from packages.file_consistency.patterns import (
    ALLOWED_PATTERNS,
    DEFAULT_SKIP_DIRS,
    DEFAULT_TOOLING_EXTENSIONS,
    FORBIDDEN_PATTERNS,
    PatternRule,
    RuleSet,
)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class PatternEntry(BaseModel):
    """配置文件中的单条规则模式

    Attributes:
        pattern: 正则表达式(忽略大小写)
        rationale: 命中时展示的说明
    """

    pattern: str = Field(..., description="正则表达式")
    rationale: str = Field(default="自定义规则", description="命中说明")

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as exc:
            raise ValueError(f"无效的正则表达式 '{value}': {exc}") from exc
        return value

    def to_rule(self) -> PatternRule:
        return PatternRule.compile(self.pattern, self.rationale)


class AuditConfig(BaseSettings):
    """审计配置

    环境变量前缀为 FILE_AUDIT_,例如 FILE_AUDIT_DUPLICATE_SCOPE=directory。
    优先级: 配置文件 > 环境变量 > 默认值。

    Attributes:
        log_level: 日志级别
        debug: 调试模式,开启后日志级别固定为 DEBUG(命令行 --log-level 仍然优先)
        duplicate_scope: 重复检测范围(global 全局 / directory 同目录)
        extra_forbidden_patterns: 追加的禁用文件名模式
        extra_allowed_patterns: 追加的例外模式
        extra_skip_dirs: 追加的跳过目录
        tooling_extensions: 不做命名风格检查的脚本扩展名
    """

    model_config = SettingsConfigDict(
        env_prefix="FILE_AUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="日志级别")
    debug: bool = Field(default=False, description="是否启用调试模式")
    duplicate_scope: Literal["global", "directory"] = Field(
        default="global", description="重复检测范围"
    )
    extra_forbidden_patterns: list[PatternEntry] = Field(
        default_factory=list, description="追加的禁用文件名模式"
    )
    extra_allowed_patterns: list[PatternEntry] = Field(
        default_factory=list, description="追加的例外模式"
    )
    extra_skip_dirs: list[str] = Field(default_factory=list, description="追加的跳过目录")
    tooling_extensions: list[str] = Field(
        default_factory=lambda: sorted(DEFAULT_TOOLING_EXTENSIONS),
        description="不做命名风格检查的脚本扩展名",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {value}, 可选值: {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("tooling_extensions")
    @classmethod
    def normalize_extensions(cls, value: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value]

    def to_dict(self) -> dict[str, Any]:
        """转换为字典

        Returns:
            配置字典
        """
        return self.model_dump()

    def build_rules(self) -> RuleSet:
        """根据配置构建规则集,追加项排在内置规则之后

        Returns:
            不可变的 RuleSet
        """
        return RuleSet(
            forbidden=FORBIDDEN_PATTERNS
            + tuple(entry.to_rule() for entry in self.extra_forbidden_patterns),
            allowed=ALLOWED_PATTERNS
            + tuple(entry.to_rule() for entry in self.extra_allowed_patterns),
            skip_dirs=DEFAULT_SKIP_DIRS | frozenset(self.extra_skip_dirs),
            tooling_extensions=frozenset(self.tooling_extensions),
            duplicate_scope=self.duplicate_scope,
        )

    @classmethod
    def from_file(cls, file_path: Path) -> "AuditConfig":
        """从文件加载配置

        Args:
            file_path: 文件路径(支持 .json, .yaml, .yml)

        Returns:
            配置实例

        Raises:
            ConfigError: 文件无法读取、格式不支持或内容无效
        """
        try:
            text = file_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"无法读取配置文件 {file_path}: {exc}") from exc

        try:
            if file_path.suffix == ".json":
                data = json.loads(text)
            elif file_path.suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(text)
            else:
                raise ConfigError(f"不支持的文件格式: {file_path.suffix}")
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"配置文件格式错误: {exc}") from exc

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"配置文件顶层必须是映射: {file_path}")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"配置校验失败: {exc}") from exc


def load_config(config_path: Optional[Path] = None) -> AuditConfig:
    """加载配置

    Args:
        config_path: 配置文件路径(可选)

    Returns:
        配置对象

    Raises:
        ConfigError: 配置文件不存在或内容无效
    """
    if config_path:
        if not config_path.exists():
            raise ConfigError(f"配置文件不存在: {config_path}")
        return AuditConfig.from_file(config_path)

    try:
        return AuditConfig()
    except ValidationError as exc:
        raise ConfigError(f"环境变量配置无效: {exc}") from exc
