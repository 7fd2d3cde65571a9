"""
@PURPOSE: 命名风格识别与期望风格推断测试
@OUTLINE:
  - TestCasePatterns: 五种命名风格的正则
  - TestInferExpectedCase: 期望风格推断的优先级
@DEPENDENCIES:
  - 内部: packages.file_consistency.case_rules
  - 外部: pytest
"""

from __future__ import annotations

from pathlib import Path

import pytest

from packages.file_consistency.case_rules import (
    CaseConvention,
    classify_case,
    infer_expected_case,
    matches_case,
)
from packages.file_consistency.paths import make_file_record

ROOT = Path("/repo")


def _record(relative: str):
    return make_file_record(ROOT / relative, ROOT)


class TestCasePatterns:
    """命名风格正则测试."""

    @pytest.mark.parametrize(
        "stem,convention,expected",
        [
            ("UserController", CaseConvention.PASCAL, True),
            ("userController", CaseConvention.PASCAL, False),
            ("userController", CaseConvention.CAMEL, True),
            ("UserController", CaseConvention.CAMEL, False),
            ("user_controller", CaseConvention.CAMEL, False),
            ("user-controller", CaseConvention.KEBAB, True),
            ("user--controller", CaseConvention.KEBAB, False),
            ("-user", CaseConvention.KEBAB, False),
            ("user-", CaseConvention.KEBAB, False),
            ("user_controller", CaseConvention.SNAKE, True),
            ("user__controller", CaseConvention.SNAKE, False),
            ("_user", CaseConvention.SNAKE, False),
            ("USER_CONTROLLER", CaseConvention.UPPER_SNAKE, True),
            ("USER_controller", CaseConvention.UPPER_SNAKE, False),
            ("USER_", CaseConvention.UPPER_SNAKE, False),
        ],
    )
    def test_matches_case(self, stem: str, convention: CaseConvention, expected: bool) -> None:
        assert matches_case(stem, convention) == expected

    def test_classify_single_lowercase_word(self) -> None:
        assert classify_case("index") == [
            CaseConvention.CAMEL,
            CaseConvention.KEBAB,
            CaseConvention.SNAKE,
        ]

    def test_classify_specific_styles(self) -> None:
        assert classify_case("my-component") == [CaseConvention.KEBAB]
        assert classify_case("USER_ID") == [CaseConvention.UPPER_SNAKE]
        assert classify_case("Button") == [CaseConvention.PASCAL]

    def test_classify_mixed_style(self) -> None:
        assert classify_case("Foo_bar-baz") == []


class TestInferExpectedCase:
    """期望风格推断测试."""

    @pytest.mark.parametrize(
        "relative",
        ["README.md", "readme.txt", "CHANGELOG.md", "LICENSE", "CONTRIBUTING.md", "AUDIT-GUIDE.md"],
    )
    def test_documentation_files_are_skipped(self, relative: str) -> None:
        assert infer_expected_case(_record(relative)) is None

    def test_audit_scripts_and_tooling_are_skipped(self) -> None:
        assert infer_expected_case(_record("scripts/audit-file-consistency.js")) is None
        assert infer_expected_case(_record("scripts/Build.cjs")) is None

    def test_tooling_extensions_are_configurable(self) -> None:
        record = _record("scripts/deploy.sh")
        assert infer_expected_case(record) == CaseConvention.CAMEL
        assert infer_expected_case(record, tooling_extensions={".sh"}) is None

    @pytest.mark.parametrize(
        "relative,expected",
        [
            ("src/components/Button.jsx", CaseConvention.PASCAL),
            ("src/Components/Button.jsx", CaseConvention.PASCAL),
            ("src/components/forms/config.js", CaseConvention.PASCAL),
            ("src/utils/formatDate.js", CaseConvention.CAMEL),
            ("src/helpers/formatDate.js", CaseConvention.CAMEL),
            ("appConfig.js", CaseConvention.CAMEL),
            ("index.js", CaseConvention.CAMEL),
        ],
    )
    def test_priority_order(self, relative: str, expected: CaseConvention) -> None:
        assert infer_expected_case(_record(relative)) == expected

    def test_full_directory_path_is_considered(self) -> None:
        """审计根目录本身位于 components / helpers 下时同样生效."""
        root = Path("/work/app/src/components")
        assert infer_expected_case(make_file_record(root / "Button.jsx", root)) == CaseConvention.PASCAL

        root = Path("/work/app/helpers")
        assert infer_expected_case(make_file_record(root / "Config.js", root)) == CaseConvention.CAMEL
