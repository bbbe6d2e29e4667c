"""Tests for path filters and glob matching.

Tests:
- expand_braces: {a,b} alternatives
- matches_glob / matches_name: fnmatch over relative paths and names
- include_paths / exclude_paths: FileEntry filters
- is_under_any_prefix: segment-aware directory prefixes

Note: fnmatch uses * to match any characters INCLUDING /.
"""

from pathlib import Path

import pytest

from naechste.infrastructure.filters.path import (
    exclude_paths,
    expand_braces,
    include_paths,
    is_under_any_prefix,
    matches_glob,
    matches_name,
)
from tests.factories import make_entry


class TestExpandBraces:
    """Tests for expand_braces."""

    def test_no_braces(self) -> None:
        """Pattern without braces is returned as is."""
        assert expand_braces("**/*.tsx") == ("**/*.tsx",)

    def test_single_group(self) -> None:
        """One group expands to its options."""
        assert expand_braces("*.{ts,tsx}") == ("*.ts", "*.tsx")

    def test_two_groups(self) -> None:
        """Groups expand as a product, left to right."""
        assert expand_braces("{a,b}/*.{js,ts}") == ("a/*.js", "a/*.ts", "b/*.js", "b/*.ts")


class TestMatchesGlob:
    """Tests for matches_glob."""

    @pytest.mark.parametrize(
        ("relative", "pattern", "expected"),
        [
            ("app/page.tsx", "**/page.tsx", True),
            ("page.tsx", "**/page.tsx", True),
            ("app/dashboard/page.tsx", "app/**", True),
            ("app/page.tsx", "*.tsx", True),
            ("components/ui/button.tsx", "components/ui/*", True),
            ("components/ui/button.tsx", "components/*.{ts,tsx}", True),
            ("components/button.jsx", "components/*.{ts,tsx}", False),
            ("app/page.tsx", "pages/**", False),
        ],
    )
    def test_patterns(self, relative: str, pattern: str, expected: bool) -> None:
        """Glob semantics over relative POSIX paths."""
        assert matches_glob(relative, pattern) is expected

    def test_case_sensitive(self) -> None:
        """Matching is case-sensitive on every platform."""
        assert matches_glob("app/Page.tsx", "**/page.tsx") is False


class TestMatchesName:
    """Tests for matches_name."""

    def test_name_glob(self) -> None:
        """Glob over bare file names."""
        assert matches_name("Button.stories.tsx", "*.stories.*") is True
        assert matches_name("Button.tsx", "*.stories.*") is False

    def test_brace_alternatives(self) -> None:
        """Braces expand for names too."""
        assert matches_name("Button.test.ts", "Button.test.{ts,tsx}") is True


class TestIncludePaths:
    """Tests for include_paths filter."""

    def test_include_matching(self, tmp_path: Path) -> None:
        """include_paths keeps entries matching any pattern."""
        flt = include_paths("app/**", "pages/**")

        assert flt(make_entry(tmp_path, "app/page.tsx")) is True
        assert flt(make_entry(tmp_path, "pages/index.tsx")) is True
        assert flt(make_entry(tmp_path, "components/button.tsx")) is False

    def test_include_nothing(self, tmp_path: Path) -> None:
        """No patterns include nothing."""
        assert include_paths()(make_entry(tmp_path, "app/page.tsx")) is False


class TestExcludePaths:
    """Tests for exclude_paths filter."""

    def test_exclude_matching(self, tmp_path: Path) -> None:
        """exclude_paths drops entries matching any pattern."""
        flt = exclude_paths("**/page.tsx", "**/layout.tsx")

        assert flt(make_entry(tmp_path, "app/page.tsx")) is False
        assert flt(make_entry(tmp_path, "app/layout.tsx")) is False
        assert flt(make_entry(tmp_path, "app/card.tsx")) is True

    def test_exclude_nothing(self, tmp_path: Path) -> None:
        """No patterns exclude nothing."""
        assert exclude_paths()(make_entry(tmp_path, "app/page.tsx")) is True


class TestIsUnderAnyPrefix:
    """Tests for is_under_any_prefix."""

    def test_exact_directory(self) -> None:
        """Directory equal to the prefix is under it."""
        assert is_under_any_prefix("components/ui", ("components/ui",)) is True

    def test_nested_directory(self) -> None:
        """Subdirectories are under the prefix."""
        assert is_under_any_prefix("components/ui/forms", ("components/ui",)) is True

    def test_segment_boundary(self) -> None:
        """A longer sibling name is not under the prefix."""
        assert is_under_any_prefix("components/uikit", ("components/ui",)) is False

    def test_slashes_ignored(self) -> None:
        """Leading and trailing slashes in prefixes are ignored."""
        assert is_under_any_prefix("components/ui", ("/components/ui/",)) is True

    def test_root_directory(self) -> None:
        """Root-level files are under no prefix."""
        assert is_under_any_prefix("", ("components",)) is False

    def test_any_prefix(self) -> None:
        """Any matching prefix is enough."""
        assert is_under_any_prefix("lib/hooks", ("components", "lib")) is True
