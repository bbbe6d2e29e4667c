"""Tests for the resolved configuration model."""

import pytest

from naechste.domain.model.configuration import (
    DEFAULT_EXTENSIONS,
    DEFAULT_IGNORED_DIRS,
    CompanionFilePatterns,
    Configuration,
    FileOrganizationOptions,
    NestingDepthOptions,
    RuleSettings,
    ServerSideExportsOptions,
)
from naechste.domain.model.enums import Severity
from tests.factories import make_check


class TestNestingDepthOptions:
    """Tests for NestingDepthOptions."""

    def test_default(self) -> None:
        """Default maximum is 3."""
        assert NestingDepthOptions().max_nesting_depth == 3

    @pytest.mark.parametrize("value", [0, -1])
    def test_out_of_range(self, value: int) -> None:
        """Maximum must be >= 1."""
        with pytest.raises(ValueError, match=">= 1"):
            NestingDepthOptions(max_nesting_depth=value)

    @pytest.mark.parametrize("value", [True, 2.5, "3"])
    def test_wrong_type(self, value: object) -> None:
        """Maximum must be an int (bool excluded)."""
        with pytest.raises(ValueError, match="int"):
            NestingDepthOptions(max_nesting_depth=value)  # type: ignore[arg-type]


class TestCompanionFilePatterns:
    """Tests for CompanionFilePatterns."""

    def test_defaults(self) -> None:
        """Test and story categories have built-in patterns."""
        patterns = CompanionFilePatterns()

        assert patterns.test == ("{name}.test.*", "{name}.spec.*")
        assert patterns.story == ("{name}.stories.*", "{name}.story.*")
        assert patterns.integration_tests == ()
        assert dict(patterns.custom) == {}

    def test_empty_test_patterns(self) -> None:
        """Built-in categories cannot be emptied."""
        with pytest.raises(ValueError, match="test"):
            CompanionFilePatterns(test=())


class TestFileOrganizationOptions:
    """Tests for FileOrganizationOptions."""

    def test_duplicate_ids(self) -> None:
        """Check ids must be unique."""
        with pytest.raises(ValueError, match="duplicate"):
            FileOrganizationOptions(file_organization_checks=(make_check("a"), make_check("a")))

    def test_needs_import_graph(self) -> None:
        """Graph needed only when a check has when_imported_by."""
        plain = FileOrganizationOptions(file_organization_checks=(make_check("a"),))
        gated = FileOrganizationOptions(
            file_organization_checks=(
                make_check("a"),
                make_check(
                    "b",
                    importer_glob="app/**",
                    import_matches=("ui",),
                    must_be_under=("components",),
                ),
            )
        )

        assert plain.needs_import_graph is False
        assert gated.needs_import_graph is True


class TestConfiguration:
    """Tests for Configuration."""

    def _settings(self) -> dict[str, RuleSettings]:
        return {
            "server-side-exports": RuleSettings(
                enabled=True, severity=Severity.ERROR, options=ServerSideExportsOptions()
            ),
            "component-nesting-depth": RuleSettings(
                enabled=False, severity=Severity.WARN, options=NestingDepthOptions()
            ),
        }

    def test_defaults(self) -> None:
        """Walker settings default to the built-in sets."""
        config = Configuration(rules=self._settings())

        assert config.ignored_dirs == DEFAULT_IGNORED_DIRS
        assert config.extensions == DEFAULT_EXTENSIONS
        assert config.report_io_warnings is True

    def test_rules_read_only(self) -> None:
        """Rules mapping cannot be mutated."""
        config = Configuration(rules=self._settings())

        with pytest.raises(TypeError):
            config.rules["x"] = config.rules["server-side-exports"]  # type: ignore[index]

    def test_extension_needs_dot(self) -> None:
        """Extensions are stored with a leading dot."""
        with pytest.raises(ValueError, match="extension"):
            Configuration(rules={}, extensions=frozenset({"tsx"}))
