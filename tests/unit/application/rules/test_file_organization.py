"""Tests for rules/file_organization.py."""

from pathlib import Path

import pytest

from naechste.application.rules.file_organization import (
    FileOrganizationRule,
    references_file,
    specifier_target,
)
from naechste.application.static_analysis import LazyImportGraph
from naechste.domain.model.configuration import FileOrganizationOptions
from naechste.domain.model.enums import Severity
from naechste.domain.model.organization import OrganizationCheck, SiblingExact, SiblingGlob
from tests.factories import make_check, make_entry

_BUTTON_IMPORT = "import { Button } from '@/components/ui/Button';\n"


def _rule(*checks: OrganizationCheck, severity: Severity = Severity.WARN) -> FileOrganizationRule:
    return FileOrganizationRule(
        severity, FileOrganizationOptions(file_organization_checks=checks)
    )


def _run(rule: FileOrganizationRule, files: list) -> tuple:
    return rule.evaluate(files, LazyImportGraph(files))


class TestSpecifierTarget:
    """Tests for specifier_target()."""

    @pytest.mark.parametrize(
        ("specifier", "target"),
        [
            ("@/components/ui/Button", "Button"),
            ("./Button.tsx", "Button"),
            ("../forms/", "forms"),
            ("react", "react"),
            ("./styles.module.css", "styles.module.css"),
        ],
    )
    def test_target(self, specifier: str, target: str) -> None:
        """Last segment, script extension stripped."""
        assert specifier_target(specifier) == target


class TestReferencesFile:
    """Tests for references_file()."""

    def test_by_name(self, tmp_path: Path) -> None:
        """Specifier's last segment names the file's stem."""
        entry = make_entry(tmp_path, "src/ui/Button.tsx", None)

        assert references_file("@/components/Button", entry)
        assert not references_file("@/components/Buttons", entry)

    def test_index_by_directory(self, tmp_path: Path) -> None:
        """Index files are referenced through their directory."""
        entry = make_entry(tmp_path, "components/forms/index.ts", None)

        assert references_file("@/components/forms", entry)
        assert references_file("./forms/index", entry)
        assert not references_file("@/components/tables", entry)

    def test_empty_target(self, tmp_path: Path) -> None:
        """Bare slash references nothing."""
        entry = make_entry(tmp_path, "index.ts", None)

        assert not references_file("/", entry)


class TestRequire:
    """Tests for sibling requirements."""

    def test_sibling_exact_missing(self, tmp_path: Path) -> None:
        """Missing exact sibling is reported under the check's rule id."""
        files = [make_entry(tmp_path, "features/auth/login.tsx")]
        check = make_check(
            "feature-index", "features/**/*.tsx", require=(SiblingExact("index.ts"),)
        )

        diagnostics = _run(_rule(check, severity=Severity.ERROR), files)

        assert len(diagnostics) == 1
        assert diagnostics[0].rule == "file-organization:feature-index"
        assert diagnostics[0].severity is Severity.ERROR
        assert diagnostics[0].file == "features/auth/login.tsx"
        assert diagnostics[0].message == (
            "Missing required companion file 'index.ts' next to 'features/auth/login.tsx'"
        )

    def test_sibling_exact_present(self, tmp_path: Path) -> None:
        """Present sibling satisfies the requirement."""
        files = [
            make_entry(tmp_path, "features/auth/index.ts"),
            make_entry(tmp_path, "features/auth/login.tsx"),
        ]
        check = make_check(
            "feature-index", "features/**/*.tsx", require=(SiblingExact("index.ts"),)
        )

        assert _run(_rule(check), files) == ()

    def test_sibling_glob(self, tmp_path: Path) -> None:
        """Glob requirement, the file itself never counts."""
        files = [make_entry(tmp_path, "hooks/useAuth.ts")]
        check = make_check("hook-tests", "hooks/*.ts", require=(SiblingGlob("*.ts"),))

        diagnostics = _run(_rule(check), files)

        assert len(diagnostics) == 1
        assert diagnostics[0].message == (
            "Missing required companion file matching '*.ts' next to 'hooks/useAuth.ts'"
        )

    def test_sibling_glob_present(self, tmp_path: Path) -> None:
        """Non-candidate siblings count too."""
        files = [make_entry(tmp_path, "hooks/useAuth.ts")]
        (tmp_path / "hooks" / "useAuth.md").write_text("docs", encoding="utf-8")
        check = make_check("hook-docs", "hooks/*.ts", require=(SiblingGlob("*.md"),))

        assert _run(_rule(check), files) == ()

    def test_exclude_glob(self, tmp_path: Path) -> None:
        """Excluded files are not selected."""
        files = [make_entry(tmp_path, "features/auth/login.test.tsx")]
        check = make_check(
            "feature-index",
            "features/**/*.tsx",
            exclude=("**/*.test.tsx",),
            require=(SiblingExact("index.ts"),),
        )

        assert _run(_rule(check), files) == ()

    def test_require_does_not_build_graph(self, tmp_path: Path) -> None:
        """Checks without when_imported_by never touch the graph."""
        files = [make_entry(tmp_path, "features/a.tsx")]
        graph = LazyImportGraph(files)
        check = make_check("c", "features/*.tsx", require=(SiblingExact("index.ts"),))

        _rule(check).evaluate(files, graph)

        assert not graph.is_built


class TestEnforceLocation:
    """Tests for location enforcement."""

    def test_outside_prefixes(self, tmp_path: Path) -> None:
        """Unconditional location rule."""
        files = [make_entry(tmp_path, "lib/Button.tsx")]
        check = make_check("ui", "**/Button.tsx", must_be_under=("components/ui/", "shared"))

        diagnostics = _run(_rule(check), files)

        assert len(diagnostics) == 1
        assert diagnostics[0].message == (
            "File is not located under any of: components/ui/, shared"
        )

    def test_inside_prefix(self, tmp_path: Path) -> None:
        """Nested below a prefix passes."""
        files = [make_entry(tmp_path, "components/ui/forms/Button.tsx")]
        check = make_check("ui", "**/Button.tsx", must_be_under=("components/ui",))

        assert _run(_rule(check), files) == ()

    def test_prefix_is_segment_aware(self, tmp_path: Path) -> None:
        """components/ui does not cover components/uikit."""
        files = [make_entry(tmp_path, "components/uikit/Button.tsx")]
        check = make_check("ui", "**/Button.tsx", must_be_under=("components/ui",))

        assert len(_run(_rule(check), files)) == 1

    def test_custom_message(self, tmp_path: Path) -> None:
        """Configured message replaces the generated one."""
        files = [make_entry(tmp_path, "lib/Button.tsx")]
        check = make_check(
            "ui", "**/Button.tsx", must_be_under=("components/ui",), message="UI lives in ui/"
        )

        assert [d.message for d in _run(_rule(check), files)] == ["UI lives in ui/"]


class TestWhenImportedBy:
    """Tests for import-gated location enforcement."""

    def _check(self) -> OrganizationCheck:
        return make_check(
            "ui-from-app",
            "**/Button.tsx",
            importer_glob="app/**",
            import_matches=("^@/components/ui/",),
            must_be_under=("components/ui",),
        )

    def test_imported_and_misplaced(self, tmp_path: Path) -> None:
        """Misplaced file referenced by a matching importer is reported."""
        files = [
            make_entry(tmp_path, "app/page.tsx", _BUTTON_IMPORT),
            make_entry(tmp_path, "src/Button.tsx"),
        ]

        diagnostics = _run(_rule(self._check()), files)

        assert len(diagnostics) == 1
        assert diagnostics[0].file == "src/Button.tsx"
        assert diagnostics[0].rule == "file-organization:ui-from-app"
        assert diagnostics[0].message == (
            "File is imported by 'app/page.tsx' but is not located under any of: components/ui"
        )

    def test_not_imported(self, tmp_path: Path) -> None:
        """Unreferenced files are exempt from location enforcement."""
        files = [
            make_entry(tmp_path, "app/page.tsx", "import x from 'react';\n"),
            make_entry(tmp_path, "src/Button.tsx"),
        ]

        assert _run(_rule(self._check()), files) == ()

    def test_importer_outside_glob(self, tmp_path: Path) -> None:
        """Imports from files outside importer_glob do not count."""
        files = [
            make_entry(tmp_path, "lib/page.tsx", _BUTTON_IMPORT),
            make_entry(tmp_path, "src/Button.tsx"),
        ]

        assert _run(_rule(self._check()), files) == ()

    def test_specifier_not_matching_regex(self, tmp_path: Path) -> None:
        """Specifier must match one of the regexes."""
        files = [
            make_entry(tmp_path, "app/page.tsx", "import { Button } from './Button';\n"),
            make_entry(tmp_path, "app/Button.tsx"),
        ]

        assert _run(_rule(self._check()), files) == ()

    def test_reported_once_with_many_importers(self, tmp_path: Path) -> None:
        """First importer in path order is named, once."""
        files = [
            make_entry(tmp_path, "app/a/page.tsx", _BUTTON_IMPORT),
            make_entry(tmp_path, "app/b/page.tsx", _BUTTON_IMPORT),
            make_entry(tmp_path, "src/Button.tsx"),
        ]

        diagnostics = _run(_rule(self._check()), files)

        assert len(diagnostics) == 1
        assert "'app/a/page.tsx'" in diagnostics[0].message

    def test_graph_built_once_for_many_checks(self, tmp_path: Path) -> None:
        """All gated checks share one graph."""
        files = [
            make_entry(tmp_path, "app/page.tsx", _BUTTON_IMPORT),
            make_entry(tmp_path, "components/ui/Button.tsx"),
        ]
        second = make_check(
            "second",
            "**/*.tsx",
            importer_glob="app/**",
            import_matches=("ui",),
            must_be_under=("components",),
        )
        graph = LazyImportGraph(files)

        _rule(self._check(), second).evaluate(files, graph)

        assert graph.build_count == 1

    def test_require_evaluated_regardless_of_imports(self, tmp_path: Path) -> None:
        """when_imported_by gates location only."""
        files = [make_entry(tmp_path, "src/Button.tsx")]
        check = make_check(
            "c",
            "**/Button.tsx",
            require=(SiblingExact("index.ts"),),
            importer_glob="app/**",
            import_matches=("ui",),
            must_be_under=("components/ui",),
        )

        diagnostics = _run(_rule(check), files)

        assert [d.message.split(" '")[0] for d in diagnostics] == [
            "Missing required companion file"
        ]


class TestCheckOrder:
    """Tests for multi-check evaluation."""

    def test_noop_check_skipped(self, tmp_path: Path) -> None:
        """A check with nothing to enforce yields nothing."""
        files = [make_entry(tmp_path, "a.tsx")]

        assert _run(_rule(make_check("noop")), files) == ()

    def test_checks_in_configured_order(self, tmp_path: Path) -> None:
        """Diagnostics grouped by check in configuration order."""
        files = [make_entry(tmp_path, "lib/x.tsx")]
        rule = _rule(
            make_check("zeta", "**/*.tsx", must_be_under=("components",)),
            make_check("alpha", "**/*.tsx", require=(SiblingExact("index.ts"),)),
        )

        assert [d.rule for d in _run(rule, files)] == [
            "file-organization:zeta",
            "file-organization:alpha",
        ]

    def test_escaped_dynamic_segment(self, tmp_path: Path) -> None:
        """An escaped glob selects the literal dynamic route directory only."""
        files = [
            make_entry(tmp_path, "pages/[id]/page.tsx"),
            make_entry(tmp_path, "pages/i/page.tsx"),
        ]
        check = make_check("dynamic", "**/[[]id]/page.tsx", must_be_under=("app",))

        assert [d.file for d in _run(_rule(check), files)] == ["pages/[id]/page.tsx"]
