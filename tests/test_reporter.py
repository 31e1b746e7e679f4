# tests/test_reporter.py
"""
Tests for the plain, terminal and SARIF renderers.
"""

import io
import json

import pytest

from jsxprop_lint.checkers import CheckerRunner
from jsxprop_lint.reporter import (
    PlainRenderer,
    Reporter,
    ReporterStats,
    SarifBuilder,
    TerminalRenderer,
)
from tests.conftest import scan_elements

_SOURCE = '<div class="a" abc crossOrigin />'


@pytest.fixture
def diagnostics():
    return CheckerRunner().run(scan_elements(_SOURCE, file="App.jsx"), file="App.jsx").diagnostics


@pytest.fixture(autouse=True)
def _no_sarif_env(monkeypatch):
    monkeypatch.delenv("REPORT_GENERATE_SARIF", raising=False)


class TestReporterStats:

    def test_counts(self, diagnostics):
        stats = ReporterStats()
        for diag in diagnostics:
            stats.record(diag)
        assert stats.warning == 3
        assert stats.fixable == 1
        assert stats.summary_line() == "3 warnings (3 total), 1 fixable"

    def test_empty(self):
        assert ReporterStats().summary_line() == "no diagnostics emitted"


class TestPlainRenderer:

    def test_lines_and_help(self, diagnostics):
        out = io.StringIO()
        renderer = PlainRenderer(out)
        for diag in diagnostics:
            renderer.render(diag)
        text = out.getvalue()
        assert "App.jsx:1:6: warning: Unknown property 'class' found, use 'className' instead" in text
        assert "  help: rename to 'className'" in text
        assert "  help: remove it, or use one of: script, img, video, audio, link, image" in text


class TestTerminalRenderer:

    def test_source_excerpt(self, diagnostics):
        out = io.StringIO()
        TerminalRenderer(out, sources={"App.jsx": _SOURCE}).render(diagnostics[0])
        text = out.getvalue()
        assert "Unknown property 'class' found" in text
        assert _SOURCE in text
        assert "^^^^^" in text

    def test_without_source(self, diagnostics):
        out = io.StringIO()
        TerminalRenderer(out).render(diagnostics[1])
        text = out.getvalue()
        assert "Unknown property 'abc' found" in text
        assert _SOURCE not in text


class TestSarifBuilder:

    def test_document(self, diagnostics):
        builder = SarifBuilder()
        for diag in diagnostics:
            builder.add(diag)
        doc = builder.to_dict(version="9.9")
        assert doc["version"] == "2.1.0"
        run = doc["runs"][0]
        assert run["tool"]["driver"]["version"] == "9.9"
        assert [r["id"] for r in run["tool"]["driver"]["rules"]] == [
            "unknownPropWithStandardName", "unknownProp", "invalidPropOnTag",
        ]
        first = run["results"][0]
        assert first["level"] == "warning"
        assert first["locations"][0]["physicalLocation"]["region"] == {
            "startLine": 1, "startColumn": 6,
        }
        replacement = first["fixes"][0]["artifactChanges"][0]["replacements"][0]
        assert replacement == {
            "deletedRegion": {"charOffset": 5, "charLength": 5},
            "insertedContent": {"text": "className"},
        }
        assert "fixes" not in run["results"][1]

    def test_write(self, tmp_path, diagnostics):
        builder = SarifBuilder()
        builder.add(diagnostics[0])
        path = tmp_path / "out.sarif"
        builder.write(str(path))
        assert json.loads(path.read_text())["runs"][0]["results"][0]["ruleId"] == (
            "unknownPropWithStandardName"
        )


class TestReporter:

    def test_plain_context_manager(self, diagnostics):
        out = io.StringIO()
        with Reporter(stream=out, colour=False) as rep:
            for diag in diagnostics:
                rep.emit(diag)
        assert rep.stats.total == 3
        assert out.getvalue().rstrip().endswith("3 warnings (3 total), 1 fixable")

    def test_colour_summary(self):
        out = io.StringIO()
        with Reporter(stream=out, colour=True):
            pass
        assert "no diagnostics emitted" in out.getvalue()

    def test_sarif_path(self, tmp_path, diagnostics):
        path = tmp_path / "report.sarif"
        with Reporter(stream=io.StringIO(), colour=False, sarif_path=str(path),
                      tool_version="1.2.3") as rep:
            rep.emit(diagnostics[2])
        doc = json.loads(path.read_text())
        assert doc["runs"][0]["tool"]["driver"]["version"] == "1.2.3"
        assert doc["runs"][0]["results"][0]["ruleId"] == "invalidPropOnTag"

    def test_sarif_from_environment(self, tmp_path, monkeypatch, diagnostics):
        path = tmp_path / "env.sarif"
        monkeypatch.setenv("REPORT_GENERATE_SARIF", str(path))
        with Reporter(stream=io.StringIO(), colour=False) as rep:
            rep.emit(diagnostics[1])
        assert path.exists()
