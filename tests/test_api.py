"""Tests for the programmatic API."""

from __future__ import annotations

import pytest

from mscan.api import MscanAPIError, analyze_file, run_json, summarize
from mscan.exit_codes import EXIT_UNREADABLE


class TestSummarize:
    def test_sections(self, matlab_project):
        data = summarize(str(matlab_project), matlab_project.read_text(encoding="utf-8"))
        assert set(data) == {"functions", "structs", "calls", "paths"}
        assert data["functions"][0]["name"] == "main"
        assert data["functions"][0]["returns"] == ["total", "stats"]
        assert [s["name"] for s in data["structs"]] == ["stats", "opts"]
        assert data["paths"] == ["lib"]

    def test_analyze_file_matches_summarize(self, matlab_project):
        content = matlab_project.read_text(encoding="utf-8")
        assert analyze_file(matlab_project) == summarize(str(matlab_project), content)

    def test_analyze_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            analyze_file(tmp_path / "missing.m")


class TestRunJson:
    def test_structs(self, matlab_project):
        data = run_json("structs", str(matlab_project))
        assert data["command"] == "structs"
        assert data["summary"]["structs"] == 2

    def test_locate_miss_allowed(self, matlab_project):
        data = run_json("locate", str(matlab_project), "nowhere")
        assert data["position"] is None

    def test_locate_miss_raises_when_disallowed(self, matlab_project):
        with pytest.raises(MscanAPIError):
            run_json("locate", str(matlab_project), "nowhere", allow_not_found=False)

    def test_failure_carries_exit_code(self, tmp_path):
        with pytest.raises(MscanAPIError) as exc_info:
            run_json("calls", str(tmp_path / "missing.m"))
        assert exc_info.value.exit_code == EXIT_UNREADABLE
        assert exc_info.value.command[:2] == ["--json", "calls"]
