"""Shared test fixtures and helpers for mscan tests.

Provides:
- CliRunner fixtures: cli_runner, invoke
- Project fixture: matlab_project (a main file, a sibling and an addpath'd lib)
- JSON validation helpers: parse_json, check_envelope
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

MAIN_SOURCE = """\
function [total, stats] = main(data, opts)
% entry point
addpath('lib')
% addpath('ignored')
stats.count = numel(data);
stats.mean = mean(data);
opts.verbose;
stats.count;
[lo, hi] = bounds(data, opts)
total = helper(data);
end
"""


# ===========================================================================
# CliRunner helpers
# ===========================================================================


@pytest.fixture
def cli_runner():
    """Provide a Click CliRunner for in-process CLI testing."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Return a callable that runs the mscan CLI: invoke(args, json_mode=False)."""
    from mscan.cli import cli

    def _invoke(args, json_mode=False):
        full_args = ["--json"] if json_mode else []
        full_args.extend(args)
        return cli_runner.invoke(cli, full_args)

    return _invoke


@pytest.fixture
def parse_json():
    """Return a helper that parses a successful CliRunner result as JSON."""

    def _parse(result, command=None, exit_code=0):
        assert result.exit_code == exit_code, (
            f"Command {command or '?'} exited {result.exit_code}:\n{result.output}"
        )
        try:
            return json.loads(result.output)
        except json.JSONDecodeError as e:
            pytest.fail(f"Invalid JSON from {command or '?'}: {e}\nOutput was:\n{result.output[:500]}")

    return _parse


@pytest.fixture
def check_envelope():
    """Return a helper asserting the mscan JSON envelope contract."""

    def _check(data, command=None):
        assert isinstance(data, dict), f"Expected dict, got {type(data)}"
        for key in ("schema", "command", "version", "file", "summary", "_meta"):
            assert key in data, f"Missing '{key}' key in envelope"
        assert "timestamp" in data["_meta"]
        assert isinstance(data["summary"], dict)
        if command:
            assert data["command"] == command

    return _check


# ===========================================================================
# Project fixtures
# ===========================================================================


@pytest.fixture
def matlab_project(tmp_path):
    """A small MATLAB tree: project/main.m, project/helper.m, project/lib/bounds.m.

    Returns the path to main.m.
    """
    project = tmp_path / "project"
    lib = project / "lib"
    lib.mkdir(parents=True)
    main = project / "main.m"
    main.write_text(MAIN_SOURCE, encoding="utf-8")
    (project / "helper.m").write_text("function y = helper(x)\n  y = x;\nend\n", encoding="utf-8")
    (project / "notes.txt").write_text("not a source file\n", encoding="utf-8")
    (lib / "bounds.m").write_text("function [lo, hi] = bounds(x, d)\nend\n", encoding="utf-8")
    return main
