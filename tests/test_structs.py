"""Tests for struct-name and member discovery."""

from __future__ import annotations

from mscan.analysis.structs import build_completions, discover_struct_names, find_members
from mscan.models import StructCompletion

SAMPLE = "s.a = 1; s.b(2); s.a;"


class TestDiscoverStructNames:
    def test_basic(self):
        assert discover_struct_names("test.m", SAMPLE) == ["s"]

    def test_own_file_name_excluded(self):
        assert discover_struct_names("foo.m", "foo.bar = 1;") == []

    def test_own_file_name_excluded_with_directory(self):
        assert discover_struct_names("/work/project/foo.m", "foo.bar = 1;\nbaz.qux = 2;") == ["baz"]

    def test_own_file_name_excluded_for_configured_extension(self):
        assert discover_struct_names("tool.oct", "tool.x = 1;\nres.y = 2;", ".oct") == ["res"]

    def test_first_seen_order(self):
        src = "cfg.a = 1;\nres.b = 2;\ncfg.c = 3;\n"
        assert discover_struct_names("main.m", src) == ["cfg", "res"]

    def test_numbers_are_not_structs(self):
        assert discover_struct_names("main.m", "x = 1.5 + 2.25;") == []

    def test_no_structs(self):
        assert discover_struct_names("main.m", "x = y + z;") == []


class TestFindMembers:
    def test_calls_excluded_and_deduplicated(self):
        assert find_members(SAMPLE, "s") == ["a"]

    def test_semicolon_stripped(self):
        assert find_members("opts.verbose;\n", "opts") == ["verbose"]

    def test_colon_stripped(self):
        assert find_members("case s.mode:\n", "s") == ["mode"]

    def test_first_seen_order(self):
        src = "p.y = 1;\np.x = 2;\np.y = 3;\n"
        assert find_members(src, "p") == ["y", "x"]

    def test_other_struct_ignored(self):
        assert find_members("a.one = 1;\nb.two = 2;\n", "a") == ["one"]

    def test_unknown_struct(self):
        assert find_members(SAMPLE, "t") == []


class TestBuildCompletions:
    def test_pairs_names_with_members(self):
        src = """\
function out = process(cfg)
cfg.rate = 2;
result.value = cfg.rate * 3;
result.log(2);
out = result;
end
"""
        assert build_completions("process.m", src) == [
            StructCompletion(name="cfg", members=("rate",)),
            StructCompletion(name="result", members=("value",)),
        ]

    def test_to_dict(self):
        (completion,) = build_completions("test.m", SAMPLE)
        assert completion.to_dict() == {"name": "s", "members": ["a"]}

    def test_idempotent(self):
        assert build_completions("test.m", SAMPLE) == build_completions("test.m", SAMPLE)

    def test_configured_extension(self):
        src = "tool.rate = 1;\ncfg.size = 2;\n"
        assert build_completions("/src/tool.oct", src, ".oct") == [
            StructCompletion(name="cfg", members=("size",)),
        ]
