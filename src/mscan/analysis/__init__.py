"""Regex scanners over raw source text."""

from mscan.analysis.calls import extract_multi_return_calls
from mscan.analysis.candidates import list_candidates, list_source_names, search_directories
from mscan.analysis.functions import find_function_declarations
from mscan.analysis.locate import find_occurrences, locate
from mscan.analysis.paths import resolve_added_paths
from mscan.analysis.structs import build_completions, discover_struct_names, find_members
from mscan.analysis.text_utils import match_all, unique
from mscan.analysis.tokens import extract_identifiers

__all__ = [
    "build_completions",
    "discover_struct_names",
    "extract_identifiers",
    "extract_multi_return_calls",
    "find_function_declarations",
    "find_members",
    "find_occurrences",
    "list_candidates",
    "list_source_names",
    "locate",
    "match_all",
    "resolve_added_paths",
    "search_directories",
    "unique",
]
