"""Unit tests for doc-comment translation and cross-reference collection.

These tests cover marker stripping for ``///`` and ``/** */`` comments,
preservation of blank lines, the reference-link definitions appended for
sibling functions, and name-only deduplication of overloads.

Usage
-----
Run ``pytest tests/test_comments.py -v``.
"""

from __future__ import annotations

from rhai_docs.generator import collect_cross_refs, translate_comment
from rhai_docs.script_parser import ScriptFunction


def test_line_comments_lose_their_marker() -> None:
    """Each ``///`` prefix is removed and lines keep their order."""
    markdown = translate_comment(["/// First line.", "///", "/// Second line."])
    assert markdown == " First line.\n\n Second line.", (
        "expected markers stripped with the blank line preserved"
    )


def test_short_and_empty_comment_lines_are_accepted() -> None:
    """Lines no longer than the marker translate to empty lines."""
    assert translate_comment(["///", "//"]) == "\n//"


def test_block_comment_suffix_and_gutter_are_removed() -> None:
    """Block comments lose ``/**``, ``*/`` and the ``*`` gutter."""
    markdown = translate_comment(["/**\n * Adds two numbers.\n *\n * Returns the sum.\n */"])
    assert markdown.split("\n") == ["", "Adds two numbers.", "", "Returns the sum.", " "]


def test_single_line_block_comment() -> None:
    """A one-line block comment keeps only its prose."""
    assert translate_comment(["/** Doubles the value. */"]) == " Doubles the value. "


def test_cross_refs_are_appended_as_reference_definitions() -> None:
    """Cross references follow a blank line, one definition per name."""
    markdown = translate_comment(
        ["/// See [`helper`]."], [("helper", "helper-1"), ("main", "main")]
    )
    assert markdown == " See [`helper`].\n\n[`helper`]: #helper-1\n[`main`]: #main"


def test_no_cross_refs_means_no_trailing_block() -> None:
    """Without cross references the prose is returned unchanged."""
    assert translate_comment(["/// Plain."]) == " Plain."


def test_collect_cross_refs_keeps_first_overload() -> None:
    """Overloads collapse to the first occurrence of each name."""
    functions = [
        ScriptFunction(name="helper", params=["a"]),
        ScriptFunction(name="helper", params=["a", "b"]),
        ScriptFunction(name="main", params=[]),
    ]
    assert collect_cross_refs(functions) == [("helper", "helper-1"), ("main", "main")], (
        "expected one reference per distinct name"
    )
