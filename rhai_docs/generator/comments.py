r"""Turn raw doc comments into Markdown ready for rendering.

Doc comments arrive exactly as written in the script, markers included.
:func:`translate_comment` strips the ``///`` and ``/** ... */`` markers,
keeps the prose verbatim, and appends reference-link definitions so that
`` [`name`] `` mentions of sibling functions resolve to their anchors.

Example
-------
>>> translate_comment(["/// Calls [`helper`].", "///"], [("helper", "helper-1")])
' Calls [`helper`].\n\n\n[`helper`]: #helper-1'
"""

from __future__ import annotations

import re
import typing as typ

from .anchors import function_anchor

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from rhai_docs.script_parser import ScriptFunction

COMMENT_PREFIXES = ("///", "/**")
BLOCK_COMMENT_SUFFIX = "*/"
BLOCK_GUTTER_PATTERN = re.compile(r"^[ \t]*\*(?![*/]) ?")

CrossRef = tuple[str, str]


def _strip_markers(line: str) -> str:
    """Remove a leading comment marker and a trailing block terminator."""
    for prefix in COMMENT_PREFIXES:
        if line.startswith(prefix):
            line = line[len(prefix) :]
            break
    trimmed = line.rstrip()
    if trimmed.endswith(BLOCK_COMMENT_SUFFIX):
        line = trimmed[: -len(BLOCK_COMMENT_SUFFIX)]
    return line


def translate_comment(
    comment_lines: cabc.Sequence[str], cross_refs: cabc.Sequence[CrossRef] = ()
) -> str:
    """Return the Markdown for one function's doc comments.

    Parameters
    ----------
    comment_lines : Sequence[str]
        Raw comments in source order. Multi-line block comments are split
        into their physical lines, with any leading ``*`` gutter removed
        from the continuation lines.
    cross_refs : Sequence[tuple[str, str]]
        ``(name, anchor)`` pairs, already deduplicated by name, for every
        function documented on the same page.

    Returns
    -------
    str
        Comment prose joined by newlines, followed by a blank line and one
        `` [`name`]: #anchor `` definition per cross reference.
    """
    lines: list[str] = []
    for comment in comment_lines:
        first, *rest = _strip_markers(comment).split("\n")
        lines.append(first)
        if comment.startswith("/**"):
            rest = [BLOCK_GUTTER_PATTERN.sub("", line) for line in rest]
        lines.extend(rest)
    markdown = "\n".join(lines)
    if cross_refs:
        definitions = "\n".join(f"[`{name}`]: #{target}" for name, target in cross_refs)
        markdown = f"{markdown}\n\n{definitions}"
    return markdown


def collect_cross_refs(functions: cabc.Iterable[ScriptFunction]) -> list[CrossRef]:
    """Return one ``(name, anchor)`` pair per distinct name, first seen wins."""
    seen: set[str] = set()
    refs: list[CrossRef] = []
    for function in functions:
        if function.name in seen:
            continue
        seen.add(function.name)
        refs.append((function.name, function_anchor(function)))
    return refs


__all__ = ["CrossRef", "collect_cross_refs", "translate_comment"]
