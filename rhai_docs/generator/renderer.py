"""Utilities for rendering markdown and syntax-highlighted code snippets."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .extensions import CodeReferenceExtension, FirstHeadingExtension

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown.extensions import Extension

    from .comments import CrossRef
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

CODE_BLOCK_PATTERN = re.compile(
    r"^(`{3,}|~{3,})[ \t]*([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)^\1[ \t]*$",
    re.DOTALL | re.MULTILINE,
)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
FENCE_LINE_PATTERN = re.compile(r"^(`{3,}|~{3,})[ \t]*(\S*)")
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')

BASE_EXTENSIONS: tuple[str, ...] = ("fenced_code", "tables", "sane_lists")


class HtmlContentRenderer:
    """Render markdown with consistent styling and highlighting."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        """Initialize a renderer with an optional pygments style.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(
        self,
        text: str,
        *,
        default_language: str | None = None,
        cross_refs: cabc.Iterable[CrossRef] = (),
    ) -> str:
        """Render markdown into HTML using the configured extensions.

        Parameters
        ----------
        text : str
            Markdown source.
        default_language : str, optional
            Language assigned to fenced code blocks that carry no tag.
        cross_refs : Iterable[tuple[str, str]], optional
            ``(name, anchor)`` pairs resolved case-sensitively when a
            `` [`name`] `` mention is rendered.

        Returns
        -------
        str
            Rendered HTML, or ``""`` for blank input.
        """
        normalized = self._normalize_fenced_blocks(text)
        if default_language:
            normalized = self._tag_untagged_fences(normalized, default_language)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            *BASE_EXTENSIONS,
            "codehilite",
            "smarty",
            CodeReferenceExtension(targets=dict(cross_refs)),
        ]
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    def first_heading(self, text: str) -> str | None:
        """Return the text of the leading level-1 heading, if there is one.

        Smart punctuation is applied and inline markup is reduced to its
        text, so ``# Don't *panic*`` yields ``Don\u2019t panic``.
        """
        probe = FirstHeadingExtension()
        md = Markdown(extensions=[*BASE_EXTENSIONS, "smarty", probe])
        md.convert(self._normalize_fenced_blocks(text))
        return probe.heading

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(2) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)

    @staticmethod
    def _tag_untagged_fences(text: str, language: str) -> str:
        """Give every opening fence without a language tag ``language``."""
        lines = text.split("\n")
        open_fence: str | None = None
        for idx, line in enumerate(lines):
            match = FENCE_LINE_PATTERN.match(line)
            if match is None:
                continue
            fence, label = match.groups()
            if open_fence is None:
                open_fence = fence
                if not label:
                    lines[idx] = f"{fence}{language}"
            elif (
                fence[0] == open_fence[0]
                and len(fence) >= len(open_fence)
                and not label
            ):
                open_fence = None
        return "\n".join(lines)


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer"]
