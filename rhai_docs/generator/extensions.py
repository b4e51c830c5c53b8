"""Python-Markdown extensions used when rendering pages and doc comments."""

from __future__ import annotations

import re
import typing as typ
import xml.etree.ElementTree as etree
from html import unescape

from markdown.extensions import Extension
from markdown.inlinepatterns import InlineProcessor
from markdown.treeprocessors import Treeprocessor
from markdown.util import HTML_PLACEHOLDER_RE, AtomicString

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any

CODE_REFERENCE_PATTERN = r"\[`([^`\]\n]+)`\](?![\[(])"
HTML_TAG_PATTERN = re.compile(r"<[^>]*>")


class CodeReferenceExtension(Extension):
    """Resolve `` [`name`] `` shortcut references to linked inline code.

    Doc comments mention sibling functions as `` [`name`] `` and rely on
    `` [`name`]: #anchor `` definitions appended to the comment. The
    backtick pattern would otherwise consume the label before reference
    links are resolved, so this processor runs ahead of it.

    Reference labels are case-insensitive in Markdown, while script function
    names are not. The ``targets`` option maps exact names to anchors and is
    consulted before the document's reference definitions.
    """

    def __init__(self, **kwargs: typ.Any) -> None:
        self.config = {"targets": [{}, "Exact function name to anchor mapping"]}
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the code-reference inline processor."""
        processor = CodeReferenceInlineProcessor(
            CODE_REFERENCE_PATTERN, md, targets=self.getConfig("targets")
        )
        md.inlinePatterns.register(processor, "rhai_code_reference", 195)


class CodeReferenceInlineProcessor(InlineProcessor):
    """Emit ``<a href="#anchor"><code>name</code></a>`` for known references."""

    def __init__(
        self,
        pattern: str,
        md: Markdown,
        *,
        targets: cabc.Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(pattern, md)
        self.targets = dict(targets or {})

    def handleMatch(  # type: ignore[override]  # noqa: N802
        self, m: re.Match[str], data: str
    ) -> tuple[Element | None, int | None, int | None]:
        """Return a link element when a matching target or definition exists."""
        name = m.group(1)
        if name in self.targets:
            href, title = f"#{self.targets[name]}", None
        else:
            reference = self.md.references.get(f"`{name}`".lower())
            if reference is None:
                return None, None, None
            href, title = reference
        link = etree.Element("a")
        link.set("href", href)
        if title:
            link.set("title", title)
        code = etree.SubElement(link, "code")
        code.text = AtomicString(name)
        return link, m.start(0), m.end(0)


class FirstHeadingExtension(Extension):
    """Record the text of a leading level-1 heading.

    After conversion :attr:`heading` holds the heading text when the first
    block of the document is an ``<h1>`` with text, otherwise ``None``.
    """

    def __init__(self, **kwargs: typ.Any) -> None:
        super().__init__(**kwargs)
        self.heading: str | None = None

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the heading probe after inline processing."""
        md.treeprocessors.register(FirstHeadingTreeprocessor(md, self), "rhai_h1", -1)


class FirstHeadingTreeprocessor(Treeprocessor):
    """Inspect the first block element of the parsed document."""

    def __init__(self, md: Markdown, extension: FirstHeadingExtension) -> None:
        super().__init__(md)
        self.extension = extension

    def run(self, root: Element) -> None:
        """Store the leading ``<h1>`` text on the owning extension."""
        self.extension.heading = None
        first = next(iter(root), None)
        if first is None or first.tag != "h1":
            return
        text = HTML_PLACEHOLDER_RE.sub(self._stashed, "".join(first.itertext()))
        text = text.strip()
        self.extension.heading = text or None

    def _stashed(self, match: re.Match[str]) -> str:
        """Return the text of a fragment that inline processing stashed.

        Entities, smart punctuation and inline tags are stashed as raw HTML;
        tags are dropped and entities decoded.
        """
        blocks = self.md.htmlStash.rawHtmlBlocks
        index = int(match.group(1))
        if index >= len(blocks):
            return ""
        block = blocks[index]
        if isinstance(block, str):
            return unescape(HTML_TAG_PATTERN.sub("", block))
        return "".join(block.itertext())


__all__ = [
    "CODE_REFERENCE_PATTERN",
    "CodeReferenceExtension",
    "CodeReferenceInlineProcessor",
    "FirstHeadingExtension",
    "FirstHeadingTreeprocessor",
]
