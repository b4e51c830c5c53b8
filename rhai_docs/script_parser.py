"""Extract documented function signatures from Rhai scripts.

The site builder never evaluates scripts; it only needs the ordered list of
top-level function definitions together with their visibility and the doc
comments that precede them. :class:`RhaiScriptParser` performs a lexical scan
that understands enough of Rhai's surface syntax (strings, nested block
comments, brace nesting) to find ``fn`` and ``private fn`` definitions at
global level without being confused by braces or keywords inside literals.

Example
-------
>>> from pathlib import Path
>>> parser = RhaiScriptParser()
>>> script = parser.parse_source("/// Adds.\\nfn add(a, b) { a + b }", Path("m.rhai"))
>>> [(fn.name, fn.param_count, fn.comments) for fn in script.functions]
[('add', 2, ['/// Adds.'])]
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class ScriptParseError(ValueError):
    """Raised when a script cannot be scanned for function definitions."""

    def __init__(self, path: Path, line: int, reason: str) -> None:
        self.path = path
        self.line = line
        self.reason = reason
        super().__init__(f"{path}:{line}: {reason}")


@dc.dataclass(slots=True)
class ScriptFunction:
    """A single function definition found in a script.

    Attributes
    ----------
    name : str
        Function name as written in the source.
    params : list[str]
        Parameter names in declaration order.
    is_private : bool
        ``True`` for ``private fn`` definitions.
    comments : list[str]
        Raw doc comments preceding the definition, markers included. A
        ``/** ... */`` block is kept as one (possibly multi-line) entry.
    line : int
        1-based line number of the ``fn`` keyword.
    """

    name: str
    params: list[str]
    is_private: bool = False
    comments: list[str] = dc.field(default_factory=list)
    line: int = 0

    @property
    def param_count(self) -> int:
        """Return the function's arity."""
        return len(self.params)

    def display(self) -> str:
        """Return ``name(a, b)`` for navigation labels."""
        return f"{self.name}({', '.join(self.params)})"

    def signature(self) -> str:
        """Return the declaration text shown above the function docs."""
        prefix = "private fn" if self.is_private else "fn"
        return f"{prefix} {self.display()}"


@dc.dataclass(slots=True)
class ParsedScript:
    """Parse result for one script file, functions in source order."""

    path: Path
    functions: list[ScriptFunction]

    def visible_functions(self, *, skip_private: bool) -> list[ScriptFunction]:
        """Return the functions to document, dropping private ones on request."""
        if not skip_private:
            return list(self.functions)
        return [fn for fn in self.functions if not fn.is_private]


class ScriptParser(typ.Protocol):
    """Anything able to turn a script path into a :class:`ParsedScript`."""

    def parse(self, path: Path) -> ParsedScript: ...


class RhaiScriptParser:
    """Lexical scanner for Rhai function definitions."""

    def parse(self, path: Path) -> ParsedScript:
        """Read ``path`` and return its top-level function definitions.

        Raises
        ------
        OSError
            If the file cannot be read.
        ScriptParseError
            If the source is malformed.
        """
        source = path.read_text(encoding="utf-8")
        return self.parse_source(source, path)

    def parse_source(self, source: str, path: Path) -> ParsedScript:
        """Scan ``source`` (read from ``path``) for function definitions."""
        return ParsedScript(path=path, functions=_Scanner(source, path).run())


class _Scanner:
    """Single-pass cursor over script text."""

    def __init__(self, source: str, path: Path) -> None:
        self.text = source
        self.path = path
        self.pos = 0
        self.line = 1
        self.open_braces: list[int] = []
        self.pending_comments: list[str] = []
        self.pending_private = False
        self.functions: list[ScriptFunction] = []

    def run(self) -> list[ScriptFunction]:
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if char.isspace():
                self._advance(1)
            elif text.startswith("//", self.pos):
                self._line_comment()
            elif text.startswith("/*", self.pos):
                self._block_comment()
            elif char in "\"`":
                self._string(char)
                self._reset_pending()
            elif char == "'":
                self._char_literal()
                self._reset_pending()
            elif char == "{":
                self.open_braces.append(self.line)
                self._advance(1)
                self._reset_pending()
            elif char == "}":
                if not self.open_braces:
                    self._fail("unbalanced braces: unexpected '}'")
                self.open_braces.pop()
                self._advance(1)
                self._reset_pending()
            elif char.isalpha() or char == "_":
                self._word()
            else:
                self._advance(1)
                self._reset_pending()
        if self.open_braces:
            raise ScriptParseError(
                self.path, self.open_braces[-1], "unbalanced braces: missing '}'"
            )
        return self.functions

    @property
    def _at_top_level(self) -> bool:
        return not self.open_braces

    def _advance(self, count: int) -> None:
        chunk = self.text[self.pos : self.pos + count]
        self.line += chunk.count("\n")
        self.pos += count

    def _fail(self, reason: str) -> typ.NoReturn:
        raise ScriptParseError(self.path, self.line, reason)

    def _reset_pending(self) -> None:
        self.pending_comments = []
        self.pending_private = False

    def _line_comment(self) -> None:
        end = self.text.find("\n", self.pos)
        if end == -1:
            end = len(self.text)
        comment = self.text[self.pos : end].rstrip("\r")
        is_doc = comment.startswith("///") and not comment.startswith("////")
        if is_doc and self._at_top_level:
            self.pending_comments.append(comment)
        self._advance(end - self.pos)

    def _block_comment(self) -> None:
        start = self.pos
        start_line = self.line
        depth = 0
        text = self.text
        while self.pos < len(text):
            if text.startswith("/*", self.pos):
                depth += 1
                self._advance(2)
            elif text.startswith("*/", self.pos):
                depth -= 1
                self._advance(2)
                if depth == 0:
                    break
            else:
                self._advance(1)
        if depth:
            raise ScriptParseError(self.path, start_line, "unterminated block comment")
        comment = text[start : self.pos]
        is_doc = (
            comment.startswith("/**")
            and not comment.startswith("/***")
            and comment != "/**/"
        )
        if is_doc and self._at_top_level:
            self.pending_comments.append(comment)

    def _string(self, quote: str) -> None:
        start_line = self.line
        self._advance(1)
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if char == "\\" and quote == '"':
                self._advance(2)
            elif char == quote:
                self._advance(1)
                return
            else:
                self._advance(1)
        raise ScriptParseError(self.path, start_line, "unterminated string literal")

    def _char_literal(self) -> None:
        text = self.text
        cursor = self.pos + 1
        while cursor < len(text) and text[cursor] not in "'\n":
            cursor += 2 if text[cursor] == "\\" else 1
        if cursor >= len(text) or text[cursor] != "'":
            self._fail("unterminated character literal")
        self._advance(cursor + 1 - self.pos)

    def _word(self) -> None:
        match = IDENTIFIER_PATTERN.match(self.text, self.pos)
        if match is None:  # pragma: no cover - guarded by caller
            self._fail("expected identifier")
        word = match.group(0)
        self._advance(len(word))
        if not self._at_top_level:
            return
        if word == "private":
            self.pending_private = True
        elif word == "fn":
            self._function_definition()
        else:
            self._reset_pending()

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self._advance(1)

    def _identifier(self, what: str) -> str:
        self._skip_whitespace()
        match = IDENTIFIER_PATTERN.match(self.text, self.pos)
        if match is None:
            self._fail(f"expected {what}")
        self._advance(len(match.group(0)))
        return match.group(0)

    def _expect(self, char: str, what: str) -> None:
        self._skip_whitespace()
        if not self.text.startswith(char, self.pos):
            self._fail(f"expected '{char}' {what}")

    def _function_definition(self) -> None:
        fn_line = self.line
        name = self._identifier("function name after 'fn'")
        self._expect("(", f"after function name '{name}'")
        self._advance(1)
        params: list[str] = []
        self._skip_whitespace()
        if self.text.startswith(")", self.pos):
            self._advance(1)
        else:
            while True:
                params.append(self._identifier(f"parameter name in '{name}'"))
                self._skip_whitespace()
                if self.text.startswith(",", self.pos):
                    self._advance(1)
                    continue
                self._expect(")", f"to close parameters of '{name}'")
                self._advance(1)
                break
        self._expect("{", f"to open the body of '{name}'")
        self.functions.append(
            ScriptFunction(
                name=name,
                params=params,
                is_private=self.pending_private,
                comments=self.pending_comments,
                line=fn_line,
            )
        )
        self._reset_pending()


__all__ = [
    "ParsedScript",
    "RhaiScriptParser",
    "ScriptFunction",
    "ScriptParseError",
    "ScriptParser",
]
