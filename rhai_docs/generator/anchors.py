"""Anchor ids and canonical ordering for documented functions."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from rhai_docs.script_parser import ScriptFunction


def anchor(name: str, param_count: int) -> str:
    """Return the in-page anchor for a function.

    Functions without parameters keep their bare name; overloads are told
    apart by arity.

    >>> anchor("f", 0), anchor("f", 2)
    ('f', 'f-2')
    """
    if param_count == 0:
        return name
    return f"{name}-{param_count}"


def function_anchor(function: ScriptFunction) -> str:
    """Return :func:`anchor` for a parsed script function."""
    return anchor(function.name, function.param_count)


def canonical_order(
    functions: cabc.Iterable[ScriptFunction],
) -> list[ScriptFunction]:
    """Sort functions by name, then by parameter count (stable)."""
    return sorted(functions, key=lambda fn: (fn.name, fn.param_count))


__all__ = ["anchor", "canonical_order", "function_anchor"]
