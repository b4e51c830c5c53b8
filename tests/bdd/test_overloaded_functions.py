"""Behaviour tests for documenting overloaded functions.

The scenario in ``features/overloaded_functions.feature`` defines ``f`` with
three arities out of order and checks anchors, ordering, sidebar sub-links,
and cross-reference targets on the generated script page.

Usage
-----
Run ``pytest tests/bdd/test_overloaded_functions.py -v``.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, scenarios, then, when

from rhai_docs.config import SiteConfig
from rhai_docs.generator import SiteGenerator

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "overloaded_functions.feature"
)
scenarios(FEATURE_FILE)

OVERLOADS = """\
/// Two-argument form.
fn f(a, b) { a + b }

/// Zero-argument form; prefer [`f`].
fn f() { 0 }

/// One-argument form.
fn f(a) { a }
"""


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _page(scenario_state: dict[str, object]) -> BeautifulSoup:
    return typ.cast("BeautifulSoup", scenario_state["page"])


@given("a script defining f with two, zero and one parameters")
def given_script(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write the overloads in non-canonical order."""
    scripts = tmp_path / "scripts"
    scripts.mkdir()
    (scripts / "funcs.rhai").write_text(OVERLOADS, encoding="utf-8")
    scenario_state["scripts"] = scripts
    scenario_state["destination"] = tmp_path / "dist"


@when("I generate the site for the script")
def when_generate(scenario_state: dict[str, object]) -> None:
    """Render the site and parse the script page."""
    scripts = typ.cast("Path", scenario_state["scripts"])
    destination = typ.cast("Path", scenario_state["destination"])
    SiteGenerator(
        SiteConfig(),
        scripts_root=scripts,
        pages_root=scripts / "pages",
        destination=destination,
    ).run()
    html = (destination / "funcs.html").read_text(encoding="utf-8")
    scenario_state["page"] = BeautifulSoup(html, "html.parser")


@then("the script page documents f, f-1 and f-2 in that order")
def then_anchor_order(scenario_state: dict[str, object]) -> None:
    """Sections follow canonical order with arity-based ids."""
    ids = [section["id"] for section in _page(scenario_state).select("section.fn-block")]
    assert ids == ["f", "f-1", "f-2"], "expected overloads ordered by arity"


@then("the sidebar links to each overload from the active script entry")
def then_sidebar_links(scenario_state: dict[str, object]) -> None:
    """The active script entry lists one sub-link per overload."""
    active = _page(scenario_state).select_one("li.site-nav__item.is-active")
    assert active is not None, "expected the script entry to be active"
    links = [(a.get_text(), a["href"]) for a in active.select("ul.site-nav__functions a")]
    assert links == [("f()", "#f"), ("f(a)", "#f-1"), ("f(a, b)", "#f-2")]


@then("a cross reference to f links to the zero-parameter overload")
def then_cross_reference(scenario_state: dict[str, object]) -> None:
    """Name-only cross references resolve to the first overload."""
    reference = _page(scenario_state).select_one("section#f .fn-block__body a")
    assert reference is not None, "expected the [`f`] mention to become a link"
    assert reference["href"] == "#f"
