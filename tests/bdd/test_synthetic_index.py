"""Behaviour tests for the generated root index page.

These pytest-bdd scenarios, backed by ``features/synthetic_index.feature``,
build a small project and check that ``index.html`` is either generated with
navigation only or replaced by the configured index page.

Usage
-----
Run ``pytest tests/bdd/test_synthetic_index.py -v``.
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
    Path(__file__).resolve().parents[2] / "features" / "synthetic_index.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(scenario_state: dict[str, object], name: str) -> BeautifulSoup:
    destination = typ.cast("Path", scenario_state["destination"])
    return BeautifulSoup((destination / name).read_text(encoding="utf-8"), "html.parser")


def _generate(scenario_state: dict[str, object], config: SiteConfig) -> None:
    root = typ.cast("Path", scenario_state["root"])
    generator = SiteGenerator(
        config,
        scripts_root=root / "scripts",
        pages_root=root / "pages",
        destination=typ.cast("Path", scenario_state["destination"]),
    )
    scenario_state["written"] = generator.run()


@given("a project with a guide page and a documented script")
def given_project(tmp_path: Path, scenario_state: dict[str, object]) -> None:
    """Write one narrative page and one script into a temporary project."""
    (tmp_path / "pages").mkdir()
    (tmp_path / "scripts").mkdir()
    (tmp_path / "pages" / "guide.md").write_text(
        "# Guide\n\nStart here.\n", encoding="utf-8"
    )
    (tmp_path / "scripts" / "tools.rhai").write_text(
        "/// Does things.\nfn run() {}\n", encoding="utf-8"
    )
    scenario_state["root"] = tmp_path
    scenario_state["destination"] = tmp_path / "dist"


@when("I generate the site without an index page")
def when_generate_without_index(scenario_state: dict[str, object]) -> None:
    """Generate the site with no index page configured."""
    _generate(scenario_state, SiteConfig(name="Toolkit"))


@when("I generate the site with the guide as the index page")
def when_generate_with_index(scenario_state: dict[str, object]) -> None:
    """Generate the site with the guide configured as the index page."""
    _generate(scenario_state, SiteConfig(name="Toolkit", index="guide.md"))


@then("index.html is written with an empty body")
def then_index_empty(scenario_state: dict[str, object]) -> None:
    """The generated index carries no narrative content."""
    article = _soup(scenario_state, "index.html").select_one("article.page-markdown")
    assert article is not None, "expected the narrative container on the index"
    assert article.get_text(strip=True) == "", "expected an empty index body"


@then("index.html lists the guide page and the script without an active entry")
def then_index_navigation(scenario_state: dict[str, object]) -> None:
    """The generated index links every entry and highlights none."""
    soup = _soup(scenario_state, "index.html")
    pages = [a["href"] for a in soup.select("ul.site-nav__list--pages a")]
    scripts = [a["href"] for a in soup.select("ul.site-nav__list--scripts a")]
    assert (pages, scripts) == (["guide.html"], ["tools.html"])
    assert soup.select(".is-active") == [], "expected no active navigation entry"


@then("index.html shows the guide content")
def then_index_shows_guide(scenario_state: dict[str, object]) -> None:
    """The configured index page is rendered at the site root."""
    soup = _soup(scenario_state, "index.html")
    assert "Start here." in soup.select_one("article.page-markdown").get_text()
    active = [a.get_text() for a in soup.select("li.is-active > a")]
    assert active == ["Guide"]


@then("no separate guide page is written")
def then_no_guide_page(scenario_state: dict[str, object]) -> None:
    """The index page is not also written under its own name."""
    destination = typ.cast("Path", scenario_state["destination"])
    assert not (destination / "guide.html").exists()
