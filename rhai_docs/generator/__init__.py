"""Utilities for discovering, assembling, and rendering documentation pages."""

from .anchors import anchor, canonical_order
from .assembler import PageAssembler
from .comments import collect_cross_refs, translate_comment
from .models import (
    FunctionRecord,
    NarrativeBody,
    NavEntry,
    NavigationGraph,
    PageRecord,
    ScriptBody,
    SiteAssets,
    SubLink,
)
from .navigation import NavigationBuilder, NavigationError, ensure_unique_links
from .paths import root_prefix
from .renderer import HtmlContentRenderer
from .site_generator import SiteGenerator
from .templating import TemplateRenderer

__all__ = [
    "FunctionRecord",
    "HtmlContentRenderer",
    "NarrativeBody",
    "NavEntry",
    "NavigationBuilder",
    "NavigationError",
    "NavigationGraph",
    "PageAssembler",
    "PageRecord",
    "ScriptBody",
    "SiteAssets",
    "SiteGenerator",
    "SubLink",
    "TemplateRenderer",
    "anchor",
    "canonical_order",
    "collect_cross_refs",
    "ensure_unique_links",
    "root_prefix",
    "translate_comment",
]
