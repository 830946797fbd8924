"""Data models for pre-computed result pages.

A ``PagePayload`` is assembled once per slug and never mutated: every
container is a tuple and every table row a read-only mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Literal, Mapping

Align = Literal["left", "right"]


@dataclass(frozen=True)
class TableColumn:
    key: str
    label: str
    align: Align = "left"


@dataclass(frozen=True)
class ComparisonTable:
    """Columns plus one row per reference band (or per alternative plan)."""

    title: str
    description: str
    columns: tuple[TableColumn, ...]
    rows: tuple[Mapping[str, str], ...]

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        columns: list[TableColumn],
        rows: list[dict[str, str]],
    ) -> ComparisonTable:
        """Freeze plain lists/dicts into an immutable table."""
        return cls(
            title=title,
            description=description,
            columns=tuple(columns),
            rows=tuple(MappingProxyType(dict(row)) for row in rows),
        )


@dataclass(frozen=True)
class FaqEntry:
    question: str
    answer: str


@dataclass(frozen=True)
class RelatedPage:
    title: str
    href: str


@dataclass(frozen=True)
class Breadcrumb:
    label: str
    href: str | None = None


@dataclass(frozen=True)
class CallToAction:
    label: str
    href: str
    description: str


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    og_image: str


@dataclass(frozen=True)
class Hero:
    value: str
    label: str
    summary: str


@dataclass(frozen=True)
class PagePayload:
    """A complete, render-ready programmatic result page."""

    kind: str
    slug: str
    canonical_path: str
    metadata: PageMetadata
    breadcrumbs: tuple[Breadcrumb, ...]
    page_title: str
    intro: str
    hero: Hero
    percentile: int
    percentile_text: str
    comparison: ComparisonTable
    context_heading: str
    context_paragraphs: tuple[str, ...]
    faq: tuple[FaqEntry, ...]
    related_pages: tuple[RelatedPage, ...]
    cta: CallToAction
    extras: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready view, field names in the renderer's camelCase."""
        return {
            "kind": self.kind,
            "slug": self.slug,
            "canonicalPath": self.canonical_path,
            "metadataTitle": self.metadata.title,
            "metadataDescription": self.metadata.description,
            "ogImage": self.metadata.og_image,
            "breadcrumbs": [
                {"label": b.label, **({"href": b.href} if b.href else {})}
                for b in self.breadcrumbs
            ],
            "pageTitle": self.page_title,
            "intro": self.intro,
            "heroValue": self.hero.value,
            "heroLabel": self.hero.label,
            "heroSummary": self.hero.summary,
            "percentile": self.percentile,
            "percentileText": self.percentile_text,
            "comparisonTitle": self.comparison.title,
            "comparisonDescription": self.comparison.description,
            "comparisonColumns": [
                {"key": c.key, "label": c.label, "align": c.align}
                for c in self.comparison.columns
            ],
            "comparisonRows": [dict(row) for row in self.comparison.rows],
            "contextHeading": self.context_heading,
            "contextParagraphs": list(self.context_paragraphs),
            "faq": [{"question": f.question, "answer": f.answer} for f in self.faq],
            "relatedPages": [{"title": r.title, "href": r.href} for r in self.related_pages],
            "cta": {
                "label": self.cta.label,
                "href": self.cta.href,
                "description": self.cta.description,
            },
            "extras": dict(self.extras),
        }
