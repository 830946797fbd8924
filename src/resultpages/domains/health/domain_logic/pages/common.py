"""Helpers shared by the per-kind page builders."""

from __future__ import annotations

from typing import Any, Callable

from resultpages.core.pages.models import Breadcrumb, ComparisonTable, FaqEntry, RelatedPage
from resultpages.core.reference.loader import load_default_reference_data
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.domain_logic.comparison import Comparison
from resultpages.domains.health.domain_logic.related import related_params
from resultpages.domains.health.domain_logic.slugs import canonical_path, get_codec

SITE_NAME = "HealthCheck"


def resolve_reference(reference: ReferenceData | None) -> ReferenceData:
    return reference if reference is not None else load_default_reference_data()


def breadcrumbs(calculator_label: str, calculator_href: str, current: str) -> tuple[Breadcrumb, ...]:
    return (
        Breadcrumb("Home", "/"),
        Breadcrumb(calculator_label, calculator_href),
        Breadcrumb(current),
    )


def faq(*pairs: tuple[str, str]) -> tuple[FaqEntry, ...]:
    return tuple(FaqEntry(question=q, answer=a) for q, a in pairs)


def comparison_table(comparison: Comparison, *, title: str, description: str) -> ComparisonTable:
    return ComparisonTable.create(
        title=title,
        description=description,
        columns=list(comparison.columns),
        rows=list(comparison.rows),
    )


def related_pages(
    kind: str,
    params: Any,
    reference: ReferenceData,
    title: Callable[[Any], str],
) -> tuple[RelatedPage, ...]:
    """Related-page links titled by ``title(candidate_params)``."""
    codec = get_codec(kind)
    return tuple(
        RelatedPage(title=title(candidate), href=canonical_path(kind, codec.build(candidate)))
        for candidate in related_params(kind, params, reference)
    )
