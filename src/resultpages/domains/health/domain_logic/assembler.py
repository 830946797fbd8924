"""Page assembly: dispatch a (kind, slug) pair to the right page builder."""

from __future__ import annotations

import logging
from functools import lru_cache

from resultpages.core.pages.models import PagePayload
from resultpages.core.pages.registry import PageBuilder, PageRegistry
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.domain_logic.enumeration import get_all_programmatic_paths
from resultpages.domains.health.domain_logic.pages.bmi import build_bmi_programmatic_page
from resultpages.domains.health.domain_logic.pages.body_fat import build_body_fat_programmatic_page
from resultpages.domains.health.domain_logic.pages.calorie_deficit import (
    build_calorie_deficit_programmatic_page,
)
from resultpages.domains.health.domain_logic.pages.macro import build_macro_programmatic_page
from resultpages.domains.health.domain_logic.pages.tdee import build_tdee_programmatic_page
from resultpages.domains.health.domain_logic.slugs import ROUTE_SEGMENTS

logger = logging.getLogger(__name__)

__all__ = [
    "assemble",
    "build_bmi_programmatic_page",
    "build_body_fat_programmatic_page",
    "build_calorie_deficit_programmatic_page",
    "build_default_registry",
    "build_macro_programmatic_page",
    "build_tdee_programmatic_page",
    "get_all_programmatic_paths",
]


def build_default_registry() -> PageRegistry:
    """A registry holding the five health result kinds, in route order."""
    registry = PageRegistry()
    for kind, build, display_name in (
        ("bmi", build_bmi_programmatic_page, "BMI"),
        ("tdee", build_tdee_programmatic_page, "TDEE"),
        ("calorie-deficit", build_calorie_deficit_programmatic_page, "Calorie Deficit"),
        ("body-fat", build_body_fat_programmatic_page, "Body Fat"),
        ("macro", build_macro_programmatic_page, "Macros"),
    ):
        registry.register(
            PageBuilder(
                kind=kind,
                route_segment=ROUTE_SEGMENTS[kind],
                build=build,
                display_name=display_name,
            )
        )
    return registry


@lru_cache(maxsize=1)
def _default_registry() -> PageRegistry:
    return build_default_registry()


def assemble(
    kind: str,
    slug: str,
    reference: ReferenceData | None = None,
    *,
    registry: PageRegistry | None = None,
) -> PagePayload | None:
    """Build the page for ``slug`` under ``kind``.

    Returns ``None`` when the slug does not parse or falls outside the kind's
    domain.

    Raises:
        ValueError: if ``kind`` is not a registered result kind.
    """
    registry = registry if registry is not None else _default_registry()
    builder = registry.get(kind)
    if builder is None:
        raise ValueError(f"Unknown result kind: {kind!r}")

    page = builder.build(slug, reference)
    if page is None:
        logger.debug("No %s page for slug %r", kind, slug)
    return page
