"""HealthCheck result pages MCP server application factory.

This module provides:
- create_app() for testability (integration tests create fresh server instances)
- Module-level `mcp` variable for FastMCP discovery
"""

from __future__ import annotations

import logging
from datetime import date

from fastmcp import FastMCP

from resultpages.core.config.settings import Settings, get_settings
from resultpages.core.reference.loader import (
    DEFAULT_REFERENCE_PATH,
    load_default_reference_data,
    load_reference_file,
)
from resultpages.core.reference.models import ReferenceData
from resultpages.domains.health.domain_logic.assembler import build_default_registry
from resultpages.domains.health.domain_logic.enumeration import (
    enumerate_slugs,
    get_all_programmatic_paths,
)
from resultpages.domains.health.resources.sitemap import register_sitemap_resources
from resultpages.domains.health.tools.programmatic_pages import register_programmatic_page_tools

logger = logging.getLogger(__name__)

SERVER_VERSION = "0.1.0"


def _projection_start(value: str) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning("Ignoring invalid PROJECTION_START_DATE %r (expected YYYY-MM-DD)", value)
        return None


def load_reference(settings: Settings) -> ReferenceData:
    """Reference data honoring the path, projection date, and TDEE limit settings."""
    projection_start = _projection_start(settings.projection_start_date)
    default = load_default_reference_data()
    if (
        not settings.reference_data_path
        and projection_start is None
        and settings.tdee_page_limit == default.tdee_ranking.limit
    ):
        return default

    return load_reference_file(
        settings.reference_data_path or DEFAULT_REFERENCE_PATH,
        projection_start=projection_start,
        tdee_limit=settings.tdee_page_limit,
    )


def create_app(
    *,
    settings: Settings | None = None,
    reference_override: ReferenceData | None = None,
) -> FastMCP:
    """Create and configure the result pages MCP server.

    This is the main application factory. It:
    1. Creates the FastMCP server instance
    2. Loads the reference data
    3. Builds the page registry
    4. Enumerates every published slug once
    5. Registers all tools and resources
    """
    settings = settings if settings is not None else get_settings()

    # --- Server instance ---
    server = FastMCP(
        "HealthCheck Result Pages",
        instructions=(
            "Programmatic result pages for the HealthCheck calculators. "
            "Looks up pre-computed BMI, TDEE, calorie deficit, body fat, and macro "
            "result pages by slug and lists every published path for sitemaps."
        ),
    )

    # --- Reference data and registry ---
    reference = reference_override if reference_override is not None else load_reference(settings)
    registry = build_default_registry()
    logger.info("Registered %d page builders: %s", len(registry), ", ".join(registry.kinds()))

    # --- Enumerate once; every request reads these lists ---
    slugs_by_kind = {kind: enumerate_slugs(kind, reference) for kind in registry.kinds()}
    paths = get_all_programmatic_paths(reference)

    # --- Register tools ---
    @server.tool
    def health_check() -> dict:
        """Check server health and return basic status information."""
        return {
            "status": "ok",
            "server": "HealthCheck Result Pages",
            "version": SERVER_VERSION,
            "reference_version": reference.version,
            "projection_start": reference.projection_start.isoformat(),
            "slug_counts": {kind: len(slugs) for kind, slugs in slugs_by_kind.items()},
            "total_paths": len(paths),
        }

    register_programmatic_page_tools(server, registry, reference, slugs_by_kind)
    logger.info("Programmatic page tools registered")

    # --- Register resources ---
    register_sitemap_resources(server, paths)

    return server


# Module-level instance for FastMCP discovery.
# Lazy: only created when this module is loaded directly (not when tests import create_app).
def __getattr__(name: str):
    if name == "mcp":
        global mcp  # noqa: PLW0603
        mcp = create_app()
        return mcp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
