"""MCP tools for programmatic result pages.

The page tools are thin wrappers over the assembler: a slug that does not
parse comes back as ``not_found``, an unknown result kind as ``error``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING

from fastmcp import Context, FastMCP

from resultpages.domains.health.domain_logic.assembler import assemble
from resultpages.domains.health.domain_logic.slugs import RESULT_KINDS, get_codec

if TYPE_CHECKING:
    from resultpages.core.pages.registry import PageRegistry
    from resultpages.core.reference.models import ReferenceData

logger = logging.getLogger(__name__)


def _unknown_kind(kind: str) -> str:
    return json.dumps({
        "status": "error",
        "error": f"Unknown result kind: {kind!r}",
        "kinds": list(RESULT_KINDS),
    })


def register_programmatic_page_tools(
    mcp: FastMCP,
    registry: PageRegistry,
    reference: ReferenceData,
    slugs_by_kind: dict[str, list[str]],
) -> None:
    """Register page lookup and slug tools on the MCP server."""

    @mcp.tool
    async def programmatic_page(
        ctx: Context,
        kind: str,
        slug: str,
    ) -> str:
        """Render the pre-computed result page for one slug.

        Args:
            kind: Result kind: bmi, tdee, calorie-deficit, body-fat, or macro.
            slug: URL slug, e.g. '68-170-male' or '2200-calories-maintenance-balanced'.
        """
        if registry.get(kind) is None:
            return _unknown_kind(kind)

        page = assemble(kind, slug, reference, registry=registry)
        if page is None:
            logger.info("No %s page for slug %r", kind, slug)
            return json.dumps({"status": "not_found", "kind": kind, "slug": slug})

        return json.dumps({"status": "ok", "page": page.to_dict()}, indent=2)

    @mcp.tool
    async def programmatic_slugs(
        ctx: Context,
        kind: str,
    ) -> str:
        """List every published slug for a result kind, in sitemap order.

        Args:
            kind: Result kind: bmi, tdee, calorie-deficit, body-fat, or macro.
        """
        if kind not in slugs_by_kind:
            return _unknown_kind(kind)

        slugs = slugs_by_kind[kind]
        return json.dumps({
            "status": "ok",
            "kind": kind,
            "count": len(slugs),
            "slugs": slugs,
        })

    @mcp.tool
    async def parse_result_slug(
        ctx: Context,
        kind: str,
        slug: str,
    ) -> str:
        """Decode a result slug into its parameters without building the page.

        Args:
            kind: Result kind: bmi, tdee, calorie-deficit, body-fat, or macro.
            slug: URL slug to decode.
        """
        try:
            codec = get_codec(kind)
        except ValueError:
            return _unknown_kind(kind)

        params = codec.parse(slug, reference)
        if params is None:
            return json.dumps({"status": "not_found", "kind": kind, "slug": slug})

        return json.dumps({
            "status": "ok",
            "kind": kind,
            "slug": codec.build(params),
            "params": asdict(params),
        })
