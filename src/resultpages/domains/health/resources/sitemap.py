"""MCP Resources for sitemap generation."""

from __future__ import annotations

import json

from fastmcp import FastMCP


def register_sitemap_resources(mcp: FastMCP, paths: list[str]) -> None:
    """Register the programmatic sitemap resource on the MCP server."""

    @mcp.resource("sitemap://programmatic/paths")
    def programmatic_paths_resource() -> str:
        """Every canonical result-page path, in publication order."""
        return json.dumps(paths)
