"""Integration tests for the result pages MCP server."""

from __future__ import annotations

import asyncio
import json

import pytest
from fastmcp import Client

from resultpages.core.config.settings import Settings
from resultpages.core.server.app import create_app
from resultpages.core.server.main import _is_loopback_host, run


def _run(coro):
    """Run an async coroutine synchronously (no pytest-asyncio required)."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


ALL_EXPECTED_TOOLS = [
    "health_check",
    "programmatic_page",
    "programmatic_slugs",
    "parse_result_slug",
]


@pytest.fixture
def client(reference):
    """Create an MCP client connected to a fresh server instance."""
    mcp = create_app(settings=Settings(), reference_override=reference)
    return Client(mcp)


def test_server_starts_and_lists_tools(client):
    """Server should start and expose all registered tools."""
    async def _check():
        async with client:
            tools = await client.list_tools()
            tool_names = [t.name for t in tools]
            for expected in ALL_EXPECTED_TOOLS:
                assert expected in tool_names, f"Missing tool: {expected}"
    _run(_check())


def test_health_check_reports_path_total(client):
    """health_check should return ok and the enumerated path total."""
    async def _check():
        async with client:
            result = await client.call_tool("health_check", {})
            result_text = str(result)
            assert "ok" in result_text
            assert "1188" in result_text
    _run(_check())


def test_programmatic_page_found(client):
    """A published slug should come back as a full page payload."""
    async def _check():
        async with client:
            result = await client.call_tool(
                "programmatic_page", {"kind": "bmi", "slug": "68-170-male"}
            )
            result_text = str(result)
            assert "/bmi/results/68-170-male" in result_text
            assert "comparisonRows" in result_text
    _run(_check())


def test_programmatic_page_not_found(client):
    """A slug that does not parse should return not_found, not an error."""
    async def _check():
        async with client:
            result = await client.call_tool(
                "programmatic_page", {"kind": "tdee", "slug": "bad-slug"}
            )
            assert "not_found" in str(result)
    _run(_check())


def test_programmatic_page_unknown_kind(client):
    """An unknown kind should be reported as an error with the valid kinds."""
    async def _check():
        async with client:
            result = await client.call_tool(
                "programmatic_page", {"kind": "bmr", "slug": "68-170-male"}
            )
            result_text = str(result)
            assert "Unknown result kind" in result_text
            assert "calorie-deficit" in result_text
    _run(_check())


def test_programmatic_slugs(client):
    """programmatic_slugs should list every body-fat slug."""
    async def _check():
        async with client:
            result = await client.call_tool("programmatic_slugs", {"kind": "body-fat"})
            result_text = str(result)
            assert "18-year-old-male-bmi" in result_text
            assert "70-year-old-female-bmi" in result_text
    _run(_check())


def test_parse_result_slug(client):
    """parse_result_slug should decode parameters without building the page."""
    async def _check():
        async with client:
            result = await client.call_tool(
                "parse_result_slug",
                {"kind": "macro", "slug": "2200-calories-maintenance-balanced"},
            )
            result_text = str(result)
            assert "maintenance" in result_text
            assert "2200" in result_text

            missing = await client.call_tool(
                "parse_result_slug", {"kind": "macro", "slug": "2300-calories-maintenance-balanced"}
            )
            assert "not_found" in str(missing)
    _run(_check())


def test_sitemap_resource(client):
    """The sitemap resource should list every canonical path exactly once."""
    async def _check():
        async with client:
            contents = await client.read_resource("sitemap://programmatic/paths")
            paths = json.loads(contents[0].text)
            assert len(paths) == 1188
            assert len(set(paths)) == len(paths)
            assert "/macro/results/2200-calories-maintenance-balanced" in paths
    _run(_check())


# ---------------------------------------------------------------------------
# Entry point bind guard
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "host,expected",
    [("127.0.0.1", True), ("localhost", True), ("::1", True), ("0.0.0.0", False),
     ("example.com", False)],
)
def test_is_loopback_host(host, expected):
    assert _is_loopback_host(host) is expected


def test_run_refuses_non_loopback_bind(monkeypatch):
    monkeypatch.setenv("PAGES_HOST", "0.0.0.0")
    with pytest.raises(RuntimeError, match="non-loopback"):
        run()
