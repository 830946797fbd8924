"""Result pages server entry point: ``python -m resultpages.core.server.main``."""

from __future__ import annotations

import logging
from ipaddress import ip_address

from resultpages.core.config.settings import get_settings
from resultpages.core.server.app import create_app


def _is_loopback_host(host: str) -> bool:
    if host in {"localhost"}:
        return True
    try:
        return ip_address(host).is_loopback
    except ValueError:
        return False


def run() -> None:
    """Start the result pages MCP server with Streamable HTTP transport."""
    settings = get_settings()
    logging.basicConfig(level=getattr(logging, settings.pages_log_level.upper(), logging.INFO))

    logger = logging.getLogger(__name__)
    if not settings.pages_allow_insecure_bind and not _is_loopback_host(settings.pages_host):
        raise RuntimeError(
            f"Refusing to bind result pages server to non-loopback host {settings.pages_host!r}. "
            "Set PAGES_ALLOW_INSECURE_BIND=true to override."
        )
    logger.info(
        "Starting HealthCheck result pages server on %s:%d",
        settings.pages_host,
        settings.pages_port,
    )

    mcp = create_app(settings=settings)
    mcp.run(
        transport="streamable-http",
        host=settings.pages_host,
        port=settings.pages_port,
    )


if __name__ == "__main__":
    run()
