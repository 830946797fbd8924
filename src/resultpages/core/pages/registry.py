"""Page builder registry: in-memory index of result kinds and their builders."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from resultpages.core.pages.models import PagePayload
    from resultpages.core.reference.models import ReferenceData

logger = logging.getLogger(__name__)

PageBuildFn = Callable[[str, "ReferenceData | None"], "PagePayload | None"]


@dataclass(frozen=True)
class PageBuilder:
    """How one result kind turns a slug into a page."""

    kind: str
    route_segment: str
    build: PageBuildFn
    display_name: str = ""


class PageRegistry:
    """Registry of page builders keyed by result kind, in registration order."""

    def __init__(self) -> None:
        self._builders: dict[str, PageBuilder] = {}
        self._by_segment: dict[str, str] = {}

    def register(self, builder: PageBuilder) -> None:
        """Add a builder; kinds and route segments must both be unique."""
        if builder.kind in self._builders:
            raise ValueError(f"Duplicate page builder registered: {builder.kind!r}")
        if builder.route_segment in self._by_segment:
            raise ValueError(f"Duplicate route segment registered: {builder.route_segment!r}")
        self._builders[builder.kind] = builder
        self._by_segment[builder.route_segment] = builder.kind
        logger.debug("Registered page builder: %s (/%s)", builder.kind, builder.route_segment)

    def get(self, kind: str) -> PageBuilder | None:
        return self._builders.get(kind)

    def find_by_segment(self, route_segment: str) -> PageBuilder | None:
        kind = self._by_segment.get(route_segment)
        return self._builders[kind] if kind else None

    def kinds(self) -> list[str]:
        return list(self._builders)

    def all(self) -> list[PageBuilder]:
        return list(self._builders.values())

    def __len__(self) -> int:
        return len(self._builders)
