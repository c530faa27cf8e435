"""
Packaging orchestrator: turns one world into a deployable result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Union

from ..config import DEFAULT_SITE, SiteConfig
from ..render import compose_world_document
from ..worlds import World
from .suggestions import generate_suggestions

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error occurred"


@dataclass(frozen=True)
class DeploymentResult:
    """
    Outcome of packaging a world.

    Either `success` is True and `index_content` holds the document, or
    `success` is False and `error` explains why; never both.

    Attributes:
        success: Whether the document was produced.
        url: Public URL the world will be served from.
        repo_path: Repository-relative folder for the world.
        index_content: The generated document text.
        suggestions: Up to three improvement hints.
        error: Human-readable failure message.
    """
    success: bool
    url: str = ""
    repo_path: str = ""
    index_content: str = ""
    suggestions: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "DeploymentResult":
        return cls(success=False, error=error or UNKNOWN_ERROR)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Status", "ready" if self.success else "failed")
        if self.success:
            yield ("URL", self.url)
            yield ("Repository path", self.repo_path)
            yield ("Document size", f"{len(self.index_content.encode('utf-8')) // 1024} KB")
        else:
            yield ("Error", self.error or UNKNOWN_ERROR)


def _package(world: Union[World, Mapping[str, Any]], site: SiteConfig) -> DeploymentResult:
    if not isinstance(world, World):
        world = World.model_validate(world)
    document = compose_world_document(world, site)
    suggestions = generate_suggestions(world)
    return DeploymentResult(
        success=True,
        url=site.world_url(world.id),
        repo_path=site.world_repo_path(world.id),
        index_content=document,
        suggestions=suggestions,
    )


async def package_world(
    world: Union[World, Mapping[str, Any]],
    site: Optional[SiteConfig] = None,
) -> DeploymentResult:
    """
    Generate a world's document, suggestions and public location.

    The coroutine performs no I/O; it exists so callers can show progress
    while awaiting it. It never raises: any failure while validating or
    composing is returned as a failed DeploymentResult.

    Args:
        world: A validated World or a raw store mapping (validated here).
        site: Branding and addressing; defaults to the built-in site.
    """
    site = site or DEFAULT_SITE
    try:
        result = _package(world, site)
    except Exception as exc:
        world_id = getattr(world, "id", None) or (world.get("id") if isinstance(world, Mapping) else None)
        logger.error("Packaging failed for world %s: %s", world_id or "<unknown>", exc, exc_info=True)
        return DeploymentResult.failed(str(exc))
    logger.info("Packaged world '%s' → %s", result.repo_path, result.url)
    return result
