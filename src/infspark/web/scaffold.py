"""
Lay generated world documents and the master index out on disk.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from ..config import DEFAULT_SITE, SiteConfig
from ..pipeline import DeploymentResult, package_world
from ..render import compose_index_document
from ..util import ensure_directory, is_safe_path_segment, write_if_changed
from ..worlds import World

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_ROOT = Path("outputs/site")
INDEX_FILENAME = "index.html"
FAVICON_FILENAME = "favicon.svg"
FAVICON_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64" viewBox="0 0 64 64" role="img" aria-label="Infinity Spark favicon">
  <defs>
    <linearGradient id="spark" x1="0" y1="0" x2="1" y2="1">
      <stop offset="0" stop-color="#e0b44c"/>
      <stop offset="1" stop-color="#d66bc4"/>
    </linearGradient>
  </defs>
  <rect x="2" y="2" width="60" height="60" rx="14" fill="#1a1c2b"/>
  <path d="M20 32 C20 24, 28 24, 32 32 C36 40, 44 40, 44 32 C44 24, 36 24, 32 32 C28 40, 20 40, 20 32 Z"
        fill="none" stroke="url(#spark)" stroke-width="5" stroke-linecap="round"/>
</svg>
"""


@dataclass
class SiteReport:
    """
    Stores what changed when the site was written.

    Attributes:
        root: The root directory of the site output.
        pages_written: World documents that were created or updated.
        pages_unchanged: World documents already identical on disk.
        skipped: World ids that cannot be used as folder names.
        failures: World id → packaging error message.
        index_written: True if the master index.html changed.
    """
    root: Path
    pages_written: List[Path] = field(default_factory=list)
    pages_unchanged: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    failures: Dict[str, str] = field(default_factory=dict)
    index_written: bool = False

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Pages written", str(len(self.pages_written)))
        yield ("Pages unchanged", str(len(self.pages_unchanged)))
        yield ("Skipped ids", str(len(self.skipped)))
        yield ("Failures", str(len(self.failures)))
        yield ("Index updated", "yes" if self.index_written else "no")


def resolve_output_root(site: SiteConfig, override: Optional[Path] = None) -> Path:
    """
    Determine the absolute path of the directory the site is written to.
    """
    root = override or site.output_root or DEFAULT_OUTPUT_ROOT
    return Path(root).expanduser().resolve()


def world_document_path(root: Path, world: World) -> Path:
    """`<root>/<worldId>/index.html`, matching the index's relative links."""
    return root / world.id / INDEX_FILENAME


def generate_site_structure(
    worlds: Sequence[World],
    site: Optional[SiteConfig] = None,
    *,
    output_root: Optional[Path] = None,
    force: bool = False,
) -> SiteReport:
    """
    Write the master index plus one folder per world.

    Documents whose content is already on disk are left untouched unless
    `force` is set, so re-running after a single world changes only rewrites
    that world and the index.

    Args:
        worlds: Every world in the collection.
        site: Branding and addressing; defaults to the built-in site.
        output_root: Overrides site.output_root.
        force: Rewrite files even when their content is unchanged.

    Returns:
        A SiteReport detailing the actions taken.
    """
    site = site or DEFAULT_SITE
    root = ensure_directory(resolve_output_root(site, output_root))
    report = SiteReport(root=root)
    write_if_changed(root / FAVICON_FILENAME, FAVICON_SVG, force=force)

    publishable: List[World] = []
    for world in worlds:
        if is_safe_path_segment(world.id):
            publishable.append(world)
        else:
            logger.warning("World id '%s' is not a safe folder name; skipping.", world.id)
            report.skipped.append(world.id)

    published: Dict[str, World] = {}
    results = asyncio.run(_package_all(publishable, site))
    for world, result in zip(publishable, results):
        if not result.success:
            report.failures[world.id] = result.error or ""
            continue
        target = world_document_path(root, world)
        if write_if_changed(target, result.index_content, force=force):
            logger.info("Wrote world '%s' → %s", world.id, target)
            report.pages_written.append(target)
        else:
            report.pages_unchanged.append(target)
        # The last world with a given id owns its folder.
        published.pop(world.id, None)
        published[world.id] = world

    # Only link worlds whose folder actually exists.
    index_html = compose_index_document(list(published.values()), site)
    report.index_written = write_if_changed(root / INDEX_FILENAME, index_html, force=force)
    return report


async def _package_all(worlds: Sequence[World], site: SiteConfig) -> List[DeploymentResult]:
    return [await package_world(world, site) for world in worlds]
