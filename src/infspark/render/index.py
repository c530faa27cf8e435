"""
Master index document listing every world.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Union

from ..config import DEFAULT_SITE, SiteConfig
from ..util import format_created_date, format_grouped
from ..worlds import World
from .widgets import TextFilter, text_filter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexStats:
    """
    Aggregate figures shown at the top of the index.

    Attributes:
        world_count: Number of worlds listed.
        tool_count: Top-level tools summed over all worlds.
        total_value: Sum of every world's value.
    """
    world_count: int
    tool_count: int
    total_value: Union[int, float]

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Worlds", str(self.world_count))
        yield ("Tools", str(self.tool_count))
        yield ("Total value", format_grouped(self.total_value))


def index_statistics(worlds: Sequence[World]) -> IndexStats:
    return IndexStats(
        world_count=len(worlds),
        tool_count=sum(len(world.tools) for world in worlds),
        total_value=sum((world.value for world in worlds), 0),
    )


def sort_worlds(worlds: Iterable[World]) -> List[World]:
    """
    Newest first. Python's sort is stable with reverse=True, so worlds sharing
    a timestamp keep their input order.
    """
    return sorted(worlds, key=lambda world: world.created_at, reverse=True)


def world_link(world: World) -> str:
    """Relative link from the index to a world's own document."""
    return f"./{world.id}/index.html"


def compose_index_document(worlds: Sequence[World], site: Optional[SiteConfig] = None) -> str:
    """
    Build the master listing document.

    Args:
        worlds: Every world to list, in any order. The sequence is not modified.
        site: Branding and link settings; defaults to the built-in site.

    Returns:
        The complete HTML document as a string.
    """
    site = site or DEFAULT_SITE
    text = text_filter(site.escape_user_content)
    stats = index_statistics(worlds)
    logger.debug("Composing index for %d world(s)", stats.world_count)

    if worlds:
        cards = "\n".join(_render_card(world, text, site.date_format) for world in sort_worlds(worlds))
        listing = f"""    <main>
      <div class="worlds-grid">
{cards}
      </div>
    </main>"""
    else:
        listing = _EMPTY_STATE

    site_name = html.escape(site.site_name, quote=True)
    tagline = html.escape(site.tagline, quote=True)
    reference_url = html.escape(site.reference_url, quote=True)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{site_name} - World Index</title>
  <meta name="description" content="The single source engine that births, indexes, and links all live webpages. Every page originates here.">
  {_STYLE_BLOCK}
</head>
<body>
  <div class="container">
    <header>
      <div class="engine-badge">🌐 Source Engine</div>
      <h1>∞ {site_name}</h1>
      <p class="subtitle">{tagline}</p>
      <p class="mission">The single source of truth that births, indexes, and links all live webpages. Every page originates here.</p>
      <a href="{reference_url}" target="_blank" rel="noopener" class="reference-link">🚀 Live Reference System</a>
      <div class="stats">
        <div class="stat-item">
          <div class="stat-value" id="stat-worlds">{stats.world_count}</div>
          <div class="stat-label">Worlds Created</div>
        </div>
        <div class="stat-item">
          <div class="stat-value" id="stat-tools">{stats.tool_count}</div>
          <div class="stat-label">Total Tools</div>
        </div>
        <div class="stat-item">
          <div class="stat-value" id="stat-value">{format_grouped(stats.total_value)}</div>
          <div class="stat-label">Total Value (∞)</div>
        </div>
      </div>
    </header>

{listing}

    <footer>
      <p class="footer-title">Powered by {site_name} — The Source Engine</p>
      <p>The single source of truth that births, indexes, and links all live webpages</p>
      <p class="footer-small">Each world is a live, functional website with its own tools and pages</p>
      <p class="footer-small"><a href="{reference_url}" target="_blank" rel="noopener">🚀 Live Reference System</a></p>
    </footer>
  </div>
</body>
</html>"""


def _render_card(world: World, text: TextFilter, date_format: str) -> str:
    badge = ""
    if world.world_archetype:
        badge = f'\n          <span class="archetype-badge">{text(world.world_archetype)}</span>'
    created = html.escape(format_created_date(world.created_at, date_format), quote=True)
    return f"""        <a href="{html.escape(world_link(world), quote=True)}" class="world-card">
          <div class="world-header">
            <h3>{text(world.title)}</h3>{badge}
          </div>
          <p class="world-description">{text(world.description)}</p>
          <div class="world-meta">
            <span>💎 {format_grouped(world.value)} ∞</span>
            <span>🔧 {len(world.tools)} tools</span>
            <span>📄 {len(world.pages)} pages</span>
          </div>
          <div class="world-date">{created}</div>
        </a>"""


_EMPTY_STATE = """    <div class="empty-state">
      <h2>No Worlds Yet</h2>
      <p>Create your first world to see it here</p>
    </div>"""


_STYLE_BLOCK = """<style>
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; background: linear-gradient(135deg, #0f0f12, #1a1c2b); color: #f1f1f4; min-height: 100vh; padding: 3rem 2rem; }
a { color: inherit; }
.container { max-width: 1400px; margin: 0 auto; }
header { text-align: center; margin-bottom: 4rem; }
.engine-badge { display: inline-block; background: linear-gradient(135deg, #5b3fa3, #342e5c); color: #ffffff; padding: 0.5rem 1rem; border-radius: 8px; font-size: 0.75rem; font-weight: 600; text-transform: uppercase; letter-spacing: 0.1em; margin-bottom: 1rem; border: 1px solid rgba(224, 180, 76, 0.3); }
h1 { font-family: 'Space Grotesk', sans-serif; font-size: 4rem; font-weight: 700; background: linear-gradient(135deg, #e0b44c, #d66bc4); -webkit-background-clip: text; -webkit-text-fill-color: transparent; background-clip: text; margin-bottom: 1rem; }
.subtitle { font-size: 1.5rem; color: #b4b4bb; margin-bottom: 2rem; }
.mission { max-width: 600px; margin: 0 auto 1rem; color: #b4b4bb; font-size: 0.95rem; }
.reference-link { display: inline-block; margin-top: 1rem; padding: 0.75rem 1.5rem; background: rgba(26, 28, 43, 0.8); border: 1px solid rgba(224, 180, 76, 0.5); border-radius: 12px; color: #e0b44c; text-decoration: none; font-size: 0.875rem; font-weight: 500; transition: all 0.3s ease; }
.reference-link:hover { background: #342e5c; border-color: #e0b44c; transform: translateY(-2px); }
.stats { display: flex; justify-content: center; gap: 3rem; flex-wrap: wrap; margin-top: 2rem; }
.stat-item { text-align: center; }
.stat-value { font-size: 3rem; font-weight: 700; color: #e0b44c; }
.stat-label { font-size: 0.875rem; color: #9a9aa3; text-transform: uppercase; letter-spacing: 0.1em; margin-top: 0.5rem; }
.worlds-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(350px, 1fr)); gap: 2rem; margin-top: 3rem; }
.world-card { background: rgba(26, 28, 43, 0.6); border: 1px solid #2e3047; border-radius: 16px; padding: 2rem; text-decoration: none; color: inherit; transition: all 0.3s ease; display: flex; flex-direction: column; gap: 1rem; }
.world-card:hover { transform: translateY(-4px); border-color: #e0b44c; box-shadow: 0 0 30px rgba(224, 180, 76, 0.3); }
.world-header { display: flex; justify-content: space-between; align-items: start; gap: 1rem; }
.world-card h3 { font-family: 'Space Grotesk', sans-serif; font-size: 1.5rem; color: #c6b8f2; flex: 1; }
.archetype-badge { background: #5b3fa3; color: #ffffff; padding: 0.25rem 0.75rem; border-radius: 6px; font-size: 0.75rem; font-weight: 600; text-transform: uppercase; letter-spacing: 0.05em; white-space: nowrap; }
.world-description { color: #b4b4bb; line-height: 1.6; }
.world-meta { display: flex; gap: 1rem; flex-wrap: wrap; font-size: 0.875rem; color: #9a9aa3; }
.world-date { font-size: 0.75rem; color: #7e7e87; font-family: 'JetBrains Mono', monospace; }
.empty-state { text-align: center; padding: 4rem 2rem; color: #9a9aa3; }
.empty-state h2 { font-size: 2rem; margin-bottom: 1rem; color: #b4b4bb; }
footer { text-align: center; margin-top: 6rem; padding-top: 3rem; border-top: 1px solid #2e3047; color: #9a9aa3; }
.footer-title { font-weight: 600; margin-bottom: 0.5rem; }
.footer-small { margin-top: 0.5rem; font-size: 0.875rem; }
.footer-small a { color: #e0b44c; text-decoration: none; }
@media (max-width: 768px) { h1 { font-size: 2.5rem; } .subtitle { font-size: 1.125rem; } .stats { gap: 1.5rem; } .stat-value { font-size: 2rem; } .worlds-grid { grid-template-columns: 1fr; } }
</style>"""
