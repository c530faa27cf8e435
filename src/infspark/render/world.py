"""
Standalone HTML document for a single world.
"""

from __future__ import annotations

import html
import logging
from typing import List, Optional

from ..config import DEFAULT_SITE, SiteConfig
from ..util import format_created_date, format_grouped, shorten_owner
from ..worlds import Page, World
from .widgets import TextFilter, render_tools, text_filter

logger = logging.getLogger(__name__)


def compose_world_document(world: World, site: Optional[SiteConfig] = None) -> str:
    """
    Build the full document for one world.

    The header carries the world's metadata, the main body holds its content
    followed by its tools and pages, and the footer links back to the index.
    Empty tool/page sections are left out entirely.

    Args:
        world: The world to publish.
        site: Branding and link settings; defaults to the built-in site.

    Returns:
        The complete HTML document as a string.
    """
    site = site or DEFAULT_SITE
    escape = site.escape_user_content
    text = text_filter(escape)

    tools_html = render_tools(world.tools, escape=escape)
    pages_html = "\n".join(_render_page(page, text, escape) for page in world.pages)
    logger.debug(
        "Composing world '%s' with %d tool(s) and %d page(s)",
        world.id,
        len(world.tools),
        len(world.pages),
    )

    main_parts = [
        f"""    <section class="content-section">
      {text(world.content)}
    </section>"""
    ]
    if tools_html:
        main_parts.append(
            f"""    <section class="tools-section">
      <h2>Interactive Tools</h2>
      {tools_html}
    </section>"""
        )
    if pages_html:
        main_parts.append(
            f"""    <section class="pages-section">
      <h2>Pages</h2>
      {pages_html}
    </section>"""
        )

    site_name = html.escape(site.site_name, quote=True)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{text(world.title)} - {site_name}</title>
  <meta name="description" content="{html.escape(world.description or "", quote=True)}">
  {_STYLE_BLOCK}
</head>
<body>
{_render_header(world, text)}

  <main>
{chr(10).join(main_parts)}
  </main>

{_render_footer(world, site)}
</body>
</html>"""


def _render_page(page: Page, text: TextFilter, escape: bool) -> str:
    page_tools = render_tools(page.tools, escape=escape)
    return f"""
    <section class="page-section">
      <h2>{text(page.title)}</h2>
      <div class="page-content">{text(page.content)}</div>
      {page_tools}
    </section>
  """


def _meta_item(icon: str, label: str) -> str:
    return f"""      <div class="meta-item">
        <span>{icon}</span>
        <span>{label}</span>
      </div>"""


def _render_header(world: World, text: TextFilter) -> str:
    items: List[str] = [
        _meta_item("🌐", text(world.url)),
        _meta_item("👤", f"Owner: {text(shorten_owner(world.owner_wallet))}"),
        _meta_item("💎", f"Value: {format_grouped(world.value)} ∞"),
        _meta_item("🔧", f"{len(world.tools)} Tools"),
    ]
    if world.world_archetype:
        items.append(_meta_item("🌍", text(world.world_archetype)))
    return f"""  <header>
    <h1>{text(world.title)}</h1>
    <p class="description">{text(world.description)}</p>
    <div class="site-meta">
{chr(10).join(items)}
    </div>
  </header>"""


def _render_footer(world: World, site: SiteConfig) -> str:
    site_name = html.escape(site.site_name, quote=True)
    tagline = html.escape(site.tagline, quote=True)
    created = html.escape(format_created_date(world.created_at, site.date_format), quote=True)
    token = html.escape(world.display_token, quote=True)
    return f"""  <footer>
    <div class="infinity-logo">∞ {site_name}</div>
    <p>Created with {site_name} - {tagline}</p>
    <p class="footer-meta">Token ID: {token} • Created: {created}</p>
    <p class="footer-links">
      <a href="{html.escape(site.index_url, quote=True)}">🌐 View All Worlds</a>
      •
      <a href="{html.escape(site.reference_url, quote=True)}">🚀 Live Reference System</a>
    </p>
  </footer>"""


_STYLE_BLOCK = """<style>
* { margin: 0; padding: 0; box-sizing: border-box; }
body { font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; background: linear-gradient(135deg, #0f0f12, #1a1c2b); color: #f1f1f4; line-height: 1.6; min-height: 100vh; }
header { background: rgba(26, 28, 43, 0.8); backdrop-filter: blur(10px); padding: 2rem; border-bottom: 1px solid #2e3047; position: sticky; top: 0; z-index: 100; }
h1 { font-family: 'Space Grotesk', sans-serif; font-size: 2.5rem; font-weight: 700; margin-bottom: 0.5rem; background: linear-gradient(135deg, #e0b44c, #d66bc4); -webkit-background-clip: text; -webkit-text-fill-color: transparent; background-clip: text; }
h2 { font-family: 'Space Grotesk', sans-serif; font-size: 2rem; margin-bottom: 1rem; color: #e0b44c; }
h3 { font-family: 'Space Grotesk', sans-serif; font-size: 1.5rem; margin-bottom: 0.75rem; color: #c6b8f2; }
h4 { font-size: 1.25rem; margin-bottom: 0.5rem; color: #dcd8ee; }
.site-meta { display: flex; gap: 1.5rem; margin-top: 1rem; flex-wrap: wrap; }
.meta-item { display: flex; align-items: center; gap: 0.5rem; background: rgba(52, 46, 92, 0.5); padding: 0.5rem 1rem; border-radius: 8px; font-size: 0.875rem; }
.description { margin-top: 1rem; font-size: 1.125rem; color: #d4d4d8; }
main { max-width: 1200px; margin: 0 auto; padding: 3rem 2rem; }
.content-section { background: rgba(26, 28, 43, 0.6); border: 1px solid #2e3047; border-radius: 16px; padding: 2rem; margin-bottom: 2rem; white-space: pre-wrap; }
.tools-section { display: grid; gap: 2rem; margin-bottom: 3rem; }
.tool-video-player, .tool-chart, .tool-gallery, .tool-dashboard, .tool-timeline, .tool-audio-player, .tool-calculator, .tool-content-hub, .tool-generic { background: rgba(26, 28, 43, 0.6); border: 1px solid #2e3047; border-radius: 16px; padding: 2rem; }
.video-container { margin-top: 1.5rem; }
.gallery-grid, .dashboard-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 1rem; margin-top: 1.5rem; }
.gallery-item { aspect-ratio: 1; background: #342e5c; border-radius: 12px; display: flex; align-items: center; justify-content: center; font-size: 3rem; overflow: hidden; }
.gallery-item img { width: 100%; height: 100%; object-fit: cover; }
.metric-card { background: #342e5c; padding: 2rem; border-radius: 12px; text-align: center; }
.metric-value { font-size: 2.5rem; font-weight: 700; color: #e0b44c; margin-bottom: 0.5rem; }
.metric-label { font-size: 0.875rem; color: #9a9aa3; text-transform: uppercase; letter-spacing: 0.05em; }
.timeline-container { margin-top: 1.5rem; }
.timeline-item { display: flex; gap: 1.5rem; margin-bottom: 2rem; position: relative; }
.timeline-item::after { content: ''; position: absolute; left: 10px; top: 40px; bottom: -20px; width: 2px; background: #5b3fa3; }
.timeline-item:last-child::after { display: none; }
.timeline-marker { width: 24px; height: 24px; border-radius: 50%; background: #e0b44c; flex-shrink: 0; margin-top: 4px; z-index: 1; }
.timeline-content { flex: 1; }
.calc-buttons { display: grid; grid-template-columns: repeat(4, 1fr); gap: 10px; }
.calc-buttons button { padding: 20px; font-size: 20px; border: none; background: #5b3fa3; color: #ffffff; border-radius: 8px; cursor: pointer; transition: all 0.2s; }
.calc-buttons button:hover { background: #6f52bd; transform: translateY(-2px); }
.content-list { display: flex; flex-direction: column; gap: 1.5rem; margin-top: 1.5rem; }
.content-item { background: #342e5c; padding: 1.5rem; border-radius: 12px; }
.read-more { display: inline-block; margin-top: 0.75rem; color: #e0b44c; text-decoration: none; font-weight: 600; }
.read-more:hover { text-decoration: underline; }
.tool-placeholder { display: flex; flex-direction: column; align-items: center; justify-content: center; padding: 3rem; background: rgba(52, 46, 92, 0.3); border-radius: 12px; margin-top: 1rem; }
.tool-icon { font-size: 4rem; margin-bottom: 1rem; }
.page-section { margin-bottom: 3rem; }
.page-content { background: rgba(26, 28, 43, 0.4); padding: 2rem; border-radius: 12px; margin-bottom: 2rem; white-space: pre-wrap; }
footer { background: rgba(26, 28, 43, 0.8); padding: 2rem; text-align: center; border-top: 1px solid #2e3047; margin-top: 4rem; }
.infinity-logo { font-size: 1.5rem; color: #e0b44c; margin-bottom: 0.5rem; }
.footer-meta { margin-top: 0.5rem; font-size: 0.875rem; color: #9a9aa3; }
.footer-links { margin-top: 1rem; font-size: 0.75rem; }
.footer-links a { color: #e0b44c; text-decoration: none; }
@media (max-width: 768px) { h1 { font-size: 2rem; } .site-meta { flex-direction: column; gap: 0.75rem; } main { padding: 2rem 1rem; } .dashboard-grid, .gallery-grid { grid-template-columns: 1fr; } .calc-buttons button { padding: 15px; font-size: 18px; } }
</style>"""
