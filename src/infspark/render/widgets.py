"""
Widget template registry: one self-contained HTML fragment per tool.

Each known WidgetKind has a renderer and, where the widget is configurable, a
config model whose field defaults are used whenever the tool's config omits a
value (or supplies an empty one). Types missing from the registry render the
generic placeholder instead of failing.
"""

from __future__ import annotations

import html
import json
import logging
from typing import Any, Callable, Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from ..worlds import Tool, WidgetKind

logger = logging.getLogger(__name__)

TextFilter = Callable[[str], str]

DEFAULT_VIDEO_URL = "https://archive.org/download/BigBuckBunny_124/Content/big_buck_bunny_720p_surround.mp4"
DEFAULT_AUDIO_URL = "https://archive.org/download/testmp3testfile/mpthreetest.mp3"


class _WidgetConfig(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_empty(cls, data: Any) -> Any:
        # Blank values mean "use the default", same as a missing key.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value not in (None, "", [], {})}
        return data


class VideoPlayerConfig(_WidgetConfig):
    video_url: str = DEFAULT_VIDEO_URL


class AudioPlayerConfig(_WidgetConfig):
    audio_url: str = DEFAULT_AUDIO_URL


class ChartBar(_WidgetConfig):
    height: int = Field(ge=0, le=350)
    color: str = "#8B5CF6"


class ChartConfig(_WidgetConfig):
    bars: List[ChartBar] = Field(
        default_factory=lambda: [
            ChartBar(height=100, color="#8B5CF6"),
            ChartBar(height=150, color="#EC4899"),
            ChartBar(height=200, color="#10B981"),
        ]
    )


class GalleryConfig(_WidgetConfig):
    images: List[str] = Field(default_factory=list)
    placeholder_count: int = Field(default=4, ge=1)


class DashboardMetric(_WidgetConfig):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    value: str
    label: str


class DashboardConfig(_WidgetConfig):
    metrics: List[DashboardMetric] = Field(
        default_factory=lambda: [
            DashboardMetric(value="1,234", label="Total Views"),
            DashboardMetric(value="567", label="Unique Visitors"),
            DashboardMetric(value="89%", label="Engagement"),
        ]
    )


class TimelineEvent(_WidgetConfig):
    title: str
    text: str = ""


class TimelineConfig(_WidgetConfig):
    events: List[TimelineEvent] = Field(
        default_factory=lambda: [
            TimelineEvent(title="Event 1", text="First milestone in the journey"),
            TimelineEvent(title="Event 2", text="Second major achievement"),
            TimelineEvent(title="Event 3", text="Current status and future goals"),
        ]
    )


class ContentArticle(_WidgetConfig):
    title: str
    summary: str = ""
    link: str = "#"


class ContentHubConfig(_WidgetConfig):
    articles: List[ContentArticle] = Field(
        default_factory=lambda: [
            ContentArticle(
                title="Featured Article",
                summary="Explore the latest insights and discoveries in this comprehensive guide.",
            ),
            ContentArticle(
                title="Research Paper",
                summary="Detailed analysis of current trends and future predictions.",
            ),
        ]
    )


def _attr(value: str) -> str:
    return html.escape(value, quote=True)


def _js_literal(value: Any) -> str:
    """Encode value as a JS literal that cannot close its <script> block."""
    return json.dumps(value).replace("</", "<\\/")


def _heading(tool: Tool, text: TextFilter) -> str:
    return f"""<h3>{text(tool.title)}</h3>
        <p>{text(tool.description)}</p>"""


def _render_video_player(tool: Tool, text: TextFilter) -> str:
    config = VideoPlayerConfig.model_validate(tool.config)
    return f"""
      <div class="tool-video-player">
        {_heading(tool, text)}
        <div class="video-container">
          <video controls style="width: 100%; max-width: 800px; border-radius: 12px;">
            <source src="{_attr(config.video_url)}" type="video/mp4">
            Your browser does not support the video tag.
          </video>
        </div>
      </div>
    """


def _render_audio_player(tool: Tool, text: TextFilter) -> str:
    config = AudioPlayerConfig.model_validate(tool.config)
    return f"""
      <div class="tool-audio-player">
        {_heading(tool, text)}
        <audio controls style="width: 100%; max-width: 600px;">
          <source src="{_attr(config.audio_url)}" type="audio/mpeg">
          Your browser does not support the audio element.
        </audio>
      </div>
    """


def _render_chart(tool: Tool, text: TextFilter) -> str:
    config = ChartConfig.model_validate(tool.config)
    canvas_id = f"chart-{tool.id}"
    bars = [{"height": bar.height, "color": bar.color} for bar in config.bars]
    return f"""
      <div class="tool-chart">
        {_heading(tool, text)}
        <canvas id="{_attr(canvas_id)}" width="600" height="400"></canvas>
        <script>
          (function () {{
            var canvas = document.getElementById({_js_literal(canvas_id)});
            if (!canvas) return;
            var ctx = canvas.getContext('2d');
            var bars = {_js_literal(bars)};
            bars.forEach(function (bar, i) {{
              ctx.fillStyle = bar.color;
              ctx.fillRect(50 + i * 150, 350 - bar.height, 100, bar.height);
            }});
          }})();
        </script>
      </div>
    """


def _render_gallery(tool: Tool, text: TextFilter) -> str:
    config = GalleryConfig.model_validate(tool.config)
    if config.images:
        items = [
            f'<div class="gallery-item"><img src="{_attr(url)}" alt="Image {index}" loading="lazy"></div>'
            for index, url in enumerate(config.images, start=1)
        ]
    else:
        items = [
            f'<div class="gallery-item">🖼️ Image {index}</div>'
            for index in range(1, config.placeholder_count + 1)
        ]
    joined = "\n          ".join(items)
    return f"""
      <div class="tool-gallery">
        {_heading(tool, text)}
        <div class="gallery-grid">
          {joined}
        </div>
      </div>
    """


def _render_dashboard(tool: Tool, text: TextFilter) -> str:
    config = DashboardConfig.model_validate(tool.config)
    cards = "\n".join(
        f"""          <div class="metric-card">
            <div class="metric-value">{text(metric.value)}</div>
            <div class="metric-label">{text(metric.label)}</div>
          </div>"""
        for metric in config.metrics
    )
    return f"""
      <div class="tool-dashboard">
        {_heading(tool, text)}
        <div class="dashboard-grid">
{cards}
        </div>
      </div>
    """


def _render_timeline(tool: Tool, text: TextFilter) -> str:
    config = TimelineConfig.model_validate(tool.config)
    items = "\n".join(
        f"""          <div class="timeline-item">
            <div class="timeline-marker"></div>
            <div class="timeline-content">
              <h4>{text(event.title)}</h4>
              <p>{text(event.text)}</p>
            </div>
          </div>"""
        for event in config.events
    )
    return f"""
      <div class="tool-timeline">
        {_heading(tool, text)}
        <div class="timeline-container">
{items}
        </div>
      </div>
    """


_CALCULATOR_KEYS = [
    ("7", "7"), ("8", "8"), ("9", "9"), ("/", "÷"),
    ("4", "4"), ("5", "5"), ("6", "6"), ("*", "×"),
    ("1", "1"), ("2", "2"), ("3", "3"), ("-", "−"),
    ("C", "C"), ("0", "0"), ("=", "="), ("+", "+"),
]


def _render_calculator(tool: Tool, text: TextFilter) -> str:
    root_id = f"calc-{tool.id}"
    display_id = f"calc-display-{tool.id}"
    buttons = "\n".join(
        f'            <button type="button" data-key="{_attr(key)}">{label}</button>'
        for key, label in _CALCULATOR_KEYS
    )
    # Handlers are bound inside an IIFE so several calculators share no globals.
    return f"""
      <div class="tool-calculator">
        {_heading(tool, text)}
        <div class="calculator" id="{_attr(root_id)}">
          <input type="text" id="{_attr(display_id)}" readonly value="0" style="width: 100%; padding: 20px; font-size: 24px; text-align: right; border-radius: 8px; margin-bottom: 10px;">
          <div class="calc-buttons">
{buttons}
          </div>
        </div>
        <script>
          (function () {{
            var root = document.getElementById({_js_literal(root_id)});
            var display = document.getElementById({_js_literal(display_id)});
            if (!root || !display) return;
            root.querySelectorAll('button[data-key]').forEach(function (button) {{
              button.addEventListener('click', function () {{
                var key = button.getAttribute('data-key');
                if (key === 'C') {{
                  display.value = '0';
                }} else if (key === '=') {{
                  try {{
                    if (!/^[0-9+\\-*/. ]+$/.test(display.value)) throw new Error('invalid');
                    display.value = String(Function('return (' + display.value + ')')());
                  }} catch (e) {{
                    display.value = 'Error';
                  }}
                }} else if (display.value === '0' || display.value === 'Error') {{
                  display.value = key;
                }} else {{
                  display.value += key;
                }}
              }});
            }});
          }})();
        </script>
      </div>
    """


def _render_content_hub(tool: Tool, text: TextFilter) -> str:
    config = ContentHubConfig.model_validate(tool.config)
    articles = "\n".join(
        f"""          <article class="content-item">
            <h4>{text(article.title)}</h4>
            <p>{text(article.summary)}</p>
            <a href="{_attr(article.link)}" class="read-more">Read More →</a>
          </article>"""
        for article in config.articles
    )
    return f"""
      <div class="tool-content-hub">
        {_heading(tool, text)}
        <div class="content-list">
{articles}
        </div>
      </div>
    """


def _render_generic(tool: Tool, text: TextFilter) -> str:
    return f"""
      <div class="tool-generic">
        {_heading(tool, text)}
        <div class="tool-placeholder">
          <span class="tool-icon">🔧</span>
          <p>Tool: {text(tool.type)}</p>
        </div>
      </div>
    """


_RENDERERS: Dict[WidgetKind, Callable[[Tool, TextFilter], str]] = {
    WidgetKind.VIDEO_PLAYER: _render_video_player,
    WidgetKind.CHART: _render_chart,
    WidgetKind.GALLERY: _render_gallery,
    WidgetKind.DASHBOARD: _render_dashboard,
    WidgetKind.TIMELINE: _render_timeline,
    WidgetKind.AUDIO_PLAYER: _render_audio_player,
    WidgetKind.CALCULATOR: _render_calculator,
    WidgetKind.CONTENT_HUB: _render_content_hub,
}


def text_filter(escape: bool) -> TextFilter:
    """Return the function applied to user-authored text under the given policy."""
    if escape:
        return lambda value: html.escape(value or "", quote=True)
    return lambda value: value or ""


def registered_kinds() -> List[WidgetKind]:
    return list(_RENDERERS)


def render_tool(tool: Tool, *, escape: bool = False) -> str:
    """
    Render one tool to an embeddable HTML fragment.

    Args:
        tool: The tool to render.
        escape: HTML-escape user text (title, description, config labels).

    Raises:
        pydantic.ValidationError: If the tool's config holds a value of the wrong type.
    """
    text = text_filter(escape)
    kind = tool.kind
    if kind is None:
        logger.debug("Tool '%s' has unregistered type '%s'; using placeholder", tool.id, tool.type)
        return _render_generic(tool, text)
    return _RENDERERS[kind](tool, text)


def render_tools(tools: Iterable[Tool], *, escape: bool = False) -> str:
    """Render tools in order, newline-separated."""
    return "\n".join(render_tool(tool, escape=escape) for tool in tools)
