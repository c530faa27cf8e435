"""
Step-by-step publishing instructions for a packaged world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..config import DEFAULT_SITE, SiteConfig
from ..worlds import World


@dataclass(frozen=True)
class GuideStep:
    title: str
    lines: List[str] = field(default_factory=list)


def build_deployment_guide(world: World, site: Optional[SiteConfig] = None) -> List[GuideStep]:
    """
    Describe how to publish a world and the refreshed index by hand.

    Nothing is pushed anywhere: the steps are guidance for the person holding
    the generated files.
    """
    site = site or DEFAULT_SITE
    repo = site.repo_name
    download_name = f"{world.id}-index.html"
    return [
        GuideStep(
            "Download Files",
            [
                f"Save the master index as index.html and this world's page as {download_name}.",
            ],
        ),
        GuideStep(
            "Create/Clone GitHub Repository",
            [f"Repository name: {repo}"],
        ),
        GuideStep(
            "Organize Files in Repository",
            [
                f"{repo}/",
                "├── index.html                (master index - lists all worlds)",
                f"└── {world.id}/",
                f"    └── index.html            (this world - {world.title})",
                f"Rename {download_name} to index.html when placing it in the folder.",
            ],
        ),
        GuideStep(
            "Push to GitHub",
            [
                "git add .",
                f'git commit -m "Deploy {world.title}"',
                "git push origin main",
            ],
        ),
        GuideStep(
            "Enable GitHub Pages",
            [
                "Go to repository Settings → Pages",
                'Set source to "Deploy from a branch"',
                "Select branch: main",
                "Select folder: / (root)",
                "Click Save; pages are usually live within 1-2 minutes.",
            ],
        ),
        GuideStep(
            "Access Your Live Sites",
            [
                f"Master Index (all worlds): {site.index_url}",
                f"This World ({world.title}): {site.world_url(world.id)}",
            ],
        ),
    ]


def format_guide(steps: List[GuideStep]) -> str:
    """Render guide steps as numbered plain text."""
    blocks = []
    for number, step in enumerate(steps, start=1):
        body = "\n".join(f"   {line}" for line in step.lines)
        blocks.append(f"{number}. {step.title}\n{body}" if body else f"{number}. {step.title}")
    return "\n\n".join(blocks)
