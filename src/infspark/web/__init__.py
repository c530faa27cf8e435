"""
Web output helpers (site layout on disk, publishing guidance).
"""

from .guide import GuideStep, build_deployment_guide, format_guide
from .scaffold import SiteReport, generate_site_structure, resolve_output_root

__all__ = [
    "GuideStep",
    "build_deployment_guide",
    "format_guide",
    "SiteReport",
    "generate_site_structure",
    "resolve_output_root",
]
