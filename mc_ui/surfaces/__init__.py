"""Render surfaces consuming resolved run trees."""

from mc_ui.surfaces.headless import HeadlessSurface, RecordedClick
from mc_ui.surfaces.rich_surface import LiveRunTree, RichSurface, run_style

__all__ = ["HeadlessSurface", "LiveRunTree", "RecordedClick", "RichSurface", "run_style"]
