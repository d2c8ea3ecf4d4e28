"""Hit testing for drag targets and hovered children."""

from .aggregate import check_hotspots, generate_hotspots
from .drag import DragHotspot, DragResult, generate_drag_hotspot
from .hover import HoverHotspot, HoverMeta, generate_hover_hotspot

__all__ = [
    "check_hotspots",
    "generate_hotspots",
    "DragHotspot",
    "DragResult",
    "generate_drag_hotspot",
    "HoverHotspot",
    "HoverMeta",
    "generate_hover_hotspot",
]
