"""dropgrid: hit testing and row packing for drag-and-drop row layouts."""

from ._version import __version__
from .core.actions import (
    Action,
    Add,
    AddGroup,
    NoAction,
    Remove,
    RemoveGroup,
    RemoveRow,
    action_from_dict,
    target_location,
)
from .core.area import Area, build_row_areas
from .core.config import DragConfig, HotspotConfig, HoverConfig, PackingConfig, resolve_config
from .core.geometry import Position
from .core.items import Item, Location
from .hotspot import (
    DragResult,
    HoverMeta,
    check_hotspots,
    generate_drag_hotspot,
    generate_hotspots,
    generate_hover_hotspot,
)
from .rows import RowPacker, pack_items, rebuild_region

__all__ = [
    "__version__",
    "Action",
    "Add",
    "AddGroup",
    "NoAction",
    "Remove",
    "RemoveGroup",
    "RemoveRow",
    "action_from_dict",
    "target_location",
    "Area",
    "build_row_areas",
    "DragConfig",
    "HotspotConfig",
    "HoverConfig",
    "PackingConfig",
    "resolve_config",
    "Position",
    "Item",
    "Location",
    "DragResult",
    "HoverMeta",
    "check_hotspots",
    "generate_drag_hotspot",
    "generate_hotspots",
    "generate_hover_hotspot",
    "RowPacker",
    "pack_items",
    "rebuild_region",
]
