"""Row packing and region rebuilding."""

from .packer import RowPacker, pack_items
from .rebuild import overfull_rows, rebuild_region, region_size_report, remove_row

__all__ = [
    "RowPacker",
    "pack_items",
    "rebuild_region",
    "remove_row",
    "region_size_report",
    "overfull_rows",
]
