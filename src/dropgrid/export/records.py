"""Convert regions to and from host-friendly records and tables."""

from __future__ import annotations

import json
from collections.abc import Sequence

import pandas as pd

from ..core.items import Item, Region, Row

FRAME_COLUMNS = ["identifier", "size", "row", "position"]


def region_to_records(region: Sequence[Row]) -> list[list[dict]]:
    """Nested list of item dicts, payload keys merged in."""
    return [[item.to_dict() for item in row] for row in region]


def region_from_records(records: Sequence[Sequence[dict]]) -> Region:
    return [[Item.from_dict(d) for d in row] for row in records]


def serialize_region(region: Sequence[Row]) -> str:
    """Serialize a region as a JSON string."""
    return json.dumps(region_to_records(region))


def region_to_frame(region: Sequence[Row]) -> pd.DataFrame:
    """One table row per item, in region order.

    Payload keys become extra columns after the fixed ones.
    """
    rows = [item.to_dict() for row in region for item in row]
    df = pd.DataFrame(rows)
    if df.empty:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    extra = [c for c in df.columns if c not in FRAME_COLUMNS]
    return df[FRAME_COLUMNS + extra].reset_index(drop=True)


def region_from_frame(df: pd.DataFrame) -> Region:
    """Rebuild a region from a table with ``row`` and ``position`` columns.

    Items are grouped by ``row`` and ordered by ``position``. Row numbers
    need not be contiguous; only their order is used.
    """
    missing = [c for c in FRAME_COLUMNS if c not in df.columns]
    if missing:
        raise KeyError(
            f"Frame is missing required columns: {missing}. "
            f"Available: {list(df.columns)}"
        )
    if df.empty:
        return []
    ordered = df.sort_values(["row", "position"], kind="stable")
    region: Region = []
    for _, group in ordered.groupby("row", sort=True):
        row = []
        for record in group.to_dict(orient="records"):
            # Drop NaN payload cells introduced by ragged payloads
            clean = {
                k: v for k, v in record.items()
                if k in FRAME_COLUMNS or not (isinstance(v, float) and pd.isna(v))
            }
            clean["row"] = int(clean["row"])
            clean["position"] = int(clean["position"])
            row.append(Item.from_dict(clean))
        region.append(row)
    return region
