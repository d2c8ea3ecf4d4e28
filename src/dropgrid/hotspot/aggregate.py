"""Run collections of hotspots against a single pointer position."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Callable

from ..core.area import Area
from ..core.config import HotspotConfig
from .drag import generate_drag_hotspot
from .hover import generate_hover_hotspot

Hotspot = Callable[[float, float, Any], Any]

_FACTORIES = {
    "drag": generate_drag_hotspot,
    "hover": generate_hover_hotspot,
}


def _is_match(result: Any) -> bool:
    # Hover misses are False, drag misses are None. Identifiers such as 0
    # or "" are still matches.
    return result is not None and result is not False


def check_hotspots(
    x: float,
    y: float,
    hotspots: Iterable[Hotspot],
    meta: Any = None,
) -> Any:
    """Return the result of the last hotspot that matches, or None.

    Hotspots listed later override earlier ones, so nested areas should be
    listed after the areas that contain them.
    """
    result = None
    for hotspot in hotspots:
        check = hotspot(x, y, meta)
        if _is_match(check):
            result = check
    return result


def generate_hotspots(
    types: Sequence[str] = (),
    areas: Sequence[Area] = (),
    config: HotspotConfig | dict | None = None,
) -> dict[str, list[Hotspot]]:
    """Build hotspot testers for each requested type.

    Parameters
    ----------
    types : names of hotspot types, e.g. ``["drag", "hover"]``. Unknown
        names are skipped.
    areas : one tester is built per area, in order.
    config : HotspotConfig, or ``{type: {option: value}}`` overrides.

    Returns
    -------
    dict[str, list]
        ``{type: [hotspot, ...]}`` for every known requested type.
    """
    hotspots: dict[str, list[Hotspot]] = {}
    for hotspot_type in types:
        factory = _FACTORIES.get(hotspot_type)
        if factory is None:
            continue
        if isinstance(config, HotspotConfig):
            type_config = getattr(config, hotspot_type)
        else:
            type_config = (config or {}).get(hotspot_type)
        hotspots[hotspot_type] = [factory(area, type_config) for area in areas]
    return hotspots
