"""Turn map drawings into an AreaSelection."""
from __future__ import annotations
from typing import Any, Dict, List, Optional

from domain.models import AreaSelection, Coordinate


def _ring_from_geometry(geometry: Dict[str, Any]) -> List[List[float]]:
    kind = geometry.get('type')
    coords = geometry.get('coordinates') or []
    if kind == 'Polygon':
        return coords[0] if coords else []
    if kind == 'MultiPolygon':
        return coords[0][0] if coords and coords[0] else []
    if kind == 'LineString':
        return coords
    if kind == 'Point':
        return [coords] if coords else []
    return []


def area_from_geojson(feature: Optional[Dict[str, Any]]) -> AreaSelection:
    """Read a drawn GeoJSON feature (or bare geometry) into ordered lat/lon pairs.

    GeoJSON stores [lon, lat]; the closing vertex that repeats the first is dropped.
    """
    if not feature:
        return AreaSelection()
    geometry = feature.get('geometry', feature)
    ring = _ring_from_geometry(geometry)
    points = [Coordinate(latitude=float(p[1]), longitude=float(p[0])) for p in ring if len(p) >= 2]
    if len(points) > 1 and points[0] == points[-1]:
        points = points[:-1]
    return AreaSelection(points)


def area_from_map_state(map_state: Optional[Dict[str, Any]]) -> AreaSelection:
    """Pick the user's most recent drawing from st_folium's return value."""
    if not map_state:
        return AreaSelection()
    last = map_state.get('last_active_drawing')
    if last:
        return area_from_geojson(last)
    drawings = map_state.get('all_drawings') or []
    if drawings:
        return area_from_geojson(drawings[-1])
    return AreaSelection()
