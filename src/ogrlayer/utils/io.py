"""Input/output utilities."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from shapely.geometry import mapping

from ogrlayer.vector.feature import Feature


def to_feature(feature: Feature, props: dict[str, Any] | None = None) -> dict:
    """
    Convert a layer Feature to a GeoJSON feature dict.

    Args:
        feature: Feature read from a layer
        props: Properties to use instead of the feature's own field values

    Returns:
        GeoJSON feature with the OGR FID as ``id``
    """
    geom = feature.geometry()
    geometry = None
    if geom is not None:
        geometry = mapping(geom)
        # Ensure coordinates are lists, not tuples (GeoJSON spec requirement)
        coordinates = geometry.get("coordinates")
        if isinstance(coordinates, tuple):
            geometry["coordinates"] = list(coordinates)
    properties = feature.properties() if props is None else props
    return {"type": "Feature", "id": feature.fid, "properties": properties, "geometry": geometry}


def save_geojson(path: str | Path, features: list[dict]) -> Path:
    """Save GeoJSON feature dicts to a FeatureCollection file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump({"type": "FeatureCollection", "features": features}, f)
    return path


def layer_to_geojson(layer, path: str | Path) -> Path:
    """Write the features of a Layer matching its current filters to GeoJSON."""
    return save_geojson(path, [to_feature(feature) for feature in layer.features()])
