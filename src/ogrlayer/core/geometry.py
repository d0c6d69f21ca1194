"""Conversion of geometries between shapely, WKT and OGR."""

from __future__ import annotations

from typing import Union

from osgeo import ogr
from shapely import wkb
from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from ogrlayer.core.exceptions import GeometryError

GeometryLike = Union[BaseGeometry, ogr.Geometry, str]


def to_ogr_geometry(geometry: GeometryLike) -> ogr.Geometry:
    """
    Build a new OGR geometry owned by the caller.

    OGR geometries passed in are cloned, so handing the result to
    ``SetGeometryDirectly`` never steals the caller's object.

    Args:
        geometry: A Shapely geometry, an OGR geometry or a WKT string

    Returns:
        A fresh ogr.Geometry

    Raises:
        GeometryError: If the geometry is missing or cannot be converted
    """
    if geometry is None:
        raise GeometryError("A geometry is required")

    if isinstance(geometry, ogr.Geometry):
        return geometry.Clone()

    try:
        if isinstance(geometry, BaseGeometry):
            ogr_geom = ogr.CreateGeometryFromWkb(wkb.dumps(geometry))
        elif isinstance(geometry, str):
            ogr_geom = ogr.CreateGeometryFromWkt(geometry)
        else:
            raise GeometryError(f"Unsupported geometry type: {type(geometry).__name__}")
    except RuntimeError as e:
        raise GeometryError(f"Failed to convert geometry to OGR: {e}") from e

    if ogr_geom is None:
        raise GeometryError("Failed to convert geometry to OGR")
    return ogr_geom


def to_shapely(ogr_geom: ogr.Geometry | None) -> BaseGeometry | None:
    """Convert an OGR geometry to Shapely, passing None through."""
    if ogr_geom is None:
        return None
    try:
        return wkb.loads(bytes(ogr_geom.ExportToIsoWkb()))
    except GEOSException:
        # curve types, GEOS only reads their linear approximation
        return wkb.loads(bytes(ogr_geom.GetLinearGeometry().ExportToIsoWkb()))
