"""Core functionality for ogrlayer."""

from ogrlayer.core.errors import check_ogr_call
from ogrlayer.core.exceptions import (
    FieldError,
    GeometryError,
    HandleError,
    OgrError,
    OgrLayerError,
    ogr_error_name,
)
from ogrlayer.core.geometry import to_ogr_geometry, to_shapely

__all__ = [
    "check_ogr_call",
    "ogr_error_name",
    "OgrLayerError",
    "OgrError",
    "HandleError",
    "FieldError",
    "GeometryError",
    "to_ogr_geometry",
    "to_shapely",
]
