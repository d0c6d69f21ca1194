"""ogrlayer: safe access to OGR vector layers, field schemas and features."""

__version__ = "0.1.0"

from .config import LayerConfig
from .core.exceptions import FieldError, GeometryError, HandleError, OgrError, OgrLayerError
from .vector import (
    Feature,
    FieldDefn,
    FieldType,
    IntegerValue,
    Layer,
    RealValue,
    StringValue,
)

__all__ = [
    "__version__",
    "LayerConfig",
    "Layer",
    "Feature",
    "FieldDefn",
    "FieldType",
    "StringValue",
    "IntegerValue",
    "RealValue",
    "OgrLayerError",
    "OgrError",
    "HandleError",
    "FieldError",
    "GeometryError",
]
