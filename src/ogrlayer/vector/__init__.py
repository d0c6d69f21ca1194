"""Vector layer access."""

from ogrlayer.vector.defn import Defn, FieldInfo
from ogrlayer.vector.feature import Feature
from ogrlayer.vector.field import FieldDefn, FieldType
from ogrlayer.vector.layer import FeatureIterator, Layer
from ogrlayer.vector.metadata import Metadata
from ogrlayer.vector.values import (
    FieldValue,
    IntegerValue,
    RealValue,
    StringValue,
    as_field_value,
)

__all__ = [
    "Defn",
    "FieldInfo",
    "Feature",
    "FeatureIterator",
    "FieldDefn",
    "FieldType",
    "FieldValue",
    "IntegerValue",
    "Layer",
    "Metadata",
    "RealValue",
    "StringValue",
    "as_field_value",
]
