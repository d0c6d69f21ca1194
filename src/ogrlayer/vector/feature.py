"""Features read back from a layer."""

from __future__ import annotations

from typing import Any

from osgeo import ogr
from shapely.geometry.base import BaseGeometry

from ogrlayer.core.exceptions import FieldError
from ogrlayer.core.geometry import to_shapely
from ogrlayer.vector.defn import Defn
from ogrlayer.vector.values import FieldValue, IntegerValue, RealValue, StringValue

_INTEGER_TYPES = (ogr.OFTInteger, ogr.OFTInteger64)


class Feature:
    """
    A single record: a geometry plus named attribute values.

    Owns its ``ogr.Feature`` and borrows the schema of the layer it came from.
    """

    def __init__(self, defn: Defn, c_feature: ogr.Feature):
        self._defn = defn
        self._c_feature = c_feature

    @property
    def defn(self) -> Defn:
        return self._defn

    @property
    def ogr_feature(self) -> ogr.Feature:
        return self._c_feature

    @property
    def fid(self) -> int:
        return self._c_feature.GetFID()

    def geometry(self) -> BaseGeometry | None:
        """Geometry of the feature as Shapely, or None if unset."""
        return to_shapely(self._c_feature.GetGeometryRef())

    def field(self, name: str) -> FieldValue | None:
        """
        Read a field value as a FieldValue variant.

        Returns:
            StringValue, IntegerValue or RealValue; None for unset or null
            fields

        Raises:
            FieldError: If the schema has no such field
        """
        idx = self._c_feature.GetFieldIndex(name)
        if idx < 0:
            raise FieldError(f"Field ({name}) does not exist")
        if not self._c_feature.IsFieldSetAndNotNull(idx):
            return None

        field_type = self._c_feature.GetFieldType(idx)
        if field_type in _INTEGER_TYPES:
            return IntegerValue(self._c_feature.GetFieldAsInteger64(idx))
        if field_type == ogr.OFTReal:
            return RealValue(self._c_feature.GetFieldAsDouble(idx))
        return StringValue(self._c_feature.GetFieldAsString(idx))

    def fields(self) -> dict[str, FieldValue | None]:
        """All field values, in schema order."""
        return {name: self.field(name) for name in self._defn.field_names()}

    def properties(self) -> dict[str, Any]:
        """All field values as plain Python values."""
        return {
            name: (value.value if value is not None else None)
            for name, value in self.fields().items()
        }

    def __repr__(self) -> str:
        return f"<Feature fid={self.fid}>"
