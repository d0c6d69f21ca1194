"""Read-only view of a layer schema."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from osgeo import ogr

from ogrlayer.core.exceptions import FieldError
from ogrlayer.vector.field import FieldType


@dataclass(frozen=True)
class FieldInfo:
    """Snapshot of a single field definition."""

    name: str
    field_type: FieldType
    width: int = 0
    precision: int = 0


class Defn:
    """
    Schema (ordered field definitions) of the features in a layer.

    Wraps the layer's ``ogr.FeatureDefn`` without owning it. The schema is read
    live, so fields created on the layer later show up here too.
    """

    def __init__(self, c_defn: ogr.FeatureDefn):
        self._c_defn = c_defn

    @property
    def ogr_defn(self) -> ogr.FeatureDefn:
        return self._c_defn

    @property
    def name(self) -> str:
        return self._c_defn.GetName()

    @property
    def geometry_type(self) -> int:
        return self._c_defn.GetGeomType()

    def field_count(self) -> int:
        return self._c_defn.GetFieldCount()

    def field_index(self, name: str) -> int:
        """Index of a field by name, or -1 if the schema has no such field."""
        return self._c_defn.GetFieldIndex(name)

    def field(self, key: int | str) -> FieldInfo:
        """
        Look up a field by position or name.

        Raises:
            FieldError: If the field does not exist
        """
        idx = self.field_index(key) if isinstance(key, str) else key
        if idx < 0 or idx >= self.field_count():
            raise FieldError(f"Field ({key}) does not exist")
        fdefn = self._c_defn.GetFieldDefn(idx)
        return FieldInfo(
            name=fdefn.GetName(),
            field_type=FieldType(fdefn.GetType()),
            width=fdefn.GetWidth(),
            precision=fdefn.GetPrecision(),
        )

    def fields(self) -> Iterator[FieldInfo]:
        for i in range(self.field_count()):
            yield self.field(i)

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields()]

    def __len__(self) -> int:
        return self.field_count()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.field_index(name) >= 0

    def __repr__(self) -> str:
        return f"<Defn name={self.name!r} fields={self.field_names()}>"
