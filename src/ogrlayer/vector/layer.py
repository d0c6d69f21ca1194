"""Layer facade over an OGR vector layer.

Example:
    >>> from osgeo import ogr
    >>> from ogrlayer import Layer
    >>> ds = ogr.Open("roads.gpkg", update=1)
    >>> layer = Layer.from_dataset(ds, "roads")
    >>> for feature in layer.features():
    ...     print(feature.fid, feature.geometry())
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import geopandas as gpd
from osgeo import ogr
from pyproj import CRS
from shapely.geometry.base import BaseGeometry

from ogrlayer.config import LayerConfig
from ogrlayer.core.errors import check_ogr_call
from ogrlayer.core.exceptions import FieldError, HandleError, OgrError
from ogrlayer.core.geometry import GeometryLike, to_ogr_geometry, to_shapely
from ogrlayer.vector.defn import Defn
from ogrlayer.vector.feature import Feature
from ogrlayer.vector.field import FieldDefn
from ogrlayer.vector.metadata import Metadata
from ogrlayer.vector.values import IntegerValue, RealValue, StringValue, as_field_value

log = logging.getLogger(__name__)

INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1


class Layer(Metadata):
    """
    Wrapper around an ``ogr.Layer`` owned by its dataset.

    The layer handle is borrowed: it is never destroyed here. The owning
    dataset can be passed as ``owner`` to keep it alive for as long as this
    wrapper is. ``release()`` invalidates the wrapper explicitly.

    Args:
        c_layer: The OGR layer to wrap
        owner: Object owning the layer (usually the dataset)
        config: Layer configuration, defaults to LayerConfig()

    Raises:
        HandleError: If c_layer is None
    """

    def __init__(self, c_layer: ogr.Layer, owner: Any = None, config: LayerConfig | None = None):
        if c_layer is None:
            raise HandleError("Cannot wrap a null OGR layer")
        self._c_layer = c_layer
        self._owner = owner
        self._pass = 0
        self.config = config or LayerConfig()
        self._defn = Defn(c_layer.GetLayerDefn())

    @classmethod
    def from_dataset(
        cls, dataset: Any, layer: int | str = 0, config: LayerConfig | None = None
    ) -> Layer:
        """
        Wrap a layer of an opened dataset, looked up by index or name.

        Raises:
            HandleError: If the dataset has no such layer
        """
        if dataset is None:
            raise HandleError("Dataset is None")
        try:
            if isinstance(layer, str):
                c_layer = dataset.GetLayerByName(layer)
            else:
                c_layer = dataset.GetLayerByIndex(layer)
        except RuntimeError as e:
            raise HandleError(f"Layer ({layer}) not found: {e}") from e
        if c_layer is None:
            raise HandleError(f"Layer ({layer}) not found")
        return cls(c_layer, owner=dataset, config=config)

    def __enter__(self) -> Layer:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __iter__(self) -> FeatureIterator:
        return self.features()

    def __repr__(self) -> str:
        if self._c_layer is None:
            return "<Layer released>"
        return f"<Layer name={self.name!r} fields={self._defn.field_names()}>"

    @property
    def ogr_layer(self) -> ogr.Layer:
        """The wrapped OGR layer."""
        if self._c_layer is None:
            raise HandleError("Layer has been released")
        return self._c_layer

    @property
    def released(self) -> bool:
        return self._c_layer is None

    def release(self) -> None:
        """Drop the layer handle and the owner reference. The layer is not destroyed."""
        self._c_layer = None
        self._owner = None

    def _major_object(self) -> ogr.Layer:
        return self.ogr_layer

    @property
    def name(self) -> str:
        return self.ogr_layer.GetName()

    @property
    def geometry_type(self) -> int:
        return self.ogr_layer.GetGeomType()

    @property
    def crs(self) -> CRS | None:
        """Layer CRS as a pyproj CRS, or None if the layer has none."""
        srs = self.ogr_layer.GetSpatialRef()
        if srs is None:
            return None
        return CRS.from_wkt(srs.ExportToWkt())

    def defn(self) -> Defn:
        """The layer schema, cached at construction."""
        if self._c_layer is None:
            raise HandleError("Layer has been released")
        return self._defn

    def feature_count(self, force: bool = True) -> int:
        """Number of features matching the current filters, -1 if unknown and not forced."""
        return self.ogr_layer.GetFeatureCount(1 if force else 0)

    def extent(self, force: bool = True) -> tuple[float, float, float, float]:
        """
        Bounds of the layer as (minx, miny, maxx, maxy).

        Raises:
            OgrError: If OGR cannot compute the extent
        """
        try:
            minx, maxx, miny, maxy = self.ogr_layer.GetExtent(force=1 if force else 0)
        except RuntimeError as e:
            raise OgrError(ogr.OGRERR_FAILURE, "OGR_L_GetExtent", str(e)) from e
        return minx, miny, maxx, maxy

    def features(self) -> FeatureIterator:
        """
        Iterate over all features matching the current filters, from the start.

        Starting a pass invalidates iterators from earlier passes, as they
        share the layer read cursor.
        """
        if self.config.reset_on_iterate:
            self.ogr_layer.ResetReading()
        self._pass += 1
        return FeatureIterator(self)

    def feature(self, fid: int) -> Feature | None:
        """
        Fetch a single feature by id.

        Returns:
            The feature, or None if the layer has no feature with that id
        """
        try:
            c_feature = self.ogr_layer.GetFeature(fid)
        except RuntimeError as e:
            raise OgrError(ogr.OGRERR_FAILURE, "OGR_L_GetFeature", str(e)) from e
        if c_feature is None:
            return None
        return Feature(self._defn, c_feature)

    def set_spatial_filter(self, geometry: GeometryLike) -> None:
        """Only yield features intersecting ``geometry`` from now on."""
        ogr_geom = to_ogr_geometry(geometry)
        log.debug("Setting spatial filter on %r: %s", self.name, ogr_geom.ExportToWkt())
        # OGR keeps its own copy of the filter
        self.ogr_layer.SetSpatialFilter(ogr_geom)

    def set_spatial_filter_rect(self, minx: float, miny: float, maxx: float, maxy: float) -> None:
        self.ogr_layer.SetSpatialFilterRect(minx, miny, maxx, maxy)

    def clear_spatial_filter(self) -> None:
        log.debug("Clearing spatial filter on %r", self.name)
        self.ogr_layer.SetSpatialFilter(None)

    def spatial_filter(self) -> BaseGeometry | None:
        return to_shapely(self.ogr_layer.GetSpatialFilter())

    def set_attribute_filter(self, where: str) -> None:
        """
        Restrict iteration with an OGR SQL WHERE clause.

        Raises:
            OgrError: If the clause is rejected
        """
        log.debug("Setting attribute filter on %r: %s", self.name, where)
        check_ogr_call("OGR_L_SetAttributeFilter", self.ogr_layer.SetAttributeFilter, where)

    def clear_attribute_filter(self) -> None:
        check_ogr_call("OGR_L_SetAttributeFilter", self.ogr_layer.SetAttributeFilter, None)

    def create_defn_fields(self, fields: Iterable) -> None:
        """
        Add fields to the layer schema, in order.

        Args:
            fields: FieldDefn objects, or tuples of (name, type) with optional
                width and precision: (name, type, width, precision)

        Raises:
            OgrError: If OGR_L_CreateField fails; fields added before the
                failing one stay in the schema
            FieldError: If a field description is malformed
        """
        for spec in fields:
            if isinstance(spec, FieldDefn):
                spec.add_to_layer(self)
                continue

            if not 2 <= len(spec) <= 4:
                raise FieldError(f"Expected (name, type[, width[, precision]]), got {spec!r}")
            name, field_type, *rest = spec
            with FieldDefn(name, field_type) as fdefn:
                if len(rest) > 0:
                    fdefn.set_width(rest[0])
                if len(rest) > 1:
                    fdefn.set_precision(rest[1])
                fdefn.add_to_layer(self)

    def create_feature(self, geometry: GeometryLike) -> None:
        """
        Write a new feature holding only ``geometry``.

        Raises:
            GeometryError: If the geometry cannot be converted
            OgrError: If OGR_F_SetGeometryDirectly or OGR_L_CreateFeature fails
        """
        c_feature = self._new_feature(geometry)
        self._submit(c_feature)

    def create_feature_fields(
        self,
        geometry: GeometryLike,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]] | Sequence[Any] | None = None,
        field_names: Sequence[str] | None = None,
    ) -> None:
        """
        Write a new feature with a geometry and attribute values.

        Values are given as a mapping (or pairs) of field name to value. A
        value is a StringValue, IntegerValue or RealValue, a plain str, int
        or float, or None for a null field. For parallel sequences, pass the
        names as ``field_names`` and the values as ``values``.

        Example:
            >>> layer.create_feature_fields(Point(1, 2), {"name": "A", "pop": 5})

        Raises:
            FieldError: If names and values differ in length, a field does not
                exist (with strict_fields), or a value does not fit its field
            GeometryError: If the geometry cannot be converted
            OgrError: If OGR_F_SetGeometryDirectly or OGR_L_CreateFeature fails
        """
        pairs = _field_pairs(values, field_names)
        c_feature = self._new_feature(geometry)

        for field_name, raw in pairs:
            try:
                value = as_field_value(raw)
            except TypeError as e:
                raise FieldError(f"Invalid value for field ({field_name}): {e}") from e

            idx = c_feature.GetFieldIndex(field_name)
            if idx < 0:
                if self.config.strict_fields:
                    raise FieldError(f"Field ({field_name}) does not exist in layer {self.name!r}")
                log.warning("Skipping unknown field %r on layer %r", field_name, self.name)
                continue
            _set_field(c_feature, idx, field_name, value)

        self._submit(c_feature)

    def to_geodataframe(self) -> gpd.GeoDataFrame:
        """Read the features matching the current filters into a GeoDataFrame."""
        rows, geoms = [], []
        for feature in self.features():
            rows.append(feature.properties())
            geoms.append(feature.geometry())
        return gpd.GeoDataFrame(
            rows, columns=self._defn.field_names(), geometry=geoms, crs=self.crs
        )

    def _new_feature(self, geometry: GeometryLike) -> ogr.Feature:
        ogr_geom = to_ogr_geometry(geometry)
        c_feature = ogr.Feature(self.defn().ogr_defn)
        # the feature takes ownership of ogr_geom
        check_ogr_call("OGR_F_SetGeometryDirectly", c_feature.SetGeometryDirectly, ogr_geom)
        return c_feature

    def _submit(self, c_feature: ogr.Feature) -> None:
        check_ogr_call("OGR_L_CreateFeature", self.ogr_layer.CreateFeature, c_feature)
        log.debug("Created feature %s on layer %r", c_feature.GetFID(), self.name)


class FeatureIterator:
    """
    Single pass over the features of a layer.

    Pulls one feature at a time from the layer cursor. Once exhausted it stays
    exhausted; call ``Layer.features()`` for a new pass. Starting a new pass
    invalidates this one. Dropping it early is safe, the cursor belongs to the
    layer.
    """

    def __init__(self, layer: Layer):
        self._layer = layer
        self._pass = layer._pass
        self._exhausted = False

    def __iter__(self) -> FeatureIterator:
        return self

    def __next__(self) -> Feature:
        if self._exhausted:
            raise StopIteration
        if self._pass != self._layer._pass:
            raise HandleError("Feature iterator invalidated by a newer pass over the layer")
        c_feature = self._layer.ogr_layer.GetNextFeature()
        if c_feature is None:
            self._exhausted = True
            raise StopIteration
        return Feature(self._layer.defn(), c_feature)

    @property
    def exhausted(self) -> bool:
        return self._exhausted


def _field_pairs(values, field_names) -> list[tuple[str, Any]]:
    if field_names is not None:
        if values is None or isinstance(values, Mapping):
            raise FieldError("field_names requires values as a sequence of the same length")
        values = list(values)
        if len(field_names) != len(values):
            raise FieldError(
                f"Got {len(field_names)} field names but {len(values)} values"
            )
        return list(zip(field_names, values))
    if values is None:
        return []
    if isinstance(values, Mapping):
        return list(values.items())
    pairs = []
    for pair in values:
        if isinstance(pair, (str, bytes)) or not isinstance(pair, Iterable):
            raise FieldError(f"Expected (field_name, value) pairs, got {pair!r}")
        pair = tuple(pair)
        if len(pair) != 2:
            raise FieldError(f"Expected (field_name, value) pairs, got {pair!r}")
        pairs.append(pair)
    return pairs


def _set_field(c_feature: ogr.Feature, idx: int, field_name: str, value) -> None:
    if value is None:
        c_feature.SetFieldNull(idx)
    elif isinstance(value, StringValue):
        if not isinstance(value.value, str):
            raise FieldError(f"StringValue for field ({field_name}) holds {value.value!r}")
        c_feature.SetFieldString(idx, value.value)
    elif isinstance(value, IntegerValue):
        if isinstance(value.value, bool) or not isinstance(value.value, int):
            raise FieldError(f"IntegerValue for field ({field_name}) holds {value.value!r}")
        lo, hi = INT64_MIN, INT64_MAX
        if c_feature.GetFieldType(idx) == ogr.OFTInteger:
            lo, hi = INT32_MIN, INT32_MAX
        if not lo <= value.value <= hi:
            raise FieldError(f"Value {value.value} out of range for field ({field_name})")
        c_feature.SetFieldInteger64(idx, value.value)
    elif isinstance(value, RealValue):
        if isinstance(value.value, bool) or not isinstance(value.value, (int, float)):
            raise FieldError(f"RealValue for field ({field_name}) holds {value.value!r}")
        c_feature.SetFieldDouble(idx, float(value.value))
