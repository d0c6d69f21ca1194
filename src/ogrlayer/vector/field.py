"""Owned OGR field definitions."""

from __future__ import annotations

import logging
from enum import IntEnum

from osgeo import ogr

from ogrlayer.core.errors import check_ogr_call
from ogrlayer.core.exceptions import FieldError, HandleError

log = logging.getLogger(__name__)


class FieldType(IntEnum):
    """OGR field types (the ``ogr.OFT*`` constants)."""

    INTEGER = ogr.OFTInteger
    INTEGER_LIST = ogr.OFTIntegerList
    REAL = ogr.OFTReal
    REAL_LIST = ogr.OFTRealList
    STRING = ogr.OFTString
    STRING_LIST = ogr.OFTStringList
    BINARY = ogr.OFTBinary
    DATE = ogr.OFTDate
    TIME = ogr.OFTTime
    DATETIME = ogr.OFTDateTime
    INTEGER64 = ogr.OFTInteger64
    INTEGER64_LIST = ogr.OFTInteger64List

    @classmethod
    def coerce(cls, field_type) -> FieldType:
        """Accept a FieldType, an ogr.OFT* integer or a member name."""
        if isinstance(field_type, str):
            try:
                return cls[field_type.upper()]
            except KeyError:
                raise FieldError(f"Unknown field type: {field_type!r}") from None
        try:
            return cls(field_type)
        except ValueError:
            raise FieldError(f"Unknown field type: {field_type!r}") from None


class FieldDefn:
    """
    Exclusive owner of an ``ogr.FieldDefn``.

    The native object is released exactly once, by ``destroy()`` or on leaving
    a ``with`` block. Any use afterwards raises HandleError.

    Example:
        >>> with FieldDefn("name", FieldType.STRING) as fd:
        ...     fd.set_width(32)
        ...     fd.add_to_layer(layer)
    """

    def __init__(self, name: str, field_type):
        if not name:
            raise FieldError("Field name must not be empty")
        self._fdefn = ogr.FieldDefn(name, int(FieldType.coerce(field_type)))

    def __enter__(self) -> FieldDefn:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __repr__(self) -> str:
        if self._fdefn is None:
            return "<FieldDefn destroyed>"
        return f"<FieldDefn name={self.name!r} type={self.field_type.name}>"

    def _handle(self) -> ogr.FieldDefn:
        if self._fdefn is None:
            raise HandleError("FieldDefn has already been destroyed")
        return self._fdefn

    @property
    def destroyed(self) -> bool:
        return self._fdefn is None

    @property
    def name(self) -> str:
        return self._handle().GetName()

    @property
    def field_type(self) -> FieldType:
        return FieldType(self._handle().GetType())

    @property
    def width(self) -> int:
        return self._handle().GetWidth()

    @property
    def precision(self) -> int:
        return self._handle().GetPrecision()

    def set_width(self, width: int) -> None:
        if width < 0:
            raise ValueError(f"Field width must be >= 0, got {width}")
        self._handle().SetWidth(width)

    def set_precision(self, precision: int) -> None:
        if precision < 0:
            raise ValueError(f"Field precision must be >= 0, got {precision}")
        self._handle().SetPrecision(precision)

    def add_to_layer(self, layer, approx_ok: bool | None = None) -> None:
        """
        Register this field on a layer's schema.

        OGR copies the definition, so this object can be destroyed afterwards.

        Args:
            layer: The Layer to add the field to
            approx_ok: Allow the driver to alter the definition; defaults to
                the layer's configuration

        Raises:
            OgrError: If OGR_L_CreateField fails
        """
        if approx_ok is None:
            approx_ok = layer.config.approx_ok
        fdefn = self._handle()
        log.debug("Creating field %r on layer %r", fdefn.GetName(), layer.name)
        check_ogr_call(
            "OGR_L_CreateField", layer.ogr_layer.CreateField, fdefn, 1 if approx_ok else 0
        )

    def destroy(self) -> None:
        """Release the native field definition. Calling it again does nothing."""
        self._fdefn = None
