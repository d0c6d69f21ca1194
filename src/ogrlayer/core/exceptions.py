"""Custom exceptions for ogrlayer."""

from __future__ import annotations

# OGRErr codes from ogr_core.h
OGRERR_NAMES = {
    0: "OGRERR_NONE",
    1: "OGRERR_NOT_ENOUGH_DATA",
    2: "OGRERR_NOT_ENOUGH_MEMORY",
    3: "OGRERR_UNSUPPORTED_GEOMETRY_TYPE",
    4: "OGRERR_UNSUPPORTED_OPERATION",
    5: "OGRERR_CORRUPT_DATA",
    6: "OGRERR_FAILURE",
    7: "OGRERR_UNSUPPORTED_SRS",
    8: "OGRERR_INVALID_HANDLE",
    9: "OGRERR_NON_EXISTING_FEATURE",
}


def ogr_error_name(code: int) -> str:
    """Return the symbolic name of an OGRErr code."""
    return OGRERR_NAMES.get(code, "OGRERR_UNKNOWN")


class OgrLayerError(Exception):
    """Base exception for ogrlayer."""

    pass


class OgrError(OgrLayerError):
    """Raised when an OGR call reports a non-success status.

    Attributes:
        code: The OGRErr status code returned (or implied) by the call
        operation: Name of the OGR C function that failed
        message: Last GDAL error message, if any
    """

    def __init__(self, code: int, operation: str, message: str | None = None):
        self.code = code
        self.operation = operation
        self.message = message or None
        super().__init__(code, operation, self.message)

    @property
    def code_name(self) -> str:
        return ogr_error_name(self.code)

    def __str__(self) -> str:
        text = f"{self.operation} failed with {self.code_name} ({self.code})"
        if self.message:
            text += f": {self.message}"
        return text


class HandleError(OgrLayerError):
    """Raised when a released or missing native handle is used."""

    pass


class FieldError(OgrLayerError):
    """Raised when field schema or field values are invalid."""

    pass


class GeometryError(OgrLayerError):
    """Raised when a geometry cannot be passed to OGR."""

    pass
