"""Checking of OGR status codes."""

from __future__ import annotations

from typing import Any, Callable

from osgeo import gdal, ogr

from ogrlayer.core.exceptions import OgrError


def check_ogr_call(operation: str, func: Callable[..., Any], *args: Any) -> None:
    """
    Call an OGR function that returns an OGRErr status and raise on failure.

    Works whether the bindings are in exception mode or not: a RuntimeError
    raised by the bindings is reported as OGRERR_FAILURE, a non-zero status
    is reported as-is. The GDAL error state is reset first, so the message
    attached to the error comes from this call.

    Args:
        operation: Name of the underlying OGR C function, used in the error
        func: Bound osgeo method to call
        *args: Arguments forwarded to ``func``

    Raises:
        OgrError: If the call fails
    """
    gdal.ErrorReset()
    try:
        rv = func(*args)
    except RuntimeError as e:
        raise OgrError(ogr.OGRERR_FAILURE, operation, str(e)) from e

    if rv is not None and rv != ogr.OGRERR_NONE:
        raise OgrError(rv, operation, gdal.GetLastErrorMsg())
