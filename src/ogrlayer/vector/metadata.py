"""Key/value metadata capability for GDAL major objects."""

from __future__ import annotations

from osgeo import gdal, ogr

from ogrlayer.core.exceptions import OgrError


class Metadata:
    """
    Mixin giving access to GDAL metadata.

    Classes using it implement ``_major_object()`` returning the underlying
    osgeo object (layer, dataset, band).
    """

    def _major_object(self):
        raise NotImplementedError

    @property
    def description(self) -> str:
        return self._major_object().GetDescription()

    def metadata_domains(self) -> list[str]:
        return list(self._major_object().GetMetadataDomainList() or [])

    def metadata(self, domain: str = "") -> dict[str, str]:
        return dict(self._major_object().GetMetadata_Dict(domain) or {})

    def metadata_item(self, key: str, domain: str = "") -> str | None:
        return self._major_object().GetMetadataItem(key, domain)

    def set_metadata_item(self, key: str, value: str, domain: str = "") -> None:
        """
        Set a metadata item.

        Raises:
            OgrError: If GDAL reports a CPLErr other than CE_None
        """
        gdal.ErrorReset()
        try:
            rv = self._major_object().SetMetadataItem(key, value, domain)
        except RuntimeError as e:
            raise OgrError(ogr.OGRERR_FAILURE, "GDALSetMetadataItem", str(e)) from e
        if rv not in (None, gdal.CE_None):
            raise OgrError(ogr.OGRERR_FAILURE, "GDALSetMetadataItem", gdal.GetLastErrorMsg())
