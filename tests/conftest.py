"""Shared fixtures for ogrlayer tests."""

import pytest
from osgeo import gdal, ogr, osr

from ogrlayer import FieldType, Layer

gdal.UseExceptions()
ogr.UseExceptions()


@pytest.fixture
def gpkg_dataset(tmp_path):
    """An empty GeoPackage opened for writing."""
    driver = ogr.GetDriverByName("GPKG")
    ds = driver.CreateDataSource(str(tmp_path / "test.gpkg"))
    yield ds
    ds = None


@pytest.fixture
def wgs84():
    srs = osr.SpatialReference()
    srs.ImportFromEPSG(4326)
    return srs


@pytest.fixture
def point_layer(gpkg_dataset, wgs84):
    """A point Layer without attribute fields."""
    c_layer = gpkg_dataset.CreateLayer("points", wgs84, ogr.wkbPoint)
    return Layer(c_layer, owner=gpkg_dataset)


@pytest.fixture
def places_layer(gpkg_dataset, wgs84):
    """A point Layer with name and pop fields."""
    c_layer = gpkg_dataset.CreateLayer("places", wgs84, ogr.wkbPoint)
    layer = Layer(c_layer, owner=gpkg_dataset)
    layer.create_defn_fields([("name", FieldType.STRING), ("pop", FieldType.INTEGER)])
    return layer


@pytest.fixture
def status_mode():
    """Run a test with the bindings returning status codes instead of raising."""
    ogr_was, gdal_was = ogr.GetUseExceptions(), gdal.GetUseExceptions()
    ogr.DontUseExceptions()
    gdal.DontUseExceptions()
    yield
    if ogr_was:
        ogr.UseExceptions()
    if gdal_was:
        gdal.UseExceptions()
