"""Layer usage example for ogrlayer.

Writes a small GeoPackage of places, then reads it back with a spatial filter.
"""

import argparse
from pathlib import Path

from osgeo import ogr, osr
from shapely.geometry import Point, box

from ogrlayer import FieldType, Layer, OgrLayerError

ogr.UseExceptions()


def main():
    parser = argparse.ArgumentParser(description="Write and filter a places layer")
    parser.add_argument(
        "--out", type=str, default="outputs/places.gpkg", help="Output GeoPackage"
    )
    args = parser.parse_args()

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    if out.exists():
        out.unlink()

    srs = osr.SpatialReference()
    srs.ImportFromEPSG(4326)

    ds = ogr.GetDriverByName("GPKG").CreateDataSource(str(out))
    layer = Layer(ds.CreateLayer("places", srs, ogr.wkbPoint), owner=ds)

    try:
        layer.create_defn_fields(
            [("name", FieldType.STRING, 32), ("pop", FieldType.INTEGER), ("area", FieldType.REAL)]
        )
        layer.create_feature_fields(Point(-0.1276, 51.5074), {"name": "London", "pop": 8982000})
        layer.create_feature_fields(Point(2.3522, 48.8566), {"name": "Paris", "pop": 2161000})
        layer.create_feature_fields(Point(13.4050, 52.5200), {"name": "Berlin", "pop": 3645000})
    except OgrLayerError as e:
        print(f"✖ Failed to write {out}: {e}")
        raise SystemExit(1) from e

    print(f"Wrote {layer.feature_count()} features to {out}")

    layer.set_spatial_filter(box(-5, 45, 5, 55))
    for feature in layer.features():
        print(f"  {feature.field('name').value}: {feature.geometry().wkt}")
    layer.clear_spatial_filter()

    print("\nAs a GeoDataFrame:")
    print(layer.to_geodataframe())

    layer.release()
    ds = None


if __name__ == "__main__":
    main()
