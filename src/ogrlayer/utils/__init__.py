"""Utility functions for ogrlayer."""

from ogrlayer.utils.io import layer_to_geojson, save_geojson, to_feature

__all__ = [
    "layer_to_geojson",
    "save_geojson",
    "to_feature",
]
