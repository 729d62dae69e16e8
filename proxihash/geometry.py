"""Conversion of proxihash tiles to shapely geometries."""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional, Union

from shapely.geometry import Polygon, box

from proxihash import chars
from proxihash._constants import WGS84_CRS
from proxihash.config import AngularUnits, ProxihashConfig, _resolve_config
from proxihash.proxihash import Proxihash

if TYPE_CHECKING:  # pragma: no cover
    from geopandas import GeoDataFrame
    from shapely.geometry.base import BaseGeometry

__all__ = ["tile_to_box", "tiles_to_geodataframe", "tiles_to_geometry"]

TileLike = Union[Proxihash, str]


def _geopandas_new_api() -> bool:
    import geopandas as gpd
    from packaging import version

    return version.parse(gpd.__version__) >= version.parse("1.0.0")


def tile_to_box(tile: TileLike, config: Optional[ProxihashConfig] = None) -> Polygon:
    """
    Transform a proxihash to a rectangle polygon.

    Args:
        tile (Union[Proxihash, str]): Integer proxihash or proxihash string.
        config (Optional[ProxihashConfig]): Configuration with angular units.
            Defaults to the process-wide configuration.

    Returns:
        Polygon: Box with longitudes on the x axis and latitudes on the y axis.
    """
    config = _resolve_config(config)
    if isinstance(tile, Proxihash):
        lat_min, lat_max, lng_min, lng_max = tile.tile(config)
    else:
        lat_min, lat_max, lng_min, lng_max = chars.tile(tile, config)
    return box(minx=lng_min, miny=lat_min, maxx=lng_max, maxy=lat_max)


def tiles_to_geometry(
    tiles: Iterable[TileLike], config: Optional[ProxihashConfig] = None
) -> "BaseGeometry":
    """
    Merge proxihash tiles into a single geometry.

    Args:
        tiles (Iterable[Union[Proxihash, str]]): Tiles to merge, e.g. a search result.
        config (Optional[ProxihashConfig]): Configuration with angular units.
            Defaults to the process-wide configuration.

    Returns:
        BaseGeometry: Union of tile boxes.
    """
    import geopandas as gpd

    config = _resolve_config(config)
    geometries = gpd.GeoSeries([tile_to_box(tile, config) for tile in tiles])
    if _geopandas_new_api():
        return geometries.union_all()
    else:
        return geometries.unary_union


def tiles_to_geodataframe(
    tiles: Iterable[TileLike], config: Optional[ProxihashConfig] = None
) -> "GeoDataFrame":
    """
    Transform proxihash tiles to a GeoDataFrame.

    CRS is set to WGS84 only when the configuration uses degrees.

    Args:
        tiles (Iterable[Union[Proxihash, str]]): Tiles to transform.
        config (Optional[ProxihashConfig]): Configuration with angular units.
            Defaults to the process-wide configuration.

    Returns:
        GeoDataFrame: Frame with `proxihash` and `geometry` columns.
    """
    import geopandas as gpd

    config = _resolve_config(config)
    tiles = list(tiles)
    crs = WGS84_CRS if config.angular_units is AngularUnits.degrees else None
    return gpd.GeoDataFrame(
        data={"proxihash": tiles},
        geometry=[tile_to_box(tile, config) for tile in tiles],
        crs=crs,
    )
