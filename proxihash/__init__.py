"""
Proxihash.

Proxihash is a Python library encoding latitude and longitude into hierarchical tile identifiers
sharing long prefixes for nearby places, with neighbour lookup and radius search planning.
"""

from proxihash import chars
from proxihash._exceptions import InvalidArgument, InvalidPrecision, PoleWrapError
from proxihash.config import (
    AngularUnits,
    ProxihashConfig,
    get_config,
    reset_config,
    set_angular_units,
    set_radius,
)
from proxihash.geometry import tile_to_box, tiles_to_geodataframe, tiles_to_geometry
from proxihash.proxihash import Proxihash
from proxihash.search import (
    SearchPlanner,
    bits_for_search,
    chars_for_search,
    search_chars,
    search_tiles,
    tiles_for_search,
)

__app_name__ = "Proxihash"
__version__ = "0.1.0"

__all__ = [
    "AngularUnits",
    "InvalidArgument",
    "InvalidPrecision",
    "PoleWrapError",
    "Proxihash",
    "ProxihashConfig",
    "SearchPlanner",
    "bits_for_search",
    "chars",
    "chars_for_search",
    "get_config",
    "reset_config",
    "search_chars",
    "search_tiles",
    "set_angular_units",
    "set_radius",
    "tile_to_box",
    "tiles_for_search",
    "tiles_to_geodataframe",
    "tiles_to_geometry",
]
