from __future__ import annotations

from dataclasses import dataclass

from ..common.validators import require_coordinates, require_non_negative


@dataclass(frozen=True)
class Coordinate:
    """A WGS84 point in decimal degrees.

    Construction does not validate ranges; use :meth:`checked` for input coming
    from a caller.
    """

    latitude: float
    longitude: float

    @classmethod
    def checked(cls, latitude, longitude) -> "Coordinate":
        lat, lng = require_coordinates(latitude, longitude)
        return cls(latitude=lat, longitude=lng)


@dataclass(frozen=True)
class Site:
    """Reference site: geofence center plus allowed radius in meters."""

    center: Coordinate
    radius_m: float

    @classmethod
    def from_config(cls, site_config: dict) -> "Site":
        center = Coordinate.checked(site_config.get("latitude"), site_config.get("longitude"))
        radius = require_non_negative(site_config.get("radius_m"), "Site radius")
        return cls(center=center, radius_m=radius)
