"""Location value objects: geographic coordinate and city."""

import math

from pydantic import Field

from .base import NO_CITY_ID, DomainModel, WireInt


class Coordinate(DomainModel):
    """Geographic coordinate (wire object ``coord``).

    Example:
        >>> Coordinate(lat=51.5, lon=-0.13).latitude
        51.5
        >>> Coordinate(lat=91.0, lon=0.0).is_valid()
        False
    """

    latitude: float | None = Field(
        default=None,
        alias="lat",
        description="Latitude in decimal degrees",
    )
    longitude: float | None = Field(
        default=None,
        alias="lon",
        description="Longitude in decimal degrees",
    )

    def is_valid(self) -> bool:
        """Check that both axes are present, finite and within range.

        Example:
            >>> Coordinate(lat=-90.0, lon=180.0).is_valid()
            True
            >>> Coordinate(lat=10.0).is_valid()
            False
        """
        if self.latitude is None or self.longitude is None:
            return False

        if not (math.isfinite(self.latitude) and math.isfinite(self.longitude)):
            return False

        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


class City(DomainModel):
    """City a forecast is issued for (wire object ``city``).

    Example:
        >>> city = City(id=2643743, name="London", country="GB",
        ...             coord={"lat": 51.5, "lon": -0.13})
        >>> city.country_code
        'GB'
        >>> city.is_valid()
        True
    """

    id: WireInt = Field(default=NO_CITY_ID, description="Provider city identifier")
    name: str = Field(default="", description="City name")
    country_code: str = Field(
        default="",
        alias="country",
        description="ISO 3166 country code",
    )
    coordinate: Coordinate | None = Field(
        default=None,
        alias="coord",
        description="City location",
    )

    def is_valid(self) -> bool:
        """Check identifier, names and coordinate."""
        if self.id == NO_CITY_ID:
            return False

        if not self.name or not self.country_code:
            return False

        return self.coordinate is not None and self.coordinate.is_valid()
