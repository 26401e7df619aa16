"""Current weather entities and the builder decoding them from the wire format."""

import math
import re
from collections.abc import Mapping
from typing import Any

from pydantic import Field

from .base import NO_CITY_ID, DomainModel, WireInt
from .decoding import DecodeError, WireField, coerce, decode, raw_mapping
from .location import Coordinate

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]{1,19}")


class MainAttribute(DomainModel):
    """Current-conditions measurement block (wire object ``main``).

    Example:
        >>> main = MainAttribute(temp=280.5, pressure=1012, humidity=81,
        ...                      temp_min=278, temp_max=282)
        >>> main.temperature
        280.5
        >>> main.is_valid()
        True
    """

    temperature: float | None = Field(default=None, alias="temp")
    pressure: float | None = Field(default=None)
    humidity: float | None = Field(default=None, description="Relative humidity in %")
    temperature_min: float | None = Field(default=None, alias="temp_min")
    temperature_max: float | None = Field(default=None, alias="temp_max")

    def is_valid(self) -> bool:
        """Check every measurement is present and finite, humidity in [0, 100]."""
        values = (
            self.temperature,
            self.pressure,
            self.humidity,
            self.temperature_min,
            self.temperature_max,
        )
        if any(value is None or not math.isfinite(value) for value in values):
            return False

        return 0.0 <= self.humidity <= 100.0


class Weather(DomainModel):
    """Weather snapshot for a single location.

    Built exclusively through ``WeatherBuilder``; use ``Weather.from_wire`` to
    decode a provider payload.

    Example:
        >>> weather = (
        ...     WeatherBuilder()
        ...     .set_city_id(2643743)
        ...     .set_city_name("London")
        ...     .set_system({"country": "GB", "sunrise": 1609459200, "sunset": 1609488000})
        ...     .build()
        ... )
        >>> weather.country_code
        'GB'
        >>> weather.is_valid()  # no coordinate, no measurements
        False
    """

    city_id: int = NO_CITY_ID
    city_name: str = ""
    country_code: str = ""
    sunrise_time: int = Field(default=0, description="Sunrise, epoch seconds (UTC)")
    sunset_time: int = Field(default=0, description="Sunset, epoch seconds (UTC)")
    coordinate: Coordinate | None = None
    attribute: MainAttribute | None = None

    def is_valid(self) -> bool:
        """Check identity, sun times and nested entities."""
        if self.city_id == NO_CITY_ID:
            return False

        if not self.city_name or not self.country_code:
            return False

        if self.sunrise_time <= 0 or self.sunset_time <= 0:
            return False

        if self.coordinate is None or not self.coordinate.is_valid():
            return False

        return self.attribute is not None and self.attribute.is_valid()

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "Weather":
        """Decode a provider weather object.

        Raises:
            DecodeError: If a value cannot be coerced to its declared type
        """
        return decode(payload, WeatherBuilder())


def _parse_integer(system: Mapping[str, Any], key: str) -> int:
    """Read a 64-bit integer from the ``sys`` block.

    Accepts ints, integral floats and plain decimal digit strings. Exponent
    notation, booleans and values outside the signed 64-bit range fail.
    """
    value = system.get(key)
    if value is None:
        return 0

    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if value.is_integer() else None
    elif isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        number = int(value)
    else:
        number = None

    if number is None or not LONG_MIN <= number <= LONG_MAX:
        raise DecodeError(key, f"expected integer, got {value!r}")
    return number


class WeatherBuilder:
    """Mutable accumulator producing an immutable ``Weather``.

    Unset fields keep their defaults: ``NO_CITY_ID`` for the city id, empty
    strings, zero sun times and no nested entities.
    """

    def __init__(self):
        self._city_id = NO_CITY_ID
        self._city_name = ""
        self._country_code = ""
        self._sunrise_time = 0
        self._sunset_time = 0
        self._coordinate: Coordinate | None = None
        self._attribute: MainAttribute | None = None

    def set_city_id(self, city_id: int) -> "WeatherBuilder":
        """Set the provider city id (wire key ``id``)."""
        self._city_id = city_id
        return self

    def set_city_name(self, city_name: str) -> "WeatherBuilder":
        """Set the city name (wire key ``name``)."""
        self._city_name = city_name
        return self

    def set_country_code(self, country_code: str) -> "WeatherBuilder":
        """Set the country code from the top-level ``country`` key.

        ``set_system`` writes the same field; whichever runs last wins.
        """
        self._country_code = country_code
        return self

    def set_system(self, system: Mapping[str, Any]) -> "WeatherBuilder":
        """Flatten the provider's ``sys`` block into country and sun times.

        Missing keys fall back to ``""`` and ``0``. Sun times may arrive as
        ints, integral floats or digit strings, so ``"1609459200"`` and
        ``1609459200`` are equivalent.

        Args:
            system: Raw ``sys`` object

        Returns:
            The builder itself

        Raises:
            DecodeError: If sunrise or sunset is not a 64-bit integer

        Example:
            >>> builder = WeatherBuilder().set_system({"sunrise": "1609459200"})
            >>> weather = builder.build()
            >>> weather.sunrise_time, weather.sunset_time, weather.country_code
            (1609459200, 0, '')
        """
        country = system.get("country")
        self._country_code = "" if country is None else str(country)
        self._sunrise_time = _parse_integer(system, "sunrise")
        self._sunset_time = _parse_integer(system, "sunset")
        return self

    def set_coordinate(self, coordinate: Coordinate | None) -> "WeatherBuilder":
        """Set the location (wire object ``coord``)."""
        self._coordinate = coordinate
        return self

    def set_attribute(self, attribute: MainAttribute | None) -> "WeatherBuilder":
        """Set the measurement block (wire object ``main``)."""
        self._attribute = attribute
        return self

    def build(self) -> Weather:
        """Snapshot the accumulated fields into an immutable ``Weather``.

        Returns:
            A new ``Weather``; later setter calls do not affect it
        """
        return Weather(
            city_id=self._city_id,
            city_name=self._city_name,
            country_code=self._country_code,
            sunrise_time=self._sunrise_time,
            sunset_time=self._sunset_time,
            coordinate=self._coordinate,
            attribute=self._attribute,
        )

    # Decode order: "sys" runs after "country", so the nested country wins.
    wire_fields = (
        WireField("id", set_city_id, coerce(WireInt, name="int")),
        WireField("name", set_city_name, coerce(str)),
        WireField("country", set_country_code, coerce(str)),
        WireField("coord", set_coordinate, coerce(Coordinate)),
        WireField("main", set_attribute, coerce(MainAttribute)),
        WireField("sys", set_system, raw_mapping),
    )
