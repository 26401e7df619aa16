"""Multi-entry forecast entity and its builder."""

from collections.abc import Iterable, Mapping
from typing import Any

from .base import DomainModel
from .decoding import WireField, coerce, decode, nested, sequence_of
from .location import City
from .weather import Weather, WeatherBuilder


class Forecast(DomainModel):
    """Forecast for a city: the city plus an ordered list of weather entries.

    Example:
        >>> forecast = ForecastBuilder().build()
        >>> forecast.weathers
        []
        >>> forecast.is_valid()  # no city
        False
    """

    city: City | None = None
    entries: tuple[Weather, ...] = ()

    @property
    def weathers(self) -> list[Weather]:
        """Weather entries as a new list on every access."""
        return list(self.entries)

    def is_valid(self) -> bool:
        """Check the city and every entry; no entries reduces to the city alone."""
        if self.city is None or not self.city.is_valid():
            return False

        return all(weather.is_valid() for weather in self.entries)

    @classmethod
    def from_wire(cls, payload: Mapping[str, Any]) -> "Forecast":
        """Decode a provider forecast object.

        Raises:
            DecodeError: If the city or any entry fails to decode
        """
        return decode(payload, ForecastBuilder())


class ForecastBuilder:
    """Mutable accumulator producing an immutable ``Forecast``."""

    def __init__(self):
        self._city: City | None = None
        self._weathers: list[Weather] | None = None

    def set_city(self, city: City | None) -> "ForecastBuilder":
        """Set the forecast's city (wire object ``city``)."""
        self._city = city
        return self

    def set_weathers(self, weathers: Iterable[Weather] | None) -> "ForecastBuilder":
        """Set the weather entries (wire array ``list``).

        The entries are copied; ``None`` leaves the forecast with no entries.
        """
        self._weathers = None if weathers is None else list(weathers)
        return self

    def build(self) -> Forecast:
        """Snapshot the city and entries into an immutable ``Forecast``.

        Returns:
            A new ``Forecast`` whose entries are never ``None``

        Example:
            >>> ForecastBuilder().set_weathers(None).build().weathers
            []
        """
        return Forecast(city=self._city, entries=tuple(self._weathers or ()))

    wire_fields = (
        WireField("city", set_city, coerce(City)),
        WireField("list", set_weathers, sequence_of(nested(WeatherBuilder))),
    )
