"""Shared base for immutable weather domain entities."""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, model_validator

NO_CITY_ID = -1


def _reject_bool(value: Any) -> Any:
    """Refuse JSON booleans where an integer is expected.

    Example:
        >>> _reject_bool(True)
        Traceback (most recent call last):
        ...
        ValueError: expected integer, got boolean
    """
    if isinstance(value, bool):
        raise ValueError("expected integer, got boolean")
    return value


# Integer accepting numeric strings but not booleans
WireInt = Annotated[int, BeforeValidator(_reject_bool)]


class DomainModel(BaseModel):
    """Immutable entity decoded from the provider's wire format.

    Entities are frozen once constructed and ignore unknown wire keys.
    Keys holding ``null`` are treated as absent, so the field default applies.
    Validity is a business-rule predicate, not a decode failure: an entity
    that decoded cleanly may still report ``is_valid() is False``.

    Example:
        >>> from weather_client.models.location import Coordinate
        >>> coordinate = Coordinate(lat=51.5, lon=-0.13)
        >>> coordinate.is_valid()
        True
        >>> str(coordinate)
        'Coordinate{"latitude":51.5,"longitude":-0.13}'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_null_values(cls, data: Any) -> Any:
        """Remove ``None`` values so missing and null keys decode alike.

        Example:
            >>> from weather_client.models.location import City
            >>> City.model_validate({"id": None, "name": "London"}).id
            -1
        """
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data

    def is_valid(self) -> bool:
        """Return True if the entity is semantically well-formed."""
        raise NotImplementedError

    def __str__(self) -> str:
        return f"{type(self).__name__}{self.model_dump_json()}"
