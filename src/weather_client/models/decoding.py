"""Generic decode pass mapping wire-format objects onto entity builders.

Each builder declares an ordered table of ``WireField`` entries binding one
wire key to one of its setters. ``decode`` walks that table, converts the raw
value found under each key and hands it to the setter. Keys missing from the
table are ignored, so provider schema additions never break decoding.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class DecodeError(ValueError):
    """Raised when a wire value cannot be coerced to its declared type."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}" if path else reason)


class Builder(Protocol[T_co]):
    """Accumulator exposing an ordered wire table and a build step."""

    wire_fields: tuple["WireField", ...]

    def build(self) -> T_co: ...


@dataclass(frozen=True)
class WireField:
    """Binding of a wire key to a builder setter.

    Attributes:
        key: Exact key in the wire object
        setter: Unbound builder method receiving the converted value
        convert: Callable turning the raw value into the setter's type.
            It receives the raw value and the key path for error messages.
    """

    key: str
    setter: Callable[[Any, Any], Any]
    convert: Callable[[Any, str], Any]


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def coerce(type_: Any, name: str | None = None) -> Callable[[Any, str], Any]:
    """Build a converter validating a raw value against ``type_``.

    Uses pydantic lax mode, so numeric strings become numbers while
    non-numeric strings fail.

    Args:
        type_: Target type, possibly an ``Annotated`` alias
        name: Type name used in error messages; defaults to ``type_.__name__``

    Example:
        >>> coerce(int)("42", "id")
        42
        >>> coerce(int)("abc", "id")
        Traceback (most recent call last):
        ...
        weather_client.models.decoding.DecodeError: id: expected int, got 'abc'
    """
    adapter = TypeAdapter(type_)
    name = name or getattr(type_, "__name__", str(type_))

    def convert(value: Any, path: str) -> Any:
        try:
            return adapter.validate_python(value)
        except ValidationError as e:
            raise DecodeError(path, f"expected {name}, got {value!r}") from e

    return convert


def raw_mapping(value: Any, path: str) -> Mapping[str, Any]:
    """Pass a nested object through untouched, rejecting non-mappings."""
    if not isinstance(value, Mapping):
        raise DecodeError(path, f"expected object, got {type(value).__name__}")
    return value


def nested(builder_factory: Callable[[], Builder[T]]) -> Callable[[Any, str], T]:
    """Build a converter decoding a nested object with its own builder."""

    def convert(value: Any, path: str) -> T:
        return decode(value, builder_factory(), path=path)

    return convert


def sequence_of(item: Callable[[Any, str], T]) -> Callable[[Any, str], list[T]]:
    """Build a converter applying ``item`` to every element of a JSON array."""

    def convert(value: Any, path: str) -> list[T]:
        if not isinstance(value, list | tuple):
            raise DecodeError(path, f"expected array, got {type(value).__name__}")
        return [item(element, f"{path}[{index}]") for index, element in enumerate(value)]

    return convert


def decode(payload: Any, builder: Builder[T], path: str = "") -> T:
    """Populate ``builder`` from a wire object and build the entity.

    Setters run in the builder's declared table order, not in the order keys
    appear in ``payload``. A key holding ``null`` is treated as absent and the
    builder keeps its default.

    Args:
        payload: Decoded JSON object
        builder: Fresh builder instance to populate
        path: Key path of ``payload`` inside the enclosing object

    Returns:
        The entity produced by ``builder.build()``

    Raises:
        DecodeError: If ``payload`` is not an object or a value cannot be
            converted to its declared type

    Example:
        >>> from weather_client.models.weather import WeatherBuilder
        >>> weather = decode({"id": 2643743, "name": "London"}, WeatherBuilder())
        >>> weather.city_id, weather.city_name
        (2643743, 'London')
    """
    if not isinstance(payload, Mapping):
        raise DecodeError(path, f"expected object, got {type(payload).__name__}")

    for field in builder.wire_fields:
        value = payload.get(field.key)
        if value is None:
            continue

        key_path = _join(path, field.key)
        converted = field.convert(value, key_path)
        try:
            field.setter(builder, converted)
        except DecodeError as e:
            # Setters that flatten a nested object report paths relative to it
            raise DecodeError(_join(key_path, e.path), e.reason) from e

    return builder.build()
