"""
Data points and their line-protocol encoding.

A ``Point`` is one measurement sample made of a measurement key, tags, typed
fields and an optional timestamp. ``BatchPoints`` groups points that are
written to the same database in a single request.

Nothing is escaped or quoted: keys, tag values and string fields are emitted
verbatim, so content containing commas, spaces or equals signs produces a line
the server will reject.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Union

from influxline.constants import (
    BOOLEAN_FALSE,
    BOOLEAN_TRUE,
    INTEGER_SUFFIX,
    LINE_SEPARATOR,
)
from influxline.log_codes import BATCH_EMPTY, POINT_NO_FIELDS

logger = logging.getLogger(__name__)

FieldValue = Union[bool, int, float, str]


class FieldType(Enum):
    BOOLEAN = "boolean"
    FLOAT = "float"
    INTEGER = "integer"
    STRING = "string"


@dataclass(frozen=True)
class Field:
    """
    A typed field value.

    Use the ``boolean``, ``float``, ``integer`` and ``string`` constructors,
    or ``from_value`` to pick the type from a Python value.
    """

    type: FieldType
    value: FieldValue

    @classmethod
    def boolean(cls, value: bool) -> Field:
        return cls(FieldType.BOOLEAN, bool(value))

    @classmethod
    def float(cls, value: float) -> Field:
        return cls(FieldType.FLOAT, float(value))

    @classmethod
    def integer(cls, value: int) -> Field:
        return cls(FieldType.INTEGER, int(value))

    @classmethod
    def string(cls, value: str) -> Field:
        return cls(FieldType.STRING, str(value))

    @classmethod
    def from_value(cls, value: FieldValue) -> Field:
        """
        Build a field from a plain Python value.

        Args:
            value (FieldValue): A bool, int, float or str.

        Returns:
            Field: The typed field.

        Raises:
            TypeError: If the value type has no field representation.
        """
        # bool is a subclass of int, check it first
        if isinstance(value, bool):
            return cls.boolean(value)
        if isinstance(value, int):
            return cls.integer(value)
        if isinstance(value, float):
            return cls.float(value)
        if isinstance(value, str):
            return cls.string(value)

        raise TypeError(f"Unsupported field value type: {type(value).__name__}")

    def encode(self) -> str:
        """
        Encode the value as line-protocol text.

        Returns:
            str: ``t``/``f`` for booleans, ``<n>i`` for integers, the default
            float representation for floats and the raw text for strings.
        """
        if self.type is FieldType.BOOLEAN:
            return BOOLEAN_TRUE if self.value else BOOLEAN_FALSE
        if self.type is FieldType.INTEGER:
            return f"{self.value}{INTEGER_SUFFIX}"

        return str(self.value)

    def __str__(self) -> str:
        return self.encode()


def _check_timestamp(timestamp: int) -> int:
    # timestamps are written verbatim as decimal integers
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise TypeError(
            f"Timestamp must be an int, got {type(timestamp).__name__}"
        )

    return timestamp


class Point:
    """
    A single measurement sample, built fluently::

        Point("cpu_usage").tag("cpu", "cpu-total").field("idle", Field.float(89.3)).time(1000)

    Tags and fields serialize in insertion order. Setting a name again
    replaces its value.
    """

    def __init__(self, key: str, timestamp: Optional[int] = None):
        self.key = key
        self.timestamp = _check_timestamp(timestamp) if timestamp is not None else None
        self.tags: Dict[str, str] = {}
        self.fields: Dict[str, Field] = {}

    def time(self, timestamp: int) -> Point:
        """
        Set the timestamp. It is written as-is, in whatever precision the
        server expects.
        """
        self.timestamp = _check_timestamp(timestamp)
        return self

    def tag(self, name: str, value: str) -> Point:
        self.tags[name] = value
        return self

    def field(self, name: str, value: Union[Field, FieldValue]) -> Point:
        if not isinstance(value, Field):
            value = Field.from_value(value)

        self.fields[name] = value
        return self

    def serialize(self) -> str:
        """
        Encode the point as one line of line protocol, without a trailing
        newline.

        A point without fields still encodes, leaving an empty field segment
        after the separating space.

        Returns:
            str: ``<key>[,<tag>=<value>...] <field>=<value>[,...][ <timestamp>]``
        """
        if not self.fields:
            logger.warning(POINT_NO_FIELDS, extra={"key": self.key})

        line = self.key

        for name, value in self.tags.items():
            line += f",{name}={value}"

        line += " "
        line += ",".join(
            f"{name}={value.encode()}" for name, value in self.fields.items()
        )

        if self.timestamp is not None:
            line += f" {self.timestamp}"

        return line

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return (
            f"Point(key={self.key!r}, timestamp={self.timestamp!r}, "
            f"tags={self.tags!r}, fields={self.fields!r})"
        )


class BatchPoints:
    """
    Points to be written to one database in a single request.
    """

    def __init__(self, database: str, points: Optional[Iterable[Point]] = None):
        self.database = database
        self.points: List[Point] = list(points) if points else []

    @classmethod
    def one(cls, database: str, point: Point) -> BatchPoints:
        return cls(database).add_point(point)

    def add_point(self, point: Point) -> BatchPoints:
        self.points.append(point)
        return self

    def add_points(self, points: Iterable[Point]) -> BatchPoints:
        self.points.extend(points)
        return self

    def serialize(self) -> str:
        """
        Encode every point and join them with newlines, without a trailing
        newline. This is the complete body of a write request.
        """
        if not self.points:
            logger.debug(BATCH_EMPTY, extra={"database": self.database})

        return LINE_SEPARATOR.join(point.serialize() for point in self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __repr__(self) -> str:
        return f"BatchPoints(database={self.database!r}, points={self.points!r})"
