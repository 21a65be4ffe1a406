"""A small decoder for the protobuf wire format, with two example message types."""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar, Union

_MAX_VARINT_BYTES = 7


class DecodeError(ValueError):
    """Raised when bytes cannot be decoded as a message."""


class WireType(enum.IntEnum):
    """A wire type as seen on the wire."""

    VARINT = 0
    """The value is a single varint."""
    LEN = 2
    """The value is a varint length followed by exactly that many bytes."""


@dataclass(frozen=True)
class Field:
    """A field: its number and its value, typed by the wire type.

    A varint field holds an int, a length-delimited field holds bytes.
    """

    field_num: int
    value: Union[int, bytes]

    def as_str(self) -> str:
        """Return the value of a length-delimited field as UTF-8 text."""
        if not isinstance(self.value, bytes):
            raise DecodeError("Expected string to be a `Len` field")
        try:
            return self.value.decode("utf-8")
        except UnicodeDecodeError as err:
            raise DecodeError("Invalid string") from err

    def as_bytes(self) -> bytes:
        """Return the value of a length-delimited field."""
        if not isinstance(self.value, bytes):
            raise DecodeError("Expected bytes to be a `Len` field")
        return self.value

    def as_u64(self) -> int:
        """Return the value of a varint field."""
        if not isinstance(self.value, int):
            raise DecodeError("Expected `u64` to be a `Varint` field")
        return self.value


class ProtoMessage(Protocol):
    """A message that is filled in one field at a time."""

    def add_field(self, field: Field) -> None: ...


M = TypeVar("M", bound=ProtoMessage)


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a varint, returning its value and the remaining bytes."""
    data = bytes(data)
    for index, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        if not byte & 0x80:
            value = sum(
                (part & 0x7F) << (7 * shift)
                for shift, part in enumerate(data[: index + 1])
            )
            return value, data[index + 1 :]
    if len(data) < _MAX_VARINT_BYTES:
        raise DecodeError("Not enough bytes for varint")
    raise DecodeError("Too many bytes for varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into a field number and a wire type."""
    raw_type = tag & 0x7
    try:
        wire_type = WireType(raw_type)
    except ValueError:
        raise DecodeError(f"Invalid wire type: {raw_type}") from None
    return tag >> 3, wire_type


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        value, remainder = parse_varint(remainder)
        return Field(field_num, value), remainder
    length, remainder = parse_varint(remainder)
    if len(remainder) < length:
        raise DecodeError("Unexpected EOF")
    return Field(field_num, remainder[:length]), remainder[length:]


def parse_message(data: bytes, message_type: Callable[[], M]) -> M:
    """Parse all of the data as one message of the given type."""
    data = bytes(data)
    message = message_type()
    while data:
        parsed, data = parse_field(data)
        message.add_field(parsed)
    return message


@dataclass
class PhoneNumber:
    """A phone number and its kind, such as "home"."""

    number: str = ""
    kind: str = ""

    def add_field(self, field: Field) -> None:
        """Store a decoded field; unknown fields are skipped."""
        if field.field_num == 1:
            self.number = field.as_str()
        elif field.field_num == 2:
            self.kind = field.as_str()


@dataclass
class Person:
    """A person with a name, an id and phone numbers."""

    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Store a decoded field; unknown fields are skipped."""
        if field.field_num == 1:
            self.name = field.as_str()
        elif field.field_num == 2:
            self.id = field.as_u64()
        elif field.field_num == 3:
            self.phone.append(parse_message(field.as_bytes(), PhoneNumber))