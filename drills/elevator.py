"""Value types describing what happens in an elevator, plus small constructors."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class Direction(enum.Enum):
    """Which way a passenger wants to travel."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class LobbyCall:
    """Call button outside the car, pressed on ``floor`` to go ``direction``."""

    direction: Direction
    floor: int


@dataclass(frozen=True)
class CarFloor:
    """Destination button inside the car."""

    floor: int


Button = Union[LobbyCall, CarFloor]


@dataclass(frozen=True)
class ButtonPressed:
    """Someone pushed ``button``."""

    button: Button


@dataclass(frozen=True)
class CarArrived:
    """The car stopped at ``floor``."""

    floor: int


@dataclass(frozen=True)
class CarDoorOpened:
    """Doors finished opening."""


@dataclass(frozen=True)
class CarDoorClosed:
    """Doors finished closing."""


Event = Union[ButtonPressed, CarArrived, CarDoorOpened, CarDoorClosed]


def car_arrived(floor: int) -> CarArrived:
    """Build the event for the car reaching ``floor``."""
    return CarArrived(floor)


def car_door_opened() -> CarDoorOpened:
    """Build the event for the doors opening."""
    return CarDoorOpened()


def car_door_closed() -> CarDoorClosed:
    """Build the event for the doors closing."""
    return CarDoorClosed()


def lobby_call_button_pressed(floor: int, direction: Direction) -> ButtonPressed:
    """Build the event for a hall call on ``floor`` heading ``direction``."""
    return ButtonPressed(LobbyCall(direction, floor))


def car_floor_button_pressed(floor: int) -> ButtonPressed:
    """Build the event for a destination request to ``floor``."""
    return ButtonPressed(CarFloor(floor))