"""Rooms, commands and the state of the smart home."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union


class SmartHomeError(Exception):
    """Raised for invalid user input or malformed stored state."""


class Room(Enum):
    """A room of the house; the value is its name in stored state."""

    LIVING_ROOM = "LivingRoom"
    BED_ROOM = "BedRoom"
    KITCHEN = "Kitchen"
    BATH = "Bath"

    @property
    def label(self) -> str:
        """The name shown to the user."""
        return _ROOM_LABELS[self]

    def __str__(self) -> str:
        return self.label

    @classmethod
    def parse(cls, text: str) -> Room:
        """Parse a room name or one of its synonyms, ignoring case."""
        key = text.strip().lower()
        try:
            return _ROOM_ALIASES[key]
        except KeyError:
            raise SmartHomeError(f"Unbekannter Raum: {key}") from None


_ROOM_LABELS = {
    Room.LIVING_ROOM: "Wohnzimmer",
    Room.BED_ROOM: "Schlafzimmer",
    Room.KITCHEN: "Küche",
    Room.BATH: "Bad",
}

_ROOM_ALIASES = {
    "living": Room.LIVING_ROOM,
    "livingroom": Room.LIVING_ROOM,
    "wohnzimmer": Room.LIVING_ROOM,
    "bedroom": Room.BED_ROOM,
    "schlafzimmer": Room.BED_ROOM,
    "bed": Room.BED_ROOM,
    "kitchen": Room.KITCHEN,
    "küche": Room.KITCHEN,
    "kueche": Room.KITCHEN,
    "bath": Room.BATH,
    "bad": Room.BATH,
    "bathroom": Room.BATH,
}


@dataclass(frozen=True)
class RoomSelection:
    """A single room, or every room when ``room`` is None."""

    room: Room | None = None

    ALL: ClassVar[RoomSelection]

    @classmethod
    def parse(cls, text: str) -> RoomSelection:
        """Parse a room name, or ``all``/``alle`` for every room."""
        key = text.strip().lower()
        if key in ("all", "alle"):
            return cls()
        return cls(Room.parse(key))

    @property
    def is_all(self) -> bool:
        return self.room is None

    def rooms(self) -> tuple[Room, ...]:
        """The rooms covered by this selection, in house order."""
        if self.room is None:
            return tuple(Room)
        return (self.room,)


RoomSelection.ALL = RoomSelection()


class OnOff(Enum):
    """A switch state."""

    ON = "On"
    OFF = "Off"

    @classmethod
    def parse(cls, text: str) -> OnOff:
        """Parse ``on``/``an`` or ``off``/``aus``, ignoring case."""
        key = text.strip().lower()
        if key in ("on", "an"):
            return cls.ON
        if key in ("off", "aus"):
            return cls.OFF
        raise SmartHomeError(f"Ungültiger Zustand: {key}. Erlaubt: on/off")


def _single_precision(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


@dataclass(frozen=True)
class Temperature:
    """A target temperature in degrees Celsius."""

    value: float

    MIN: ClassVar[float] = 5.0
    MAX: ClassVar[float] = 35.0

    @classmethod
    def checked(cls, value: float) -> Temperature:
        """Build a temperature, raising if it lies outside 5.0 to 35.0 °C."""
        try:
            stored = _single_precision(float(value))
        except OverflowError:
            stored = float("inf") if value > 0 else float("-inf")
        if not cls.MIN <= stored <= cls.MAX:
            raise SmartHomeError("Ungültige Temperatur. Erlaubt: 5.0°C bis 35.0°C")
        return cls(stored)


class Scene(Enum):
    """A preset that switches several systems at once."""

    NIGHT = "Night"
    AWAY = "Away"
    MORNING = "Morning"

    @classmethod
    def parse(cls, text: str) -> Scene:
        """Parse a scene name in English or German, ignoring case."""
        key = text.strip().lower()
        if key in ("night", "nacht"):
            return cls.NIGHT
        if key in ("away", "abwesend"):
            return cls.AWAY
        if key in ("morning", "morgen"):
            return cls.MORNING
        raise SmartHomeError("Unbekannte Szene. Erlaubt: night | away | morning")


@dataclass(frozen=True)
class HeatingSet:
    """Switch heating on and set its target in the selected rooms."""

    selection: RoomSelection
    target: Temperature


@dataclass(frozen=True)
class HeatingEnabled:
    """Switch heating on or off in the selected rooms."""

    selection: RoomSelection
    enabled: bool


@dataclass(frozen=True)
class LightsSet:
    """Switch the lights in the selected rooms."""

    selection: RoomSelection
    state: OnOff


@dataclass(frozen=True)
class LightsToggle:
    """Flip the lights in the selected rooms."""

    selection: RoomSelection


@dataclass(frozen=True)
class SecurityLock:
    """Lock the whole house."""


@dataclass(frozen=True)
class SecurityUnlock:
    """Unlock the whole house."""


@dataclass(frozen=True)
class ApplyScene:
    """Activate a scene."""

    scene: Scene


Command = Union[
    HeatingSet,
    HeatingEnabled,
    LightsSet,
    LightsToggle,
    SecurityLock,
    SecurityUnlock,
    ApplyScene,
]


@dataclass
class HeatingState:
    """Heating of one room."""

    enabled: bool = False
    target: Temperature = field(default_factory=lambda: Temperature(20.0))


@dataclass
class LightState:
    """Light of one room."""

    on: bool = False


@dataclass
class SmartHome:
    """Heating and light per room, and the lock state of the house."""

    heating: dict[Room, HeatingState] = field(default_factory=dict)
    lighting: dict[Room, LightState] = field(default_factory=dict)
    locked: bool = False

    @classmethod
    def default(cls) -> SmartHome:
        """A house with every room at its default state, unlocked."""
        return cls(
            heating={room: HeatingState() for room in Room},
            lighting={room: LightState() for room in Room},
            locked=False,
        )

    def _set_heating_target(self, selection: RoomSelection, target: Temperature) -> None:
        for room in selection.rooms():
            state = self.heating.get(room)
            if state is not None:
                state.enabled = True
                state.target = target

    def _set_heating_enabled(self, selection: RoomSelection, enabled: bool) -> None:
        for room in selection.rooms():
            state = self.heating.get(room)
            if state is not None:
                state.enabled = enabled

    def _set_lights(self, selection: RoomSelection, state: OnOff) -> None:
        for room in selection.rooms():
            light = self.lighting.get(room)
            if light is not None:
                light.on = state is OnOff.ON

    def _toggle_lights(self, selection: RoomSelection) -> None:
        for room in selection.rooms():
            light = self.lighting.get(room)
            if light is not None:
                light.on = not light.on

    def apply(self, command: Command) -> bool:
        """Carry out a command; returns whether the state may have changed."""
        match command:
            case HeatingSet(selection=selection, target=target):
                self._set_heating_target(selection, target)
            case HeatingEnabled(selection=selection, enabled=enabled):
                self._set_heating_enabled(selection, enabled)
            case LightsSet(selection=selection, state=state):
                self._set_lights(selection, state)
            case LightsToggle(selection=selection):
                self._toggle_lights(selection)
            case SecurityLock():
                self.locked = True
            case SecurityUnlock():
                self.locked = False
            case ApplyScene(scene=Scene.NIGHT):
                self._set_lights(RoomSelection.ALL, OnOff.OFF)
                self._set_heating_enabled(RoomSelection.ALL, True)
                self.locked = True
            case ApplyScene(scene=Scene.AWAY):
                self._set_lights(RoomSelection.ALL, OnOff.OFF)
                self._set_heating_enabled(RoomSelection.ALL, False)
                self.locked = True
            case ApplyScene(scene=Scene.MORNING):
                self._set_lights(RoomSelection.ALL, OnOff.ON)
                self._set_heating_enabled(RoomSelection.ALL, True)
                self.locked = False
            case _:
                raise TypeError(f"not a command: {command!r}")
        return True

    def render_status(self) -> str:
        """A multi-line report of the whole house."""
        lines = ["=== SmartHome Status ==="]
        if self.locked:
            lines.append("Sicherheit: Haus ist VERRIEGELT")
        else:
            lines.append("Sicherheit: Haus ist ENTRIEGELT")
        lines.append("---")
        for room in Room:
            heating = self.heating.get(room)
            if heating is not None:
                on_off = "AN" if heating.enabled else "AUS"
                lines.append(
                    f"Heizung {room}: {on_off} (Ziel: {heating.target.value:.1f}°C)"
                )
        lines.append("---")
        for room in Room:
            light = self.lighting.get(room)
            if light is not None:
                lines.append(f"Licht {room}: {'AN' if light.on else 'AUS'}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """The state as plain JSON-ready data."""
        return {
            "heating": {
                "per_room": {
                    room.value: {"enabled": state.enabled, "target": state.target.value}
                    for room, state in self.heating.items()
                }
            },
            "lighting": {
                "per_room": {
                    room.value: {"on": state.on} for room, state in self.lighting.items()
                }
            },
            "security": {"locked": self.locked},
        }

    @classmethod
    def from_dict(cls, data: Any) -> SmartHome:
        """Rebuild a house from data made by :meth:`to_dict`."""
        try:
            heating = {
                Room(name): HeatingState(
                    enabled=_as_bool(entry["enabled"]),
                    target=Temperature(_as_number(entry["target"])),
                )
                for name, entry in data["heating"]["per_room"].items()
            }
            lighting = {
                Room(name): LightState(on=_as_bool(entry["on"]))
                for name, entry in data["lighting"]["per_room"].items()
            }
            locked = _as_bool(data["security"]["locked"])
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise SmartHomeError(f"Ungültiger State: {exc}") from exc
        return cls(heating=heating, lighting=lighting, locked=locked)


def _as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean, got {value!r}")
    return value


def _as_number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected a number, got {value!r}")
    return float(value)