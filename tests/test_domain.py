import pytest

from smarthome.domain import (
    ApplyScene,
    HeatingEnabled,
    HeatingSet,
    LightsSet,
    LightsToggle,
    OnOff,
    Room,
    RoomSelection,
    Scene,
    SecurityLock,
    SecurityUnlock,
    SmartHome,
    SmartHomeError,
    Temperature,
)


def test_temperature_validation():
    with pytest.raises(SmartHomeError):
        Temperature.checked(4.0)
    assert Temperature.checked(20.0).value == 20.0
    assert Temperature.checked(35.0).value == 35.0
    with pytest.raises(SmartHomeError):
        Temperature.checked(40.0)


def test_temperature_rejects_nan_and_infinity():
    with pytest.raises(SmartHomeError):
        Temperature.checked(float("nan"))
    with pytest.raises(SmartHomeError):
        Temperature.checked(float("inf"))


def test_temperature_lower_bound_inclusive():
    assert Temperature.checked(5.0).value == 5.0


def test_scene_away_sets_expected_state():
    home = SmartHome.default()
    assert home.apply(ApplyScene(Scene.AWAY)) is True
    assert home.locked
    assert all(not home.lighting[room].on for room in Room)
    assert all(not home.heating[room].enabled for room in Room)


def test_lights_toggle_changes_state():
    home = SmartHome.default()
    home.apply(LightsToggle(RoomSelection(Room.KITCHEN)))
    assert home.lighting[Room.KITCHEN].on
    assert not home.lighting[Room.BATH].on


def test_toggle_twice_restores():
    home = SmartHome.default()
    home.apply(LightsToggle(RoomSelection.ALL))
    assert all(home.lighting[room].on for room in Room)
    home.apply(LightsToggle(RoomSelection.ALL))
    assert all(not home.lighting[room].on for room in Room)


def test_scene_night_and_morning():
    home = SmartHome.default()
    home.apply(LightsSet(RoomSelection.ALL, OnOff.ON))
    home.apply(ApplyScene(Scene.NIGHT))
    assert home.locked
    assert all(not home.lighting[room].on for room in Room)
    assert all(home.heating[room].enabled for room in Room)
    home.apply(ApplyScene(Scene.MORNING))
    assert not home.locked
    assert all(home.lighting[room].on for room in Room)
    assert all(home.heating[room].enabled for room in Room)


def test_heating_set_enables_and_sets_target():
    home = SmartHome.default()
    home.apply(HeatingSet(RoomSelection(Room.KITCHEN), Temperature.checked(22.5)))
    assert home.heating[Room.KITCHEN].enabled
    assert home.heating[Room.KITCHEN].target.value == 22.5
    assert not home.heating[Room.BATH].enabled
    assert home.heating[Room.BATH].target.value == 20.0


def test_heating_enabled_off():
    home = SmartHome.default()
    home.apply(HeatingEnabled(RoomSelection.ALL, True))
    home.apply(HeatingEnabled(RoomSelection(Room.BED_ROOM), False))
    assert not home.heating[Room.BED_ROOM].enabled
    assert home.heating[Room.LIVING_ROOM].enabled


def test_security_lock_unlock():
    home = SmartHome.default()
    home.apply(SecurityLock())
    assert home.locked
    home.apply(SecurityUnlock())
    assert not home.locked


@pytest.mark.parametrize(
    "text, room",
    [
        ("living", Room.LIVING_ROOM),
        ("Wohnzimmer", Room.LIVING_ROOM),
        ("bed", Room.BED_ROOM),
        ("  SCHLAFZIMMER ", Room.BED_ROOM),
        ("küche", Room.KITCHEN),
        ("KÜCHE", Room.KITCHEN),
        ("kueche", Room.KITCHEN),
        ("bathroom", Room.BATH),
        ("bad", Room.BATH),
    ],
)
def test_room_parse(text, room):
    assert Room.parse(text) is room


def test_room_parse_unknown():
    with pytest.raises(SmartHomeError, match="Unbekannter Raum: garage"):
        Room.parse("Garage")


def test_room_labels():
    labels = [str(Room.parse(name)) for name in ("living", "bedroom", "kitchen", "bath")]
    assert labels == ["Wohnzimmer", "Schlafzimmer", "Küche", "Bad"]


def test_room_selection_parse():
    assert RoomSelection.parse("ALLE").rooms() == tuple(Room)
    assert RoomSelection.parse("all").is_all
    assert RoomSelection.parse("bath").rooms() == (Room.BATH,)
    with pytest.raises(SmartHomeError):
        RoomSelection.parse("attic")


def test_on_off_parse():
    assert OnOff.parse("AN") is OnOff.ON
    assert OnOff.parse("on") is OnOff.ON
    assert OnOff.parse("aus") is OnOff.OFF
    assert OnOff.parse(" Off ") is OnOff.OFF
    with pytest.raises(SmartHomeError, match="Ungültiger Zustand: dim"):
        OnOff.parse("dim")


def test_scene_parse():
    assert Scene.parse("Nacht") is Scene.NIGHT
    assert Scene.parse("away") is Scene.AWAY
    assert Scene.parse("abwesend") is Scene.AWAY
    assert Scene.parse("morgen") is Scene.MORNING
    with pytest.raises(SmartHomeError):
        Scene.parse("party")


def test_render_status_default():
    lines = SmartHome.default().render_status().splitlines()
    assert lines[0] == "=== SmartHome Status ==="
    assert lines[1] == "Sicherheit: Haus ist ENTRIEGELT"
    assert lines[2] == "---"
    assert lines[3] == "Heizung Wohnzimmer: AUS (Ziel: 20.0°C)"
    assert lines[6] == "Heizung Bad: AUS (Ziel: 20.0°C)"
    assert lines[7] == "---"
    assert lines[8] == "Licht Wohnzimmer: AUS"
    assert lines[11] == "Licht Bad: AUS"
    assert len(lines) == 12


def test_render_status_after_changes():
    home = SmartHome.default()
    home.apply(HeatingSet(RoomSelection(Room.KITCHEN), Temperature.checked(22.5)))
    home.apply(LightsSet(RoomSelection(Room.LIVING_ROOM), OnOff.ON))
    home.apply(SecurityLock())
    status = home.render_status()
    assert "Sicherheit: Haus ist VERRIEGELT" in status
    assert "Heizung Küche: AN (Ziel: 22.5°C)" in status
    assert "Licht Wohnzimmer: AN" in status


def test_missing_rooms_are_skipped():
    home = SmartHome.default()
    del home.lighting[Room.BATH]
    home.apply(LightsToggle(RoomSelection.ALL))
    assert Room.BATH not in home.lighting
    assert "Licht Bad" not in home.render_status()


def test_dict_round_trip():
    home = SmartHome.default()
    home.apply(HeatingSet(RoomSelection(Room.BATH), Temperature.checked(24.0)))
    home.apply(LightsToggle(RoomSelection(Room.KITCHEN)))
    home.apply(SecurityLock())
    restored = SmartHome.from_dict(home.to_dict())
    assert restored == home


def test_to_dict_shape():
    data = SmartHome.default().to_dict()
    assert data["security"] == {"locked": False}
    assert data["heating"]["per_room"]["LivingRoom"] == {"enabled": False, "target": 20.0}
    assert data["lighting"]["per_room"]["Bath"] == {"on": False}


@pytest.mark.parametrize(
    "data",
    [
        {},
        [],
        {"heating": {"per_room": {}}, "lighting": {"per_room": {}}},
        {
            "heating": {"per_room": {"Garage": {"enabled": True, "target": 20.0}}},
            "lighting": {"per_room": {}},
            "security": {"locked": False},
        },
        {
            "heating": {"per_room": {}},
            "lighting": {"per_room": {"Bath": {"on": "yes"}}},
            "security": {"locked": False},
        },
    ],
)
def test_from_dict_rejects_malformed(data):
    with pytest.raises(SmartHomeError):
        SmartHome.from_dict(data)