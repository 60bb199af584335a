"""Interactive command line for controlling the smart home."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from smarthome.domain import (
    ApplyScene,
    Command,
    HeatingEnabled,
    HeatingSet,
    LightsSet,
    LightsToggle,
    OnOff,
    RoomSelection,
    Scene,
    SecurityLock,
    SecurityUnlock,
    SmartHome,
    SmartHomeError,
    Temperature,
)
from smarthome.storage import STATE_FILE, StorageError, load_or_default, save

PROMPT = "smarthome> "

_HELP_LINES = (
    "",
    "=== SmartHome Commands ===",
    "status",
    "  Zeigt den aktuellen Gesamtstatus\n",
    "heating set <room|all> <temp>",
    "  Beispiel: heating set kitchen 22.5",
    "heating on <room|all>",
    "  Beispiel: heating on all",
    "heating off <room|all>",
    "  Beispiel: heating off bedroom\n",
    "lights set <room|all> <on|off>",
    "  Beispiel: lights set living on",
    "lights toggle <room|all>",
    "  Beispiel: lights toggle bath\n",
    "security lock",
    "security unlock\n",
    "scene <night|away|morning>",
    "  Beispiel: scene night",
    "  night: Licht AUS, Heizung AN, Security LOCK",
    "  away:  Licht AUS, Heizung AUS, Security LOCK",
    "  morning: Licht AN, Heizung AN, Security UNLOCK\n",
    "help",
    "  Zeigt diese Hilfe",
    "exit | quit",
    "  Beendet die Anwendung\n",
    "Räume: living, bedroom, kitchen, bath, all",
    "Synonyme funktionieren ebenfalls: wohnzimmer, schlafzimmer, küche/kueche, bad, alle\n",
)


@dataclass(frozen=True)
class Outcome:
    """Result of handling one input line."""

    exit: bool = False
    changed: bool = False
    output: str = ""


def help_text() -> str:
    """The list of available commands."""
    return "\n".join(_HELP_LINES)


def welcome_text() -> str:
    """The greeting shown at start-up, followed by the help."""
    return "\n".join(
        (
            "SmartHome Controller gestartet.",
            "Einmal starten, danach mehrere Commands nacheinander ausführen.",
            help_text(),
        )
    )


def _parse_temperature(text: str) -> Temperature:
    try:
        if "_" in text:
            raise ValueError(text)
        value = float(text)
    except ValueError:
        raise SmartHomeError("Temperatur ist keine gültige Zahl") from None
    return Temperature.checked(value)


def _parse_heating(parts: list[str]) -> Command:
    usage = "Ungültige Eingabe. Beispiel: heating set kitchen 22"
    if len(parts) < 3:
        raise SmartHomeError(usage)
    action = parts[1].lower()
    if action == "set":
        if len(parts) != 4:
            raise SmartHomeError(usage)
        selection = RoomSelection.parse(parts[2])
        return HeatingSet(selection, _parse_temperature(parts[3]))
    if action in ("on", "off"):
        if len(parts) != 3:
            example = "heating on all" if action == "on" else "heating off bedroom"
            raise SmartHomeError(f"Ungültige Eingabe. Beispiel: {example}")
        return HeatingEnabled(RoomSelection.parse(parts[2]), action == "on")
    raise SmartHomeError("Unbekannter heating-Befehl. Nutze: set/on/off")


def _parse_lights(parts: list[str]) -> Command:
    if len(parts) < 3:
        raise SmartHomeError(
            "Ungültige Eingabe. Beispiele: lights set living on | lights toggle all"
        )
    action = parts[1].lower()
    if action == "set":
        if len(parts) != 4:
            raise SmartHomeError("Ungültige Eingabe. Beispiel: lights set living on")
        selection = RoomSelection.parse(parts[2])
        return LightsSet(selection, OnOff.parse(parts[3]))
    if action == "toggle":
        if len(parts) != 3:
            raise SmartHomeError("Ungültige Eingabe. Beispiel: lights toggle bath")
        return LightsToggle(RoomSelection.parse(parts[2]))
    raise SmartHomeError("Unbekannter lights-Befehl. Nutze: set/toggle")


def _parse_security(parts: list[str]) -> Command:
    if len(parts) != 2:
        raise SmartHomeError(
            "Ungültige Eingabe. Beispiel: security lock | security unlock"
        )
    action = parts[1].lower()
    if action == "lock":
        return SecurityLock()
    if action == "unlock":
        return SecurityUnlock()
    raise SmartHomeError("Unbekannter security-Befehl. Nutze: lock/unlock")


def _parse_scene(parts: list[str]) -> Command:
    if len(parts) != 2:
        raise SmartHomeError("Ungültige Eingabe. Beispiel: scene night")
    return ApplyScene(Scene.parse(parts[1]))


_PARSERS = {
    "heating": _parse_heating,
    "lights": _parse_lights,
    "security": _parse_security,
    "scene": _parse_scene,
}


def parse_command(text: str) -> Command:
    """Turn one line of user input into a command."""
    parts = text.split()
    if not parts:
        raise SmartHomeError("Leerer Command")
    parser = _PARSERS.get(parts[0].lower())
    if parser is None:
        raise SmartHomeError(
            "Unbekannter Command. Nutze 'help' für alle verfügbaren Befehle."
        )
    return parser(parts)


def handle_line(home: SmartHome, line: str) -> Outcome:
    """Handle one input line against the house; raises on invalid input."""
    trimmed = line.strip()
    if not trimmed:
        return Outcome()
    keyword = trimmed.lower()
    if keyword in ("exit", "quit"):
        return Outcome(exit=True)
    if keyword == "help":
        return Outcome(output=help_text())
    if keyword == "status":
        return Outcome(output=home.render_status())
    command = parse_command(trimmed)
    changed = home.apply(command)
    return Outcome(changed=changed, output=home.render_status())


def run(
    home: SmartHome,
    lines: Iterable[str] | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
    path: str | os.PathLike[str] = STATE_FILE,
) -> None:
    """Run the session until exit or end of input, saving the state as it changes."""
    lines = sys.stdin if lines is None else lines
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    print(welcome_text(), file=out)
    print(home.render_status(), file=out)

    source = iter(lines)
    while True:
        out.write(PROMPT)
        out.flush()
        line = next(source, None)
        if line is None:
            outcome = Outcome(exit=True)
        else:
            try:
                outcome = handle_line(home, line)
            except SmartHomeError as exc:
                print(f"Fehler: {exc}", file=err)
                continue
        if outcome.output:
            print(outcome.output, file=out)
        if outcome.exit:
            save(home, path)
            print("SmartHome Controller beendet.", file=out)
            return
        if outcome.changed:
            save(home, path)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive controller with the state file in the working directory."""
    parser = argparse.ArgumentParser(
        prog="smarthome", description="SmartHome controller."
    )
    parser.parse_args(argv)
    home = load_or_default()
    try:
        run(home)
    except StorageError as exc:
        cause = f": {exc.__cause__}" if exc.__cause__ else ""
        print(f"Error: {exc}{cause}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())