"""Saving and loading the house state as a JSON file."""

from __future__ import annotations

import json
import os
import shutil
from pathlib import Path

from smarthome.domain import SmartHome, SmartHomeError

STATE_FILE = "smarthome_state.json"


class StorageError(SmartHomeError):
    """Raised when the state file cannot be written or read."""


def save(home: SmartHome, path: str | os.PathLike[str] = STATE_FILE) -> None:
    """Write the state atomically, keeping a ``.bak`` copy of the old file."""
    target = Path(path)
    tmp = target.with_name(target.name + ".tmp")
    payload = json.dumps(home.to_dict(), indent=2, ensure_ascii=False)

    try:
        with open(tmp, "w", encoding="utf-8") as handle:
            handle.write(payload)
            handle.flush()
            try:
                os.fsync(handle.fileno())
            except OSError:
                pass
    except OSError as exc:
        raise StorageError("Konnte tmp-State-Datei nicht schreiben") from exc

    if target.exists():
        try:
            shutil.copyfile(target, target.with_name(target.name + ".bak"))
        except OSError:
            pass

    try:
        os.replace(tmp, target)
    except OSError as exc:
        raise StorageError("Konnte State-Datei nicht atomar ersetzen") from exc


def load(path: str | os.PathLike[str] = STATE_FILE) -> SmartHome:
    """Read the state file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError("Konnte State-Datei nicht lesen") from exc
    try:
        return SmartHome.from_dict(json.loads(text))
    except (ValueError, SmartHomeError) as exc:
        raise StorageError("Konnte State-Datei nicht deserialisieren") from exc


def load_or_default(path: str | os.PathLike[str] = STATE_FILE) -> SmartHome:
    """Read the state file, or return a default house if that fails."""
    try:
        return load(path)
    except StorageError:
        return SmartHome.default()