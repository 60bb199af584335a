# smarthome

A small interactive controller for a home with four rooms: living room,
bedroom, kitchen and bath. It keeps per-room heating (on/off and a target
temperature) and lighting (on/off), and a house-wide security lock. State is
kept in `smarthome_state.json` in the current directory and survives restarts.

## Installation

```
pip install .
```

## Usage

Start the controller:

```
smarthome
```

It prints a welcome text, the help and the current status, then reads one
command per line at the `smarthome>` prompt. Messages are in German. After
every command that is carried out, the full status is printed. Invalid input
prints `Fehler: ...` to standard error and the session goes on.

| Command | Effect |
|---|---|
| `status` | Show the full status |
| `heating set <room\|all> <temp>` | Set the target temperature (5.0–35.0 °C) and switch heating on |
| `heating on <room\|all>` | Switch heating on |
| `heating off <room\|all>` | Switch heating off |
| `lights set <room\|all> <on\|off>` | Switch lights (`an`/`aus` also accepted) |
| `lights toggle <room\|all>` | Toggle lights |
| `security lock` / `security unlock` | Lock or unlock the house |
| `scene <night\|away\|morning>` | Apply a scene (`nacht`, `abwesend`, `morgen` also accepted) |
| `help` | Show the help |
| `exit` / `quit` | Save and quit |

Commands and keywords are case-insensitive.

Rooms: `living`, `bedroom`, `kitchen`, `bath`, `all`. Other names work too:
`livingroom`, `wohnzimmer`, `bed`, `schlafzimmer`, `küche`/`kueche`,
`bathroom`, `bad`, `alle`.

Scenes:

- `night`: lights off, heating on, house locked
- `away`: lights off, heating off, house locked
- `morning`: lights on, heating on, house unlocked

A new house starts with all heating off at a target of 20.0 °C, all lights
off and the house unlocked.

The state is saved after each command that is carried out, and again on
`exit`, `quit` or end of input. Saving writes a temporary file and replaces
the state file with it; the previous state file is kept as
`smarthome_state.json.bak`. If the state file is missing or unreadable at
start-up, a new house is used.

## Library use

```python
from smarthome.domain import SmartHome, ApplyScene, Scene
from smarthome.cli import parse_command, handle_line
from smarthome import storage

home = storage.load_or_default("smarthome_state.json")
home.apply(parse_command("heating set kitchen 22.5"))
home.apply(ApplyScene(Scene.NIGHT))
print(home.render_status())
storage.save(home, "smarthome_state.json")

outcome = handle_line(home, "lights toggle bath")
print(outcome.changed, outcome.exit)
print(outcome.output)
```

`smarthome.cli.run(home, lines, out, err, path)` runs a whole session over
any iterable of lines and any text streams, saving to `path`.

`SmartHome.to_dict()` and `SmartHome.from_dict()` convert the state to and
from plain JSON-ready data, as stored in the state file.

Invalid input raises `smarthome.domain.SmartHomeError`; failures while
reading or writing state raise `smarthome.storage.StorageError` (a subclass
of it).

## What it does not do

The package only keeps and reports the state of the house. It does not talk
to any real heating, lighting or lock devices.