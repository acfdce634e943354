# tp2

This package holds three small simulations:

- **Pokédex** (`tp2.pokemon`, `tp2.pokedex`): keeps Pokémon and their details
  in memory. The details are type, description, attacks with their damage, and
  three experience thresholds. When a file path is given, each new entry is also
  appended to that binary file, and the file is read back when the Pokédex is
  opened. A Pokémon is identified by its name alone, so experience does not
  affect lookups.
- **Drones** (`tp2.drones`): drones sit in a ring. Each drone must hold the zone
  on its left and the zone on its right before it can take off. Every drone
  takes its zones in the same global order, so the drones cannot deadlock.
- **Robots** (`tp2.robots`): sensors put tasks on a shared queue and robots take
  them off. Each robot stops when every sensor has finished and the queue is
  empty.

All messages the simulations print are in Spanish.

## Installation

```
pip install .
```

The package uses only the standard library and needs Python 3.10 or newer.

## Command line

```
tp2-pokedex [PATH]
```

Registers Squirtle, Bulbasaur and Charmander in `PATH` (default `pokedex.bin`)
and shows every entry. It then shows Squirtle looked up with a different
experience value, and tries an unregistered Pikachu. If an entry is already in
the file, a notice is printed instead of a second copy being added.

```
tp2-drones [--count N] [--seconds S]
```

Flies `N` drones (default 5). Each take-off lasts `S` seconds (default 5).

```
tp2-robots [--sensors N] [--robots N] [--tasks N] [--sensor-delay S] [--robot-delay S]
```

Runs the sensors and robots. The defaults are 3 sensors, 3 robots and 5 tasks
per sensor. Each sensor pauses 0.175 s after every task it produces, and each
robot pauses 0.25 s after every task it takes.

## Library use

```python
from tp2.pokemon import Pokemon, PokemonInfo
from tp2.pokedex import Pokedex

dex = Pokedex("pokedex.bin")          # Pokedex() keeps entries in memory only
dex.add(
    Pokemon("Squirtle", 100),
    PokemonInfo("Agua", "Una tortuga pequena que lanza chorros de agua.",
                {"Pistola Agua": 4, "Hidrobomba": 6, "Danza Lluvia": 5},
                (0, 400, 1000)),
)                                      # True; False (with a notice) if already known
dex.show(Pokemon("Squirtle", 870))
dex.show_all()
```

- `Pokedex.describe(pokemon)` returns the text that `show` prints. It raises
  `KeyError` if the Pokémon is unknown.
- `Pokedex` supports `len()`, `in`, iteration and indexing by `Pokemon`.
- `Pokedex` and the simulations take an optional `out` text stream, which
  defaults to standard output.
- `encode_entry(pokemon, info)` and `decode_entries(data)` convert to and from
  the file format. `decode_entries` raises `ValueError` if an entry is cut
  short.
- `PokemonInfo` raises `ValueError` unless it is given exactly three experience
  levels.

The drone and robot simulations can also be started from code:

```python
from tp2.drones import run_drones
from tp2.robots import Dispatcher

drones = run_drones(5, 0.1)
taken = Dispatcher(sensors=3, tasks_per_sensor=5,
                   sensor_delay=0.01, robot_delay=0.01).run(3)
```

`Dispatcher.run` returns the `(robot id, Task)` pairs in the order the robots
took the tasks.

## Limitations

Entries can only be added to the Pokédex. They cannot be updated or removed,
and the file is only ever appended to.

## Tests

```
pip install .[test]
pytest
```