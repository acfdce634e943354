"""A Pokédex that keeps entries in memory and appends them to a binary file."""

from __future__ import annotations

import argparse
import os
import struct
import sys
from collections.abc import Iterator
from typing import TextIO

from .pokemon import Pokemon, PokemonInfo

_SIZE = struct.Struct("<Q")
_INT = struct.Struct("<i")

SEPARATOR = "-----------------------"
UNKNOWN = "Pokemon desconocido!"


def _encode_text(text: str) -> bytes:
    raw = text.encode("utf-8")
    return _SIZE.pack(len(raw)) + raw


def encode_entry(pokemon: Pokemon, info: PokemonInfo) -> bytes:
    """Serialise one Pokémon and its information to bytes."""
    parts = [
        _encode_text(pokemon.name),
        _INT.pack(pokemon.experience),
        _encode_text(info.type),
        _encode_text(info.description),
        _SIZE.pack(len(info.attacks)),
    ]
    for attack, damage in info.attacks.items():
        parts.append(_encode_text(attack))
        parts.append(_INT.pack(damage))
    parts.extend(_INT.pack(level) for level in info.xp_levels)
    return b"".join(parts)


class _Reader:
    def __init__(self, data: bytes) -> None:
        self._data = memoryview(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def take(self, count: int) -> bytes:
        if count > self.remaining:
            raise ValueError("truncated pokedex entry")
        chunk = bytes(self._data[self._pos:self._pos + count])
        self._pos += count
        return chunk

    def size(self) -> int:
        return _SIZE.unpack(self.take(_SIZE.size))[0]

    def integer(self) -> int:
        return _INT.unpack(self.take(_INT.size))[0]

    def text(self) -> str:
        return self.take(self.size()).decode("utf-8")


def decode_entries(data: bytes) -> Iterator[tuple[Pokemon, PokemonInfo]]:
    """Yield every (Pokemon, PokemonInfo) pair stored in ``data``.

    Trailing bytes too short to hold a length are ignored; an entry cut
    short anywhere else raises ValueError.
    """
    reader = _Reader(data)
    while reader.remaining >= _SIZE.size:
        name = reader.text()
        experience = reader.integer()
        kind = reader.text()
        description = reader.text()
        attacks = {}
        for _ in range(reader.size()):
            attack = reader.text()
            attacks[attack] = reader.integer()
        levels = tuple(reader.integer() for _ in range(3))
        yield Pokemon(name, experience), PokemonInfo(kind, description, attacks, levels)


class Pokedex:
    """Registry of Pokémon, persisted by appending entries to a file."""

    def __init__(self, path: str | os.PathLike | None = None, out: TextIO | None = None) -> None:
        self.path = path
        self._out = out
        self._entries: dict[Pokemon, PokemonInfo] = {}
        if path is None:
            return
        try:
            with open(path, "rb") as handle:
                data = handle.read()
        except FileNotFoundError:
            return
        for pokemon, info in decode_entries(data):
            self._entries[pokemon] = info

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pokemon: object) -> bool:
        return pokemon in self._entries

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self._entries)

    def __getitem__(self, pokemon: Pokemon) -> PokemonInfo:
        return self._entries[pokemon]

    def add(self, pokemon: Pokemon, info: PokemonInfo) -> bool:
        """Register a Pokémon and append it to the file; False if already known."""
        if pokemon in self._entries:
            print(f'El Pokemon "{pokemon.name}" ya esta registrado en la Pokedex.', file=self.out)
            return False
        self._entries[pokemon] = info
        if self.path is not None:
            with open(self.path, "ab") as handle:
                handle.write(encode_entry(pokemon, info))
        return True

    def describe(self, pokemon: Pokemon) -> str:
        """Text describing a registered Pokémon; KeyError if it is unknown."""
        info = self._entries[pokemon]
        lines = [
            f"Pokemon: {pokemon.name}",
            f"Experiencia: {pokemon.experience}",
            f"Tipo: {info.type}",
            f"Descripcion: {info.description}",
            "Ataques disponibles:",
        ]
        lines.extend(f" - {attack}: {damage} dano" for attack, damage in info.attacks.items())
        levels = "".join(f"{level} " for level in info.xp_levels)
        lines.append(f"Experiencia para proximos niveles: {levels}")
        return "\n".join(lines) + "\n"

    def show(self, pokemon: Pokemon) -> None:
        """Print a Pokémon's description, or a notice if it is unknown."""
        try:
            text = self.describe(pokemon)
        except KeyError:
            print(UNKNOWN, file=self.out)
            return
        self.out.write(text)

    def show_all(self) -> None:
        """Print every registered Pokémon followed by a separator line."""
        for pokemon in self._entries:
            self.show(pokemon)
            print(SEPARATOR, file=self.out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Register a few Pokémon and show them.")
    parser.add_argument("path", nargs="?", default="pokedex.bin", help="file holding the Pokédex")
    args = parser.parse_args(argv)

    pokedex = Pokedex(args.path)
    pokedex.add(
        Pokemon("Squirtle", 100),
        PokemonInfo(
            "Agua",
            "Una tortuga pequena que lanza chorros de agua.",
            {"Pistola Agua": 4, "Hidrobomba": 6, "Danza Lluvia": 5},
            (0, 400, 1000),
        ),
    )
    pokedex.add(
        Pokemon("Bulbasaur", 270),
        PokemonInfo(
            "Planta",
            "Tiene una semilla en su lomo que crece con el tiempo",
            {"Latigazo": 4, "Hoja Afilada": 6, "Rayo Solar": 5},
            (0, 300, 1100),
        ),
    )
    pokedex.add(
        Pokemon("Charmander", 633),
        PokemonInfo(
            "Fuego",
            "Una lagartija con una llama en su cola",
            {"Ascuas": 4, "Lanzallamas": 6, "Giro Fuego": 5},
            (0, 250, 1300),
        ),
    )

    print("\nMostrar todos los Pokemons:")
    pokedex.show_all()

    print("\nMostrar Squirtle (experiencia distinta):")
    pokedex.show(Pokemon("Squirtle", 870))

    print("\nMostrar Pikachu (no registrado):")
    pokedex.show(Pokemon("Pikachu", 390))
    return 0


if __name__ == "__main__":
    sys.exit(main())