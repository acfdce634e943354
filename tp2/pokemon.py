"""Pokémon identity and the catalogue information attached to each one."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Pokemon:
    """A Pokémon known by its name; experience does not take part in identity."""

    name: str
    experience: int = field(default=0, compare=False)

    def __hash__(self) -> int:
        return hash(self.name)


@dataclass(frozen=True)
class PokemonInfo:
    """Type, description, attacks with their damage, and three experience thresholds."""

    type: str
    description: str
    attacks: Mapping[str, int] = field(default_factory=dict)
    xp_levels: tuple[int, int, int] = (0, 0, 0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attacks", dict(self.attacks))
        levels = tuple(self.xp_levels) if isinstance(self.xp_levels, Iterable) else ()
        if len(levels) != 3:
            raise ValueError(f"expected exactly 3 experience levels, got {len(levels)}")
        object.__setattr__(self, "xp_levels", tuple(int(level) for level in levels))

    __hash__ = None  # type: ignore[assignment]