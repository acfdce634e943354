"""Small simulations: a file-backed Pokédex, ring-locked drones and a sensor/robot task queue."""

__version__ = "0.1.0"
__all__ = ["pokemon", "pokedex", "drones", "robots"]