"""Star, planet, moon and solar system types."""

from .moon import Moon
from .planet import Planet, PlanetSnapshot
from .solar_system import SolarSystem
from .star import Star
from .validation import Band

__all__ = [
    "Star",
    "Planet",
    "PlanetSnapshot",
    "Moon",
    "SolarSystem",
    "Band",
]
