from dataclasses import dataclass
from typing import Union

from solcatalog.constants import FIELD_SEPARATOR
from solcatalog.exceptions import ValidationFailure

from .planet import Planet, PlanetSnapshot
from .validation import as_length, moon_orbit_band, moon_radius_band, require_name


@dataclass(frozen=True)
class Moon:
    """
    A moon orbiting a planet.

    The radius must lie in ``(10, planet.radius / 17)`` and the orbit radius must be at least
    ``planet.radius * 5``. A ``Planet`` given as parent is replaced by its snapshot.
    """

    name: str
    radius: float
    orbit_radius: float
    parent_planet: Union[PlanetSnapshot, Planet]

    def __post_init__(self):
        require_name(self.name, "Moon")
        parent = self.parent_planet
        if parent is None:
            raise ValidationFailure(f"Moon '{self.name}' requires a parent planet")
        if isinstance(parent, Planet):
            parent = parent.snapshot()
            object.__setattr__(self, "parent_planet", parent)

        object.__setattr__(self, "radius", as_length(self.radius, "Moon radius"))
        object.__setattr__(self, "orbit_radius", as_length(self.orbit_radius, "Moon orbit radius"))
        moon_radius_band(parent.radius).require(self.radius, "Moon radius")
        moon_orbit_band(parent.radius).require(self.orbit_radius, "Moon orbit radius")

    def __str__(self) -> str:
        return FIELD_SEPARATOR.join([self.name, str(self.radius), str(self.orbit_radius)])
