from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional

from astropy.table import QTable

from solcatalog.constants import FIELD_SEPARATOR
from solcatalog.exceptions import NotFoundFailure, UniquenessFailure, ValidationFailure
from solcatalog.utils.qtable_utils import moons_to_qtable

from .star import Star
from .validation import as_length, planet_orbit_band, planet_radius_band, require_name

if TYPE_CHECKING:
    from .moon import Moon


@dataclass(frozen=True)
class PlanetSnapshot:
    """Immutable copy of a planet's own attributes, held by its moons."""

    name: str
    radius: float
    orbit_radius: float
    parent_star: Star

    def __str__(self) -> str:
        return FIELD_SEPARATOR.join([self.name, str(self.radius), str(self.orbit_radius)])


class Planet:
    """
    A planet orbiting a star, owning an ordered list of moons.

    The radius must lie in ``(1000, star.radius / 10)`` and the orbit radius must be at least
    ``star.radius * 10``. The parent star is kept as the immutable value it was at construction,
    so removing the star from its solar system later does not affect the planet.
    """

    def __init__(self, name: str, radius: float, orbit_radius: float, parent_star: Star):
        require_name(name, "Planet")
        if parent_star is None:
            raise ValidationFailure(f"Planet '{name}' requires a parent star")

        radius = as_length(radius, "Planet radius")
        orbit_radius = as_length(orbit_radius, "Planet orbit radius")
        planet_radius_band(parent_star.radius).require(radius, "Planet radius")
        planet_orbit_band(parent_star.radius).require(orbit_radius, "Planet orbit radius")

        self._name: str = name
        self._radius: float = radius
        self._orbit_radius: float = orbit_radius
        self._parent_star: Star = parent_star
        self._moons: list["Moon"] = []

    def __str__(self) -> str:
        return FIELD_SEPARATOR.join([self._name, str(self._radius), str(self._orbit_radius)])

    def __repr__(self) -> str:
        return (
            f"Planet(name={self._name!r}, radius={self._radius}, "
            f"orbit_radius={self._orbit_radius}, moons={len(self._moons)})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def orbit_radius(self) -> float:
        return self._orbit_radius

    @property
    def parent_star(self) -> Star:
        return self._parent_star

    @property
    def moons(self) -> list["Moon"]:
        """Copy of the moons, in their current order."""
        return list(self._moons)

    def snapshot(self) -> PlanetSnapshot:
        return PlanetSnapshot(
            name=self._name,
            radius=self._radius,
            orbit_radius=self._orbit_radius,
            parent_star=self._parent_star,
        )

    def get_moon_by_name(self, name: str) -> Optional["Moon"]:
        if name is None:
            raise ValidationFailure("Cannot search for a moon with no name")
        for moon in self._moons:
            if moon.name == name:
                return moon
        return None

    def add_moon(self, moon: "Moon"):
        if moon is None:
            raise ValidationFailure("Cannot add a null moon")
        if moon.parent_planet != self.snapshot():
            raise ValidationFailure(f"Moon '{moon.name}' was built against another planet than '{self._name}'")
        if self.get_moon_by_name(moon.name) is not None:
            raise UniquenessFailure(f"Moon name '{moon.name}' is already used on planet '{self._name}'")
        self._moons.append(moon)

    def remove_moon(self, moon: "Moon"):
        if moon is None:
            raise ValidationFailure("Cannot remove a null moon")
        try:
            self._moons.remove(moon)
        except ValueError:
            raise NotFoundFailure(f"Moon '{moon.name}' does not orbit planet '{self._name}'") from None

    def remove_moon_by_name(self, name: str) -> "Moon":
        moon = self.get_moon_by_name(name)
        if moon is None:
            raise NotFoundFailure(f"Moon '{name}' does not orbit planet '{self._name}'")
        self._moons.remove(moon)
        return moon

    def sort_moons(self, key: Callable[["Moon"], Any], reverse: bool = False):
        # list.sort is stable, equal keys keep their insertion order
        self._moons.sort(key=key, reverse=reverse)

    def to_qtable(self) -> QTable:
        return moons_to_qtable(self._moons)
