import logging
from typing import Any, Callable, Iterator, Optional, Union

from astropy.table import QTable
from typing_extensions import Self

from solcatalog.constants import DEPTH_MARKER, MOON_DEPTH, PLANET_DEPTH, STAR_DEPTH
from solcatalog.exceptions import NotFoundFailure, UniquenessFailure, ValidationFailure
from solcatalog.utils.qtable_utils import planets_to_qtable

from .moon import Moon
from .planet import Planet
from .star import Star
from .validation import require_name

logger = logging.getLogger(__name__)


class SolarSystem:
    """
    A central star and the ordered planets that orbit it.

    Planet names are unique within a solar system. The star can be removed with ``remove_star``,
    which leaves a name-only system with no planets.
    """

    def __init__(self, name: str, star: Optional[Star] = None):
        require_name(name, "Solar system")
        self._name: str = name
        self._star: Optional[Star] = star
        self._planets: list[Planet] = []

    @classmethod
    def from_star(cls, star: Star) -> Self:
        """Create an empty solar system named after its star."""
        if star is None:
            raise ValidationFailure("Cannot create a solar system from a null star")
        return cls(name=star.name, star=star)

    def __len__(self) -> int:
        return len(self._planets)

    def __str__(self) -> str:
        return "\n".join(DEPTH_MARKER * depth + str(body) for depth, body in self.records()) or self._name

    def __repr__(self) -> str:
        return f"SolarSystem(name={self._name!r}, star={self._star!r}, planets={len(self._planets)})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def star(self) -> Optional[Star]:
        return self._star

    @property
    def has_star(self) -> bool:
        return self._star is not None

    @property
    def planets(self) -> list[Planet]:
        """Copy of the planets, in their current order."""
        return list(self._planets)

    @property
    def moon_count(self) -> int:
        return sum(len(planet.moons) for planet in self._planets)

    def records(self) -> Iterator[tuple[int, Union[Star, Planet, Moon]]]:
        """
        Iterate over the bodies of the system together with their depth in the hierarchy.

        The star comes first at depth 0, then each planet at depth 1 followed by its moons at depth 2.
        A system without a star yields nothing.
        """
        if self._star is None:
            return
        yield STAR_DEPTH, self._star
        for planet in self._planets:
            yield PLANET_DEPTH, planet
            for moon in planet.moons:
                yield MOON_DEPTH, moon

    def get_planet_by_name(self, name: str) -> Optional[Planet]:
        if name is None:
            raise ValidationFailure("Cannot search for a planet with no name")
        for planet in self._planets:
            if planet.name == name:
                return planet
        return None

    def add_planet(self, planet: Planet):
        if planet is None:
            raise ValidationFailure("Cannot add a null planet")
        if self.get_planet_by_name(planet.name) is not None:
            raise UniquenessFailure(f"Planet name '{planet.name}' is already used in solar system '{self._name}'")
        self._planets.append(planet)

    def remove_planet(self, planet: Planet):
        if planet is None:
            raise ValidationFailure("Cannot remove a null planet")
        for i, existing in enumerate(self._planets):
            if existing is planet:
                del self._planets[i]
                return
        raise NotFoundFailure(f"Planet '{planet.name}' is not part of solar system '{self._name}'")

    def remove_star(self):
        """Remove the star and every planet. The solar system keeps only its name."""
        logger.info(f"Removing star of solar system '{self._name}' and its {len(self._planets)} planets")
        self._planets.clear()
        self._star = None

    def sort_planets_and_moons(
        self,
        planet_key: Callable[[Planet], Any],
        moon_key: Callable[[Moon], Any],
        reverse: bool = False,
    ):
        """
        Sort the planets in place, then the moons of every planet.

        Args:
            planet_key: Key function ordering the planets.
            moon_key: Key function ordering the moons of each planet.
            reverse: Whether to sort in descending order.
        """
        self._planets.sort(key=planet_key, reverse=reverse)
        for planet in self._planets:
            planet.sort_moons(key=moon_key, reverse=reverse)

    def to_qtable(self) -> QTable:
        return planets_to_qtable(self._planets)
