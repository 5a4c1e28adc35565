import logging
import math
from pathlib import Path
from typing import Any, Callable, Iterator, Optional, Union

from astropy.table import QTable

from solcatalog.codec import TextDecoder, check_encodable_name, encode
from solcatalog.exceptions import (
    MalformedRecordFailure,
    NoSelectionFailure,
    NotFoundFailure,
    ParseFailure,
    UniquenessFailure,
    ValidationFailure,
)
from solcatalog.io import BaseStorage, MemoryStorage
from solcatalog.model import Moon, Planet, SolarSystem, Star
from solcatalog.model.validation import (
    as_length,
    moon_orbit_band,
    moon_radius_band,
    planet_orbit_band,
    planet_radius_band,
    star_radius_band,
)
from solcatalog.utils.qtable_utils import solar_systems_to_qtable
from solcatalog.utils.sorting import PlanetView, by_orbit_radius, by_radius, ordered_planets

logger = logging.getLogger(__name__)


class Catalog:
    """
    Registry of solar systems keyed by name, with at most one current selection.

    Every operation either returns its result or raises a ``SolCatalogError`` subclass describing
    why it was refused. A refused operation leaves the catalog unchanged.
    """

    def __init__(self, storage: Optional[BaseStorage] = None):
        """
        Args:
            storage: Backend used by ``load`` and ``store``. Defaults to in-memory storage.
        """
        self._solar_systems: dict[str, SolarSystem] = {}
        self._current_name: Optional[str] = None
        self._storage = storage or MemoryStorage()

    def __len__(self) -> int:
        return len(self._solar_systems)

    def __contains__(self, name: str) -> bool:
        return name in self._solar_systems

    def __iter__(self) -> Iterator[SolarSystem]:
        return iter(list(self._solar_systems.values()))

    @property
    def current_name(self) -> Optional[str]:
        return self._current_name

    @property
    def current(self) -> Optional[SolarSystem]:
        if self._current_name is None:
            return None
        return self._solar_systems.get(self._current_name)

    def get_solar_system(self, name: str) -> Optional[SolarSystem]:
        return self._solar_systems.get(name)

    def get_all_solar_systems(self) -> list[SolarSystem]:
        return list(self._solar_systems.values())

    def create_solar_system(self, star_name: str, star_radius: float) -> SolarSystem:
        star_radius_band().require(as_length(star_radius, "Star radius"), "Star radius")
        if star_name in self._solar_systems:
            raise UniquenessFailure(f"Solar system '{star_name}' already exists")

        star = Star(star_name, star_radius)
        check_encodable_name(star.name)
        solar_system = SolarSystem.from_star(star)
        self._solar_systems[solar_system.name] = solar_system
        logger.info(f"Created solar system '{star_name}'")
        return solar_system

    def add_solar_system(self, solar_system: SolarSystem):
        if solar_system is None:
            raise ValidationFailure("Cannot add a null solar system")
        if solar_system.name in self._solar_systems:
            raise UniquenessFailure(f"Solar system '{solar_system.name}' already exists")
        self._solar_systems[solar_system.name] = solar_system

    def select_solar_system(self, name: str) -> bool:
        if name not in self._solar_systems:
            return False
        self._current_name = name
        return True

    def add_planet(self, solar_system_name: str, planet_name: str, radius_text: str, orbit_radius_text: str) -> Planet:
        """
        Add a planet from free-text measurements.

        The radius must lie in ``(1000, star.radius / 10)`` and the orbit radius in
        ``[star.radius * 10, star.radius * 20]``.

        Raises:
            ValidationFailure: if a name is blank or cannot be written as a text record, the system has no
                star, or a value is out of its band.
            NotFoundFailure: if the solar system does not exist.
            ParseFailure: if a measurement is not a finite number.
            UniquenessFailure: if the planet name is already used in the solar system.
        """
        if _is_blank(solar_system_name):
            raise ValidationFailure("Solar system name cannot be null or empty")
        if _is_blank(planet_name):
            raise ValidationFailure("Planet name cannot be null or empty")
        check_encodable_name(planet_name)

        solar_system = self._require_solar_system(solar_system_name)
        radius = _parse_length(radius_text, "Planet radius")
        orbit_radius = _parse_length(orbit_radius_text, "Planet orbit radius")

        star = solar_system.star
        if star is None:
            raise ValidationFailure(f"Solar system '{solar_system_name}' has no star")
        planet_radius_band(star.radius).require(radius, "Planet radius")
        planet_orbit_band(star.radius, bounded=True).require(orbit_radius, "Planet orbit radius")

        if solar_system.get_planet_by_name(planet_name) is not None:
            raise UniquenessFailure(f"Planet name '{planet_name}' is already used in solar system '{solar_system_name}'")

        planet = Planet(planet_name, radius, orbit_radius, star)
        solar_system.add_planet(planet)
        return planet

    def add_moon(
        self, solar_system_name: str, planet_name: str, moon_name: str, radius: float, orbit_radius: float
    ) -> Moon:
        solar_system = self._require_solar_system(solar_system_name)
        planet = self._require_planet(solar_system, planet_name)

        moon_radius_band(planet.radius).require(as_length(radius, "Moon radius"), "Moon radius")
        moon_orbit_band(planet.radius).require(as_length(orbit_radius, "Moon orbit radius"), "Moon orbit radius")
        if moon_name is not None and planet.get_moon_by_name(moon_name) is not None:
            raise UniquenessFailure(f"Moon name '{moon_name}' is already used on planet '{planet_name}'")

        moon = Moon(moon_name, radius, orbit_radius, planet)
        check_encodable_name(moon.name)
        planet.add_moon(moon)
        return moon

    def remove_planet(self, solar_system_name: str, planet_name: str) -> Planet:
        solar_system = self._require_solar_system(solar_system_name)
        planet = self._require_planet(solar_system, planet_name)
        solar_system.remove_planet(planet)
        return planet

    def remove_moon(self, solar_system_name: str, planet_name: str, moon_name: str) -> Moon:
        solar_system = self._require_solar_system(solar_system_name)
        planet = self._require_planet(solar_system, planet_name)
        return planet.remove_moon_by_name(moon_name)

    def remove_star(self, solar_system_name: Optional[str] = None) -> SolarSystem:
        """
        Remove the star, and with it every planet, of the named solar system or of the current one.

        The solar system stays registered under its name.
        """
        solar_system = self._resolve(solar_system_name)
        solar_system.remove_star()
        return solar_system

    def get_planets_ordered_by_size(self) -> PlanetView:
        return self._current_view(by_radius)

    def get_planets_ordered_by_orbit_radius(self) -> PlanetView:
        return self._current_view(by_orbit_radius)

    def sort_solar_system(
        self,
        solar_system_name: str,
        planet_key: Callable[[Planet], Any],
        moon_key: Callable[[Moon], Any],
    ) -> SolarSystem:
        solar_system = self._require_solar_system(solar_system_name)
        solar_system.sort_planets_and_moons(planet_key, moon_key)
        return solar_system

    def sort_by_size(self, solar_system_name: Optional[str] = None) -> SolarSystem:
        """Sort planets and moons by radius, in the named solar system or in the current one."""
        return self.sort_solar_system(self._resolve(solar_system_name).name, by_radius, by_radius)

    def sort_by_orbit_radius(self, solar_system_name: Optional[str] = None) -> SolarSystem:
        """Sort planets and moons by orbit radius, in the named solar system or in the current one."""
        return self.sort_solar_system(self._resolve(solar_system_name).name, by_orbit_radius, by_orbit_radius)

    def load_text(self, text: str) -> list[SolarSystem]:
        """
        Register the solar systems described by catalog text.

        Solar systems are registered as soon as their star line is read. When a line fails, the systems
        registered before it stay in the catalog.

        Returns:
            The solar systems that were registered.

        Raises:
            MalformedRecordFailure: if a line is malformed, describes an invalid body, or opens a solar
                system whose name is already registered.
        """
        decoder = TextDecoder()
        loaded = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            solar_system = decoder.feed(line, line_number)
            if solar_system is None:
                continue
            try:
                self.add_solar_system(solar_system)
            except UniquenessFailure as e:
                raise MalformedRecordFailure(str(e), line_number, line) from e
            loaded.append(solar_system)

        logger.info(f"Loaded {len(loaded)} solar systems into the catalog")
        return loaded

    def load_from_file(self, file_path: Union[str, Path]) -> list[SolarSystem]:
        file_path = Path(file_path)
        if not file_path.exists():
            raise ValueError(f"load_from_file(): given path does not exist: {file_path}")

        logger.info(f"Loading solar systems from {file_path}")
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise MalformedRecordFailure(f"{file_path} is not UTF-8 text: {e.reason}") from e
        return self.load_text(text)

    def load(self, name: str) -> list[SolarSystem]:
        """Load catalog text previously stored under ``name`` in the configured storage."""
        try:
            text = self._storage.read_text(name)
        except UnicodeDecodeError as e:
            raise MalformedRecordFailure(f"Stored catalog '{name}' is not UTF-8 text: {e.reason}") from e
        return self.load_text(text)

    def dumps(self) -> str:
        return encode(self._solar_systems.values())

    def store(self, name: str, override: bool = False):
        self._storage.write_text(self.dumps(), name, override=override)

    def to_qtable(self) -> QTable:
        return solar_systems_to_qtable(self.get_all_solar_systems())

    def _current_view(self, key: Callable[[Planet], Any]) -> PlanetView:
        if self.current is None:
            logger.warning("No solar system selected, returning an empty planet view")
        return ordered_planets(self.current, key)

    def _resolve(self, solar_system_name: Optional[str]) -> SolarSystem:
        if solar_system_name is not None:
            return self._require_solar_system(solar_system_name)
        if self.current is None:
            raise NoSelectionFailure("No solar system selected")
        return self.current

    def _require_solar_system(self, name: str) -> SolarSystem:
        solar_system = self._solar_systems.get(name)
        if solar_system is None:
            raise NotFoundFailure(f"Solar system '{name}' does not exist")
        return solar_system

    @staticmethod
    def _require_planet(solar_system: SolarSystem, name: str) -> Planet:
        if name is None:
            raise NotFoundFailure(f"Planet with no name does not exist in solar system '{solar_system.name}'")
        planet = solar_system.get_planet_by_name(name)
        if planet is None:
            raise NotFoundFailure(f"Planet '{name}' does not exist in solar system '{solar_system.name}'")
        return planet


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def _parse_length(text: str, what: str) -> float:
    try:
        value = float(text)
    except (TypeError, ValueError) as e:
        raise ParseFailure(f"{what} {text!r} is not a valid number") from e
    if not math.isfinite(value):
        raise ParseFailure(f"{what} {text!r} is not a finite number")
    return value
