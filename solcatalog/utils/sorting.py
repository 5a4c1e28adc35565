from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterator, Optional

if TYPE_CHECKING:
    from solcatalog.model import Planet, SolarSystem


def by_radius(body) -> float:
    return body.radius


def by_orbit_radius(body) -> float:
    return body.orbit_radius


@dataclass(frozen=True)
class PlanetView:
    """
    Read-only ordering of the planets of a solar system.

    ``solar_system_name`` is None when the view was requested without a selected solar system,
    in which case the view is empty.
    """

    solar_system_name: Optional[str]
    planets: tuple["Planet", ...] = ()

    def __len__(self) -> int:
        return len(self.planets)

    def __iter__(self) -> Iterator["Planet"]:
        return iter(self.planets)

    @property
    def selected(self) -> bool:
        return self.solar_system_name is not None


def ordered_planets(solar_system: Optional["SolarSystem"], key: Callable[["Planet"], Any]) -> PlanetView:
    if solar_system is None:
        return PlanetView(solar_system_name=None)
    return PlanetView(solar_system_name=solar_system.name, planets=tuple(sorted(solar_system.planets, key=key)))
