import math
from dataclasses import dataclass
from typing import Any

from solcatalog.constants import (
    MIN_MOON_RADIUS,
    MIN_PLANET_RADIUS,
    MIN_STAR_RADIUS,
    MOON_MIN_ORBIT_PLANET_FACTOR,
    MOON_RADIUS_PLANET_DIVISOR,
    PLANET_MAX_ORBIT_STAR_FACTOR,
    PLANET_MIN_ORBIT_STAR_FACTOR,
    PLANET_RADIUS_STAR_DIVISOR,
)
from solcatalog.exceptions import ValidationFailure


@dataclass(frozen=True)
class Band:
    """
    Range of permitted values for a radius or an orbit radius.

    Each end is either open (the bound itself is rejected) or closed. An infinite upper bound
    means the band is unbounded above.
    """

    lower: float
    upper: float = math.inf
    lower_closed: bool = False
    upper_closed: bool = False

    def __contains__(self, value: float) -> bool:
        above = value >= self.lower if self.lower_closed else value > self.lower
        below = value <= self.upper if self.upper_closed else value < self.upper
        return above and below

    def __str__(self) -> str:
        left = "[" if self.lower_closed else "("
        right = "]" if self.upper_closed and math.isfinite(self.upper) else ")"
        return f"{left}{self.lower}, {self.upper}{right}"

    def require(self, value: float, what: str):
        if value not in self:
            raise ValidationFailure(f"{what} {value} is out of range {self}")


def star_radius_band() -> Band:
    return Band(lower=MIN_STAR_RADIUS)


def planet_radius_band(star_radius: float) -> Band:
    return Band(lower=MIN_PLANET_RADIUS, upper=star_radius / PLANET_RADIUS_STAR_DIVISOR)


def planet_orbit_band(star_radius: float, bounded: bool = False) -> Band:
    """
    Orbit radii permitted for a planet of a star with the given radius.

    Args:
        star_radius: Radius of the parent star.
        bounded: Whether to also apply the upper limit used when planets are added interactively.
            Planets built directly, or decoded from text, only have a lower limit.
    """
    return Band(
        lower=star_radius * PLANET_MIN_ORBIT_STAR_FACTOR,
        upper=star_radius * PLANET_MAX_ORBIT_STAR_FACTOR if bounded else math.inf,
        lower_closed=True,
        upper_closed=bounded,
    )


def moon_radius_band(planet_radius: float) -> Band:
    return Band(lower=MIN_MOON_RADIUS, upper=planet_radius / MOON_RADIUS_PLANET_DIVISOR)


def moon_orbit_band(planet_radius: float) -> Band:
    return Band(lower=planet_radius * MOON_MIN_ORBIT_PLANET_FACTOR, lower_closed=True)


def require_name(name: Any, kind: str):
    if name is None:
        raise ValidationFailure(f"{kind} name required")
    if not isinstance(name, str) or not name.strip():
        raise ValidationFailure(f"{kind} name required, got {name!r}")


def as_length(value: Any, what: str) -> float:
    try:
        length = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationFailure(f"{what} must be a number, got {value!r}") from e
    if not math.isfinite(length):
        raise ValidationFailure(f"{what} must be finite, got {value!r}")
    return length
