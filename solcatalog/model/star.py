from dataclasses import dataclass

from solcatalog.constants import FIELD_SEPARATOR

from .validation import as_length, require_name, star_radius_band


@dataclass(frozen=True)
class Star:
    name: str
    radius: float

    def __post_init__(self):
        require_name(self.name, "Star")
        object.__setattr__(self, "radius", as_length(self.radius, "Star radius"))
        star_radius_band().require(self.radius, "Star radius")

    def __str__(self) -> str:
        return f"{self.name}{FIELD_SEPARATOR}{self.radius}"
