from .qtable_utils import QTableHeader, TableColumnInfo, to_pandas
from .sorting import PlanetView, by_orbit_radius, by_radius, ordered_planets

__all__ = [
    "TableColumnInfo",
    "QTableHeader",
    "to_pandas",
    "PlanetView",
    "by_radius",
    "by_orbit_radius",
    "ordered_planets",
]
