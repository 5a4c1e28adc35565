from typing import TYPE_CHECKING, Any, Optional, Sequence

import numpy as np
import pandas as pd
import pydantic
from astropy import units as u
from astropy.table import QTable

if TYPE_CHECKING:
    from solcatalog.model import Moon, Planet, SolarSystem


class TableColumnInfo(pydantic.BaseModel):
    description: Optional[str] = None
    unit: Optional[str] = None
    dtype: Optional[str] = None


QTableHeader = dict[str, TableColumnInfo]


PLANETS_HEADER: QTableHeader = {
    "name": TableColumnInfo(description="Planet name", dtype="str"),
    "radius": TableColumnInfo(description="Planet radius", unit="km", dtype="float64"),
    "orbit_radius": TableColumnInfo(description="Planet orbit radius", unit="km", dtype="float64"),
    "moon_count": TableColumnInfo(description="Number of moons", dtype="int64"),
}

MOONS_HEADER: QTableHeader = {
    "name": TableColumnInfo(description="Moon name", dtype="str"),
    "radius": TableColumnInfo(description="Moon radius", unit="km", dtype="float64"),
    "orbit_radius": TableColumnInfo(description="Moon orbit radius", unit="km", dtype="float64"),
}

SOLAR_SYSTEMS_HEADER: QTableHeader = {
    "name": TableColumnInfo(description="Solar system name", dtype="str"),
    "star_radius": TableColumnInfo(description="Star radius, NaN when the star was removed", unit="km", dtype="float64"),
    "planet_count": TableColumnInfo(description="Number of planets", dtype="int64"),
    "moon_count": TableColumnInfo(description="Number of moons", dtype="int64"),
}


def planets_to_qtable(planets: Sequence["Planet"]) -> QTable:
    return build_qtable(
        columns={
            "name": [p.name for p in planets],
            "radius": [p.radius for p in planets],
            "orbit_radius": [p.orbit_radius for p in planets],
            "moon_count": [len(p.moons) for p in planets],
        },
        header=PLANETS_HEADER,
    )


def moons_to_qtable(moons: Sequence["Moon"]) -> QTable:
    return build_qtable(
        columns={
            "name": [m.name for m in moons],
            "radius": [m.radius for m in moons],
            "orbit_radius": [m.orbit_radius for m in moons],
        },
        header=MOONS_HEADER,
    )


def solar_systems_to_qtable(solar_systems: Sequence["SolarSystem"]) -> QTable:
    return build_qtable(
        columns={
            "name": [s.name for s in solar_systems],
            "star_radius": [s.star.radius if s.has_star else np.nan for s in solar_systems],
            "planet_count": [len(s) for s in solar_systems],
            "moon_count": [s.moon_count for s in solar_systems],
        },
        header=SOLAR_SYSTEMS_HEADER,
    )


def build_qtable(columns: dict[str, list[Any]], header: QTableHeader) -> QTable:
    """
    Build a QTable from plain column values, following the column order, units and descriptions of the header.
    """
    table = QTable()
    for column_name, info in header.items():
        values = np.array(columns[column_name], dtype=info.dtype)
        table[column_name] = values * u.Unit(info.unit) if info.unit else values
        table[column_name].info.description = info.description
    return table


def to_pandas(table: QTable) -> pd.DataFrame:
    if len(table) == 0:
        return pd.DataFrame(columns=table.colnames)
    return table.to_pandas().reset_index(drop=True)
