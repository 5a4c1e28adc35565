import numpy as np
import pandas as pd
from astropy import units as u

from solcatalog import Moon
from solcatalog.utils.qtable_utils import (
    MOONS_HEADER,
    PLANETS_HEADER,
    TableColumnInfo,
    moons_to_qtable,
    planets_to_qtable,
    to_pandas,
)


class TestQTableUtils:
    def test_planets_table_follows_header(self, earth):
        table = planets_to_qtable([earth])
        assert table.colnames == list(PLANETS_HEADER)
        assert table["orbit_radius"][0] == 149600000.0 * u.km
        assert table["radius"].info.description == "Planet radius"
        assert PLANETS_HEADER["radius"] == TableColumnInfo(description="Planet radius", unit="km", dtype="float64")

    def test_moons_table(self, earth):
        moons = [Moon("Luna", 300.0, 384400.0, earth), Moon("Selene", 100.0, 40000.0, earth)]
        table = moons_to_qtable(moons)
        assert table.colnames == list(MOONS_HEADER)
        assert list(table["name"]) == ["Luna", "Selene"]
        assert np.allclose(table["radius"].to_value(u.km), [300.0, 100.0])

    def test_to_pandas(self, earth):
        df = to_pandas(planets_to_qtable([earth]))
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == list(PLANETS_HEADER)
        assert df["radius"][0] == 6371.0

    def test_to_pandas_empty(self):
        df = to_pandas(planets_to_qtable([]))
        assert len(df) == 0
        assert list(df.columns) == list(PLANETS_HEADER)
