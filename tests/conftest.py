import os
from pathlib import Path

import pytest

from solcatalog import Catalog, Planet, SolarSystem, Star
from solcatalog.io import MemoryStorage

TEST_FOLDER_ROOT = Path(os.path.realpath(__file__)).parent
TEST_ASSETS_DIR = TEST_FOLDER_ROOT / "assets"
TEST_CATALOG_FILE = TEST_ASSETS_DIR / "catalog.txt"


@pytest.fixture(autouse=True)
def clear_memory_storage():
    """The in-memory storage is shared by every instance, start each test from a clean state."""
    MemoryStorage.clear()
    yield
    MemoryStorage.clear()


@pytest.fixture
def catalog_file() -> Path:
    return TEST_CATALOG_FILE


@pytest.fixture
def catalog_text() -> str:
    with open(TEST_CATALOG_FILE, "r", encoding="utf-8") as f:
        return f.read()


@pytest.fixture
def sol() -> Star:
    return Star("Sol", 696000.0)


@pytest.fixture
def earth(sol) -> Planet:
    return Planet("Earth", 6371.0, 149600000.0, sol)


@pytest.fixture
def sol_system(sol) -> SolarSystem:
    return SolarSystem.from_star(sol)


@pytest.fixture
def catalog() -> Catalog:
    """Catalog holding an empty 'Sol' solar system, radius 696000 km."""
    c = Catalog()
    c.create_solar_system("Sol", 696000.0)
    return c


@pytest.fixture
def loaded_catalog(catalog_text) -> Catalog:
    c = Catalog()
    c.load_text(catalog_text)
    return c
