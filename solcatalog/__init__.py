"""SolCatalog - A validated catalog of stars, planets and moons."""

import importlib.metadata

try:
    __version__ = importlib.metadata.version("solcatalog")
except importlib.metadata.PackageNotFoundError:
    # Package is not installed, try to read from pyproject.toml
    import os
    from pathlib import Path

    import tomli

    pyproject_path = Path(os.path.realpath(__file__)).parent.parent / "pyproject.toml"
    try:
        with open(pyproject_path, "rb") as f:
            __version__ = tomli.load(f)["project"]["version"]
    except (FileNotFoundError, KeyError, ImportError):
        __version__ = "0.0.0"


from .catalog import Catalog
from .codec import TextDecoder, decode, encode, encode_solar_system
from .exceptions import (
    MalformedRecordFailure,
    NoSelectionFailure,
    NotFoundFailure,
    ParseFailure,
    SolCatalogError,
    UniquenessFailure,
    ValidationFailure,
)
from .io import FsStorage, MemoryStorage
from .model import Moon, Planet, PlanetSnapshot, SolarSystem, Star
from .utils.sorting import PlanetView, by_orbit_radius, by_radius

__all__ = [
    # Catalog
    "Catalog",
    "PlanetView",
    # Domain types
    "Star",
    "Planet",
    "PlanetSnapshot",
    "Moon",
    "SolarSystem",
    # Text encoding
    "TextDecoder",
    "decode",
    "encode",
    "encode_solar_system",
    # Storage
    "FsStorage",
    "MemoryStorage",
    # Sort keys
    "by_radius",
    "by_orbit_radius",
    # Failures
    "SolCatalogError",
    "ValidationFailure",
    "NotFoundFailure",
    "NoSelectionFailure",
    "UniquenessFailure",
    "ParseFailure",
    "MalformedRecordFailure",
]
