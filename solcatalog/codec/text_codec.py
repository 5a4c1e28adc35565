"""
Line-oriented text encoding of solar systems.

Each line is one record. The number of leading ``-`` gives its depth in the hierarchy::

    Sol:696000.0
    -Earth:6371.0:7000000.0
    --Moon:1737.0:384400.0

A star line opens a new solar system, a planet line belongs to the latest solar system and a moon
line belongs to the latest planet. Fields are separated by ``:`` and numbers are floats.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from solcatalog.constants import DEPTH_MARKER, FIELD_SEPARATOR, MOON_DEPTH, PLANET_DEPTH, STAR_DEPTH
from solcatalog.exceptions import MalformedRecordFailure, UniquenessFailure, ValidationFailure
from solcatalog.model import Moon, Planet, SolarSystem, Star

logger = logging.getLogger(__name__)


class DecoderState(enum.Enum):
    AWAITING_SYSTEM = "awaiting-system"
    AWAITING_PLANET = "awaiting-planet"
    AWAITING_MOON = "awaiting-moon"


@dataclass(frozen=True)
class Record:
    depth: int
    name: str
    radius: float
    orbit_radius: Optional[float] = None


def count_depth(line: str) -> int:
    return len(line) - len(line.lstrip(DEPTH_MARKER))


def parse_record(line: str, line_number: Optional[int] = None) -> Record:
    """
    Split one line into its depth, name and numeric fields.

    Raises:
        MalformedRecordFailure: if the field count does not match the depth, or a numeric field is not a float.
    """
    depth = count_depth(line)
    fields = line[depth:].split(FIELD_SEPARATOR)
    expected_fields = 2 if depth == STAR_DEPTH else 3
    if len(fields) != expected_fields:
        raise MalformedRecordFailure(
            f"expected {expected_fields} fields for a depth {depth} record, got {len(fields)}", line_number, line
        )

    name, *numbers = fields
    try:
        values = [float(n) for n in numbers]
    except ValueError as e:
        raise MalformedRecordFailure(f"non-numeric field in {line!r}", line_number, line) from e

    return Record(depth=depth, name=name, radius=values[0], orbit_radius=values[1] if len(values) > 1 else None)


class TextDecoder:
    """
    Incremental decoder, fed one line at a time.

    The state tracks the latest anchor: no solar system yet, a solar system waiting for planets,
    or a planet waiting for moons. Planet and moon lines without an anchor are skipped.
    """

    def __init__(self):
        self._state = DecoderState.AWAITING_SYSTEM
        self._solar_system: Optional[SolarSystem] = None
        self._planet: Optional[Planet] = None

    @property
    def state(self) -> DecoderState:
        return self._state

    def feed(self, line: str, line_number: Optional[int] = None) -> Optional[SolarSystem]:
        """
        Consume one line.

        Args:
            line: The record, without its line terminator.
            line_number: 1-based position of the line, reported in failures.

        Returns:
            The new solar system when the line opens one, None otherwise. Later planet and moon lines
            are added to the returned object in place.

        Raises:
            MalformedRecordFailure: if the line cannot be read or describes an invalid body.
        """
        if not line.strip():
            return None

        depth = count_depth(line)
        if depth == STAR_DEPTH:
            return self._open_solar_system(line, line_number)

        if depth == PLANET_DEPTH:
            if self._state is DecoderState.AWAITING_SYSTEM:
                logger.debug(f"Skipping planet on line {line_number}: no solar system opened yet")
                return None
            self._add_planet(line, line_number)
            return None

        if depth == MOON_DEPTH:
            if self._state is not DecoderState.AWAITING_MOON:
                logger.debug(f"Skipping moon on line {line_number}: no planet opened in the current solar system")
                return None
            self._add_moon(line, line_number)
            return None

        logger.warning(f"Skipping line {line_number}: depth {depth} is deeper than a moon record")
        return None

    def _open_solar_system(self, line: str, line_number: Optional[int]) -> SolarSystem:
        record = parse_record(line, line_number)
        try:
            solar_system = SolarSystem.from_star(Star(record.name, record.radius))
        except ValidationFailure as e:
            raise MalformedRecordFailure(str(e), line_number, line) from e

        self._solar_system = solar_system
        self._planet = None
        self._state = DecoderState.AWAITING_PLANET
        logger.debug(f"Line {line_number}: opened solar system '{solar_system.name}'")
        return solar_system

    def _add_planet(self, line: str, line_number: Optional[int]):
        record = parse_record(line, line_number)
        try:
            planet = Planet(record.name, record.radius, record.orbit_radius, self._solar_system.star)
            self._solar_system.add_planet(planet)
        except (ValidationFailure, UniquenessFailure) as e:
            raise MalformedRecordFailure(str(e), line_number, line) from e

        self._planet = planet
        self._state = DecoderState.AWAITING_MOON

    def _add_moon(self, line: str, line_number: Optional[int]):
        record = parse_record(line, line_number)
        try:
            self._planet.add_moon(Moon(record.name, record.radius, record.orbit_radius, self._planet))
        except (ValidationFailure, UniquenessFailure) as e:
            raise MalformedRecordFailure(str(e), line_number, line) from e


def iter_decode(lines: Iterable[str]) -> Iterator[SolarSystem]:
    """
    Decode solar systems lazily.

    Each solar system is yielded as soon as its star line is read and is completed in place while
    the iteration continues, so a consumer can register it before its planets are decoded.
    """
    decoder = TextDecoder()
    for line_number, line in enumerate(lines, start=1):
        solar_system = decoder.feed(line.rstrip("\r\n"), line_number)
        if solar_system is not None:
            yield solar_system


def decode(text: str) -> list[SolarSystem]:
    return list(iter_decode(text.splitlines()))


def encode_solar_system(solar_system: SolarSystem) -> str:
    """
    Encode one solar system, star first, then each planet followed by its moons.

    Raises:
        ValidationFailure: if the solar system has no star, or a name cannot be written as a record.
    """
    if not solar_system.has_star:
        raise ValidationFailure(f"Solar system '{solar_system.name}' has no star and cannot be encoded")

    lines = []
    for depth, body in solar_system.records():
        check_encodable_name(body.name)
        lines.append(DEPTH_MARKER * depth + str(body))
    return "\n".join(lines) + "\n"


def encode(solar_systems: Iterable[SolarSystem]) -> str:
    """Encode several solar systems one after the other. Systems without a star are left out."""
    chunks = []
    for solar_system in solar_systems:
        if not solar_system.has_star:
            logger.warning(f"Leaving out solar system '{solar_system.name}': it has no star")
            continue
        chunks.append(encode_solar_system(solar_system))
    return "".join(chunks)


def check_encodable_name(name: str):
    """
    Check that a name reads back as the same single record.

    Any character ``str.splitlines`` breaks on counts as a line break, since decoding splits on all of them.

    Raises:
        ValidationFailure: if the name holds the field separator or a line break, or starts with the depth marker.
    """
    if FIELD_SEPARATOR in name or name.startswith(DEPTH_MARKER) or name.splitlines() != [name]:
        raise ValidationFailure(f"Name {name!r} cannot be written as a text record")
