"""A small model of a world, its lamps and winds, and the sky above it."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import List, Optional, Union


def _num(value: float) -> str:
    """Format a number the way a default-precision stream does."""
    return f"{value:g}"


@dataclass(frozen=True)
class Coords:
    """A point on the ground."""

    x: float
    y: float


@dataclass(frozen=True)
class Coords3D:
    """A point in space."""

    x: float
    y: float
    z: float


@dataclass
class Ocean:
    name: str
    area: float
    depth: float
    coords: Coords


@dataclass
class Mountain:
    name: str
    height: float
    area: float
    coords: Coords


@dataclass
class Volcano(Mountain):
    """A mountain that also serves as a base."""

    eruption_rate: float = 0.0
    evilness: float = 0.0
    num_orcs: int = 0
    num_dragons: int = 0


@dataclass
class Desert:
    name: str
    area: float
    coords: Coords


@dataclass
class Plain:
    name: str
    area: float
    coords: Coords


@dataclass
class Wind:
    name: str
    direction: Coords
    temperature: float


@dataclass
class Lamp:
    name: str
    radius: float
    luminosity: float
    coords: Coords3D


@dataclass
class Arda:
    """The world and everything on it."""

    name: str = ""
    description: str = ""
    oceans: List[Ocean] = field(default_factory=list)
    mountains: List[Mountain] = field(default_factory=list)
    deserts: List[Desert] = field(default_factory=list)
    plains: List[Plain] = field(default_factory=list)
    winds: List[Wind] = field(default_factory=list)
    lamps: List[Lamp] = field(default_factory=list)
    volcanoes: List[Volcano] = field(default_factory=list)


@dataclass
class Star:
    name: str
    radius: float
    luminosity: float
    coords: Coords3D


@dataclass
class BlackHole:
    name: str
    mass: float
    coords: Coords3D


@dataclass
class Ea:
    """The universe: a world and the stars around it."""

    name: str = ""
    description: str = ""
    arda: Optional[Arda] = None
    stars: List[Star] = field(default_factory=list)
    black_holes: List[BlackHole] = field(default_factory=list)


def _arda_of(target: Union[Arda, Ea]) -> Arda:
    if isinstance(target, Ea):
        if target.arda is None:
            raise ValueError(f"universe {target.name!r} has no world")
        return target.arda
    if isinstance(target, Arda):
        return target
    raise TypeError(f"expected Arda or Ea, got {type(target).__name__}")


def _emit(lines: List[str]) -> str:
    text = "".join(f"{line}\n" for line in lines)
    sys.stdout.write(text)
    return text


class WindsManager:
    """Adds, removes and lists the winds of a world."""

    def __init__(self, planet: Arda) -> None:
        self.planet = planet

    def add_wind(self, wind: Wind) -> None:
        self.planet.winds.append(wind)

    def remove_wind(self, wind: Wind) -> None:
        """Remove every wind equal to ``wind``."""
        self.planet.winds[:] = [w for w in self.planet.winds if w != wind]

    def print_winds(self) -> str:
        """Print one line per wind and return the printed text."""
        return _emit(
            [
                f"{w.name} {_num(w.direction.x)} {_num(w.direction.y)} {_num(w.temperature)}"
                for w in self.planet.winds
            ]
        )


class Destructor:
    """Changes a universe for the worse."""

    def __init__(self, ea: Ea) -> None:
        self.ea = ea

    def add_black_hole(self, name: str, mass: float, x: float, y: float, z: float) -> None:
        self.ea.black_holes.append(BlackHole(name, mass, Coords3D(x, y, z)))

    def kill_star(self, star: Star) -> None:
        """Remove every star equal to ``star`` and leave a black hole in its place."""
        self.ea.stars[:] = [s for s in self.ea.stars if s != star]
        self.ea.black_holes.append(BlackHole(star.name, star.luminosity, star.coords))

    def add_base(
        self,
        name: str,
        height: float,
        area: float,
        x: float,
        y: float,
        eruption_rate: float,
        evilness: float,
        num_orcs: int,
        num_dragons: int,
    ) -> None:
        """Raise a volcano on the world."""
        _arda_of(self.ea).volcanoes.append(
            Volcano(
                name,
                height,
                area,
                Coords(x, y),
                eruption_rate=eruption_rate,
                evilness=evilness,
                num_orcs=num_orcs,
                num_dragons=num_dragons,
            )
        )


def add_star(
    ea: Ea, name: str, radius: float, luminosity: float, x: float, y: float, z: float
) -> None:
    ea.stars.append(Star(name, radius, luminosity, Coords3D(x, y, z)))


def add_lamp(
    target: Union[Arda, Ea],
    name: str,
    radius: float,
    luminosity: float,
    x: float,
    y: float,
    z: float,
) -> None:
    """Add a lamp to a world, or to the world of a universe."""
    _arda_of(target).lamps.append(Lamp(name, radius, luminosity, Coords3D(x, y, z)))


def remove_lamp(target: Union[Arda, Ea], lamp: Lamp) -> None:
    """Remove every lamp equal to ``lamp``."""
    arda = _arda_of(target)
    arda.lamps[:] = [l for l in arda.lamps if l != lamp]


def remove_star(ea: Ea, star: Star) -> None:
    """Remove every star equal to ``star``."""
    ea.stars[:] = [s for s in ea.stars if s != star]


def show_off(ea: Ea) -> str:
    """Print every star, then every lamp, and return the printed text."""
    lines = [
        f"{s.name} {_num(s.radius)} {_num(s.luminosity)} "
        f"{_num(s.coords.x)} {_num(s.coords.y)} {_num(s.coords.z)}"
        for s in ea.stars
    ]
    lines.extend(
        f"{l.name} {_num(l.radius)} {_num(l.luminosity)} "
        f"{_num(l.coords.x)} {_num(l.coords.y)} {_num(l.coords.z)}"
        for l in _arda_of(ea).lamps
    )
    return _emit(lines)


def create_plus_constellation(ea: Ea) -> None:
    """Add five stars laid out as a plus sign."""
    add_star(ea, "Aldebaran", 0.5, 0.5, 0.5, 0.5, 0.5)
    add_star(ea, "Betelgeuse", 0.5, 0.5, 1.0, 0.5, 0.5)
    add_star(ea, "Rigel", 0.5, 0.5, 0.5, 1.0, 0.5)
    add_star(ea, "Antaras", 0.5, 0.5, 0.0, 0.5, 0.5)
    add_star(ea, "Canopus", 0.5, 0.5, 0.5, 0.0, 0.5)