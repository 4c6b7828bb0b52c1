"""
Shared structures for the lens tests: a small Pong-like scene built from
Field cells (for mutating lenses) and frozen dataclasses (for pure ones).
"""
import copy
import logging
from dataclasses import dataclass
from operator import attrgetter

import pytest

from optics import Field, Maybe, Nothing, settings


class Vector:
    """Two numeric cells."""
    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = Field.with_default(x)
        self.y = Field.with_default(y)


class Point(Vector):
    """A vector that can shift itself vertically."""
    def shift_y(self, diff: float) -> None:
        self.y.set(self.y.get() + diff)


class Line:
    """A segment between two points."""
    def __init__(self):
        self.pt1 = Field.with_default(Point())
        self.pt2 = Field.with_default(Point())


class Scene:
    """Three players, each a line."""
    def __init__(self):
        self.player1 = Field.with_default(Line())
        self.player2 = Field.with_default(Line())
        self.player3 = Field.with_default(Line())

    def ys(self) -> list[float]:
        """Every point's y, player by player."""
        return [point.get().y.get()
                for player in (self.player1, self.player2, self.player3)
                for point in (player.get().pt1, player.get().pt2)]


class Holder:
    """A container with an optional nested point."""
    def __init__(self, child: Maybe[Point] = Nothing):
        self.child = Field.with_default(child)


X = attrgetter("x")
Y = attrgetter("y")
PT1 = attrgetter("pt1")
PT2 = attrgetter("pt2")
CHILD = attrgetter("child")
PLAYER1 = attrgetter("player1")
PLAYER2 = attrgetter("player2")
PLAYER3 = attrgetter("player3")


@dataclass(frozen=True)
class Coord:
    """Immutable coordinate."""
    x: int
    y: int


@dataclass(frozen=True)
class Segment:
    """Immutable segment."""
    start: Coord
    end: Coord


@dataclass(frozen=True)
class Shape:
    """Immutable named segment."""
    name: str
    segment: Segment


@pytest.fixture
def line() -> Line:
    """A fresh line with both points at the origin."""
    return Line()


@pytest.fixture
def shape() -> Shape:
    """A frozen shape with a simple segment."""
    return Shape("bat", Segment(Coord(1, 2), Coord(3, 4)))


@pytest.fixture
def deep_clone():
    """Cloner for mutable structures."""
    return copy.deepcopy


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test starts from default settings and logger state."""
    logger = logging.getLogger("optics")
    level, handlers, propagate = logger.level, list(logger.handlers), logger.propagate
    settings.reset()
    yield
    settings.reset()
    logger.setLevel(level)
    logger.handlers[:] = handlers
    logger.propagate = propagate
