"""Adapter - let objects with incompatible interfaces work together.

Problem:
    A round hole checks whether round pegs fit by comparing radii. Square
    pegs have a width, not a radius, so they cannot be passed to ``fits``
    even though the question makes perfect sense for them.

Solution:
    Wrap the square peg in an adapter that looks like a round peg. The adapter
    reports the radius of the smallest circle that contains the square, so
    the hole never learns it is dealing with a square peg.

Structure:
    - ``RoundHole`` is the client.
    - ``RoundPeg`` is the interface the client expects.
    - ``SquarePeg`` is the incompatible service.
    - ``SquarePegAdapter`` converts one to the other.

Usage:
    - An existing class must be used but its interface doesn't match the rest of the code.
    - Several subclasses lacking a common feature must be reused without
      extending each of them.

Advantages:
    - Conversion code is separated from business logic (single responsibility).
    - New adapters are introduced without breaking client code (open/closed).

Disadvantages:
    - Extra classes add complexity; changing the service is sometimes simpler.
"""
import math
from typing import Callable


class RoundPeg:
    def __init__(self, radius: float):
        self._radius = radius

    def get_radius(self) -> float:
        return self._radius


class RoundHole:
    def __init__(self, radius: float):
        self._radius = radius

    def get_radius(self) -> float:
        return self._radius

    def fits(self, peg: RoundPeg) -> bool:
        return self.get_radius() >= peg.get_radius()


class SquarePeg:
    def __init__(self, width: float):
        self._width = width

    def get_width(self) -> float:
        return self._width


class SquarePegAdapter(RoundPeg):
    """Presents a square peg as the round peg circumscribing it."""

    def __init__(self, peg: SquarePeg):
        self.peg = peg
        super().__init__(peg.get_width() * math.sqrt(2) / 2)


def run_demo(output: Callable[[str], None] = print) -> None:
    hole = RoundHole(5)
    output(f"Round peg r=5 fits hole r=5: {hole.fits(RoundPeg(5))}")

    small_square = SquarePegAdapter(SquarePeg(5))
    large_square = SquarePegAdapter(SquarePeg(10))
    output(f"Square peg w=5 fits hole r=5: {hole.fits(small_square)}")
    output(f"Square peg w=10 fits hole r=5: {hole.fits(large_square)}")
