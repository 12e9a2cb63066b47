"""Tests for the square peg adapter."""

import math

import pytest

from src.structural.adapter import RoundHole, RoundPeg, SquarePeg, SquarePegAdapter, run_demo


class TestSquarePegAdapter:
    """Test that square pegs are checked against round holes."""

    def test_round_peg_fits(self):
        assert RoundHole(5).fits(RoundPeg(5)) is True
        assert RoundHole(5).fits(RoundPeg(6)) is False

    def test_adapter_radius(self):
        adapter = SquarePegAdapter(SquarePeg(2))
        assert adapter.get_radius() == pytest.approx(math.sqrt(2))

    @pytest.mark.parametrize("width, fits", [(5, True), (7, True), (8, False), (10, False)])
    def test_square_peg_fits(self, width, fits):
        assert RoundHole(5).fits(SquarePegAdapter(SquarePeg(width))) is fits


def test_demo_output():
    lines = []
    run_demo(lines.append)
    assert lines == [
        "Round peg r=5 fits hole r=5: True",
        "Square peg w=5 fits hole r=5: True",
        "Square peg w=10 fits hole r=5: False",
    ]
