"""Tests for car and manual builders."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from src.creational.builder import Car, CarBuilder, CarManualBuilder, Director, Manual, run_demo
from src.domain.core.exceptions import ValidationError


class TestBuilders:
    """Test step-by-step construction."""

    def setup_method(self):
        """Set up test fixtures."""
        self.director = Director()

    def test_sports_car(self):
        builder = CarBuilder()
        self.director.construct_sports_car(builder)
        assert builder.build() == Car(engine="V8", seats=2, trip_computer=True, gps=True)

    def test_suv_manual(self):
        builder = CarManualBuilder()
        self.director.construct_suv(builder)
        manual = builder.build()
        assert isinstance(manual, Manual)
        assert manual.render() == [
            "Engine: V6 diesel",
            "Seats: 7",
            "Trip computer: not installed",
            "GPS: installed",
        ]

    def test_builder_resets_after_build(self):
        builder = CarBuilder().add_engine("V4").add_gps()
        builder.build()
        assert builder.engine is None
        assert builder.gps is False

    def test_build_without_engine(self):
        with pytest.raises(ValidationError, match="engine"):
            CarBuilder().add_seats(4).build()

    def test_invalid_seat_count(self):
        with pytest.raises(ValidationError) as exc_info:
            CarBuilder().add_seats(0)
        assert exc_info.value.details == {"seats": 0}

    def test_products_are_immutable(self):
        car = CarBuilder().add_engine("V4").build()
        with pytest.raises(PydanticValidationError):
            car.seats = 5


def test_demo_output():
    lines = []
    run_demo(lines.append)
    assert lines[0] == "Built car: Car(engine='V8', seats=2, trip_computer=True, gps=True)"
    assert lines[1] == "SUV manual:"
    assert "  Seats: 7" in lines
    assert lines[-1] == "Custom car: Car(engine='Electric', seats=4, trip_computer=True, gps=False)"
