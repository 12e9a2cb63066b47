"""Builder - construct complex objects step by step.

Problem:
    A car has many optional parts. A constructor taking all of them is
    unreadable, and a subclass per combination explodes. The same
    construction steps should also be able to produce the car's manual.

Solution:
    Move construction into builder objects with one method per step. A
    director knows useful step sequences and drives any builder through them,
    so the same recipe yields a car or its manual.

Structure:
    - ``CarBuilder`` and ``CarManualBuilder`` implement the same steps.
    - ``Car`` and ``Manual`` are the products; they share no interface.
    - ``Director`` runs the step sequences for known configurations.

Usage:
    - A "telescoping constructor" with many optional parameters must go.
    - Different representations of a product are built by similar steps.
    - Composite or otherwise complex objects must be assembled gradually.

Advantages:
    - Objects are built step by step, steps may be deferred or repeated.
    - The same construction code serves several representations.
    - Complex construction is isolated from business logic (single responsibility).

Disadvantages:
    - The overall code grows with a builder per product.
"""
from typing import Callable, List, Optional, Union

from pydantic import BaseModel, ConfigDict

from src.domain.core.exceptions import ValidationError


class Car(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: str
    seats: int = 2
    trip_computer: bool = False
    gps: bool = False


class Manual(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: str
    seats: int = 2
    trip_computer: bool = False
    gps: bool = False

    def render(self) -> List[str]:
        lines = [f"Engine: {self.engine}", f"Seats: {self.seats}"]
        lines.append("Trip computer: installed" if self.trip_computer else "Trip computer: not installed")
        lines.append("GPS: installed" if self.gps else "GPS: not installed")
        return lines


class _PartsBuilder:
    """Shared step methods; subclasses decide which product ``build`` returns."""

    def __init__(self):
        self.reset()

    def reset(self) -> "_PartsBuilder":
        self.engine: Optional[str] = None
        self.seats = 2
        self.trip_computer = False
        self.gps = False
        return self

    def add_engine(self, engine: str) -> "_PartsBuilder":
        self.engine = engine
        return self

    def add_seats(self, seats: int) -> "_PartsBuilder":
        if seats < 1:
            raise ValidationError("A car needs at least one seat", {"seats": seats})
        self.seats = seats
        return self

    def add_trip_computer(self, trip_computer: bool = True) -> "_PartsBuilder":
        self.trip_computer = trip_computer
        return self

    def add_gps(self, gps: bool = True) -> "_PartsBuilder":
        self.gps = gps
        return self

    def _parts(self) -> dict:
        if not self.engine:
            raise ValidationError("Cannot build without an engine", {"engine": self.engine})
        return {
            "engine": self.engine,
            "seats": self.seats,
            "trip_computer": self.trip_computer,
            "gps": self.gps,
        }


class CarBuilder(_PartsBuilder):
    def build(self) -> Car:
        car = Car(**self._parts())
        self.reset()
        return car


class CarManualBuilder(_PartsBuilder):
    def build(self) -> Manual:
        manual = Manual(**self._parts())
        self.reset()
        return manual


Builder = Union[CarBuilder, CarManualBuilder]


class Director:
    """Knows the step sequences for the configurations we sell."""

    def construct_sports_car(self, builder: Builder) -> None:
        builder.reset().add_engine("V8").add_seats(2).add_trip_computer().add_gps()

    def construct_suv(self, builder: Builder) -> None:
        builder.reset().add_engine("V6 diesel").add_seats(7).add_gps()


def run_demo(output: Callable[[str], None] = print) -> None:
    director = Director()

    car_builder = CarBuilder()
    director.construct_sports_car(car_builder)
    output(f"Built car: {car_builder.build()!r}")

    manual_builder = CarManualBuilder()
    director.construct_suv(manual_builder)
    output("SUV manual:")
    for line in manual_builder.build().render():
        output(f"  {line}")

    custom = CarBuilder().add_engine("Electric").add_seats(4).add_trip_computer().build()
    output(f"Custom car: {custom!r}")
