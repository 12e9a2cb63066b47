"""Prototype - copy existing objects without depending on their classes.

Problem:
    Copying an object from the outside requires knowing its concrete class
    and all of its fields, some of which may be private. Code that only sees
    an interface cannot do it at all.

Solution:
    Objects that support cloning implement ``clone`` themselves. A registry of
    preconfigured prototypes hands out copies by name, so new objects start
    from a known configuration.

Structure:
    - ``Shape`` is the prototype with ``clone``.
    - ``Rectangle`` and ``Circle`` are concrete prototypes.
    - ``ShapeRegistry`` stores named prototypes and returns clones.

Usage:
    - Code must copy objects without depending on their concrete classes.
    - Subclasses differ only in how their instances are initialized.

Advantages:
    - Objects are cloned without coupling to their classes.
    - Repeated initialization code is replaced by cloning prototypes.
    - Complex objects are produced more conveniently.

Disadvantages:
    - Objects with circular references are tricky to clone.
"""
from typing import Callable, Dict, List

from pydantic import BaseModel

from src.domain.core.exceptions import ResourceNotFoundError


class Shape(BaseModel):
    x: int = 0
    y: int = 0
    color: str = "black"

    def clone(self) -> "Shape":
        """Return an independent copy of the same concrete class."""
        return self.model_copy(deep=True)


class Rectangle(Shape):
    width: int = 0
    height: int = 0


class Circle(Shape):
    radius: int = 0


class ShapeRegistry:
    """Named prototypes; every lookup returns a fresh clone."""

    def __init__(self):
        self._prototypes: Dict[str, Shape] = {}

    def add(self, name: str, prototype: Shape) -> None:
        self._prototypes[name] = prototype.clone()

    def get(self, name: str) -> Shape:
        prototype = self._prototypes.get(name)
        if prototype is None:
            raise ResourceNotFoundError("Prototype", name)
        return prototype.clone()

    def names(self) -> List[str]:
        return sorted(self._prototypes)


def run_demo(output: Callable[[str], None] = print) -> None:
    circle = Circle(x=10, y=10, radius=20, color="red")
    another_circle = circle.clone()
    output(f"Clone equals original: {another_circle == circle}")
    output(f"Clone is a separate object: {another_circle is not circle}")

    shapes: List[Shape] = [circle, another_circle, Rectangle(width=10, height=20, color="blue")]
    shapes_copy = [shape.clone() for shape in shapes]
    for original, copy in zip(shapes, shapes_copy):
        output(f"{type(copy).__name__} copied: {copy.model_dump()} (same object: {copy is original})")

    registry = ShapeRegistry()
    registry.add("big-green-circle", Circle(radius=50, color="green"))
    from_registry = registry.get("big-green-circle")
    from_registry.x = 7
    output(f"From registry: {from_registry.model_dump()}")
    output(f"Registry prototype untouched: {registry.get('big-green-circle').x == 0}")
