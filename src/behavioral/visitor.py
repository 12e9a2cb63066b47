"""Visitor - add operations to a class hierarchy without changing it.

Problem:
    Shapes in a drawing need to be exported to JSON, measured, and soon more.
    Adding every operation to every shape class bloats the shapes with code
    unrelated to their job.

Solution:
    Put each operation in a visitor with one method per shape class. Shapes
    only implement ``accept``, which calls back the visitor method matching
    their own class (double dispatch).

Structure:
    - ``ShapeVisitor`` declares ``visit_dot``, ``visit_circle``, ``visit_rectangle``.
    - ``JsonExportVisitor`` and ``AreaVisitor`` are concrete visitors.
    - ``Shape`` declares ``accept``; ``Dot``, ``Circle`` and ``Rectangle`` implement it.

Usage:
    - An operation must run over all elements of a complex object structure.
    - Auxiliary behaviour should be kept out of the element classes.
    - A behaviour only makes sense for some classes of a hierarchy.

Advantages:
    - New operations are added without changing the elements (open/closed).
    - Related behaviour lives in one class (single responsibility).

Disadvantages:
    - Every visitor changes when an element class is added or removed.
    - Visitors may lack access to the elements' private fields.
"""
import json
import math
from abc import ABC, abstractmethod
from typing import Any, Callable, List


class ShapeVisitor(ABC):
    @abstractmethod
    def visit_dot(self, dot: "Dot") -> Any:
        pass

    @abstractmethod
    def visit_circle(self, circle: "Circle") -> Any:
        pass

    @abstractmethod
    def visit_rectangle(self, rectangle: "Rectangle") -> Any:
        pass


class Shape(ABC):
    def __init__(self, x: float = 0, y: float = 0):
        self.x = x
        self.y = y

    def move(self, dx: float, dy: float) -> None:
        self.x += dx
        self.y += dy

    @abstractmethod
    def accept(self, visitor: ShapeVisitor) -> Any:
        pass


class Dot(Shape):
    def accept(self, visitor: ShapeVisitor) -> Any:
        return visitor.visit_dot(self)


class Circle(Shape):
    def __init__(self, x: float = 0, y: float = 0, radius: float = 1):
        super().__init__(x, y)
        self.radius = radius

    def accept(self, visitor: ShapeVisitor) -> Any:
        return visitor.visit_circle(self)


class Rectangle(Shape):
    def __init__(self, x: float = 0, y: float = 0, width: float = 1, height: float = 1):
        super().__init__(x, y)
        self.width = width
        self.height = height

    def accept(self, visitor: ShapeVisitor) -> Any:
        return visitor.visit_rectangle(self)


class JsonExportVisitor(ShapeVisitor):
    """Serialize shapes to JSON objects tagged with their type."""

    def visit_dot(self, dot: Dot) -> str:
        return json.dumps({"type": "dot", "x": dot.x, "y": dot.y})

    def visit_circle(self, circle: Circle) -> str:
        return json.dumps({"type": "circle", "x": circle.x, "y": circle.y, "radius": circle.radius})

    def visit_rectangle(self, rectangle: Rectangle) -> str:
        return json.dumps({
            "type": "rectangle",
            "x": rectangle.x,
            "y": rectangle.y,
            "width": rectangle.width,
            "height": rectangle.height,
        })

    def export(self, shapes: List[Shape]) -> str:
        return "[" + ", ".join(shape.accept(self) for shape in shapes) + "]"


class AreaVisitor(ShapeVisitor):
    def visit_dot(self, dot: Dot) -> float:
        return 0.0

    def visit_circle(self, circle: Circle) -> float:
        return math.pi * circle.radius ** 2

    def visit_rectangle(self, rectangle: Rectangle) -> float:
        return float(rectangle.width * rectangle.height)


def run_demo(output: Callable[[str], None] = print) -> None:
    shapes: List[Shape] = [Dot(1, 2), Circle(5, 5, 2), Rectangle(0, 0, 3, 4)]
    shapes[0].move(1, 1)

    exporter = JsonExportVisitor()
    output(f"JSON: {exporter.export(shapes)}")

    areas = AreaVisitor()
    for shape in shapes:
        output(f"Area of {type(shape).__name__}: {shape.accept(areas):.2f}")
