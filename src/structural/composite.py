"""Composite - treat individual objects and groups of objects uniformly.

Problem:
    A drawing contains dots and circles, and groups of them, and groups of
    groups. Code that moves or draws a selection should not need to know
    whether it is dealing with one shape or a nested tree of shapes.

Solution:
    Give leaves and containers the same interface. A container implements
    each operation by delegating to its children, so whole trees are
    handled with the same calls as a single leaf.

Structure:
    - ``Graphic`` is the component interface.
    - ``Dot`` and ``Circle`` are leaves.
    - ``CompoundGraphic`` is the composite holding child graphics.

Usage:
    - A tree-like object structure is needed.
    - Clients should treat simple and complex elements the same way.

Advantages:
    - Complex trees are handled conveniently through polymorphism and recursion.
    - New element types are introduced without breaking existing code (open/closed).

Disadvantages:
    - A common interface for very different classes can become over-general.
"""
from abc import ABC, abstractmethod
from typing import Callable, List


class Graphic(ABC):
    @abstractmethod
    def move(self, dx: int, dy: int) -> None:
        pass

    @abstractmethod
    def draw(self) -> List[str]:
        pass


class Dot(Graphic):
    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def move(self, dx: int, dy: int) -> None:
        self.x += dx
        self.y += dy

    def draw(self) -> List[str]:
        return [f"Draw dot at {self.x} {self.y}"]


class Circle(Dot):
    def __init__(self, x: int, y: int, radius: int):
        super().__init__(x, y)
        self.radius = radius

    def draw(self) -> List[str]:
        return [f"Draw circle at {self.x} {self.y} with radius {self.radius}"]


class CompoundGraphic(Graphic):
    def __init__(self, *children: Graphic):
        self.children: List[Graphic] = list(children)

    def add(self, child: Graphic) -> None:
        self.children.append(child)

    def remove(self, child: Graphic) -> None:
        """Remove a direct child.

        Raises:
            ValueError: if ``child`` is not a direct child of this graphic
        """
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                return
        raise ValueError(f"{type(child).__name__} is not a child of this graphic")

    def move(self, dx: int, dy: int) -> None:
        for child in self.children:
            child.move(dx, dy)

    def draw(self) -> List[str]:
        lines: List[str] = []
        for child in self.children:
            lines.extend(child.draw())
        return lines


def run_demo(output: Callable[[str], None] = print) -> None:
    dot1 = Dot(1, 2)
    dot2 = Dot(3, 4)
    circle = Circle(5, 6, 7)

    group = CompoundGraphic(dot2, circle)
    drawing = CompoundGraphic(dot1, group)

    for line in drawing.draw():
        output(line)
    output("Move everything by (1, 1):")
    drawing.move(1, 1)
    for line in drawing.draw():
        output(line)
    output("Remove the first dot:")
    drawing.remove(dot1)
    for line in drawing.draw():
        output(line)
