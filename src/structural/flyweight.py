"""Flyweight - share common state between many objects to save memory.

Problem:
    A forest holds thousands of trees. Each tree carries a name, colour and
    texture that are identical across most of the forest; storing them per
    tree wastes memory that grows with every tree planted.

Solution:
    Split the state. Intrinsic state (name, colour, texture) goes into an
    immutable flyweight shared by every tree of that kind. Extrinsic state
    (coordinates) stays in the lightweight tree objects. A registry makes
    sure each kind of flyweight exists once.

Structure:
    - ``TreeType`` is the flyweight holding intrinsic state.
    - ``TreeTypeRegistry`` is the flyweight factory; it is created and passed
      in explicitly, so its cache lives exactly as long as its owner.
    - ``Tree`` holds the extrinsic state and a reference to its type.
    - ``Forest`` is the client; ``Canvas`` is where trees are drawn.

Usage:
    - A huge number of similar objects barely fits into available memory.

Advantages:
    - Memory use drops with the number of shared flyweights.

Disadvantages:
    - Memory is traded for CPU time when extrinsic state is recomputed.
    - Split state makes the code more complicated.
"""
from typing import Callable, Dict, List, Protocol, Tuple

from pydantic import BaseModel, ConfigDict

from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Canvas(Protocol):
    def draw_tree(self, tree_type: "TreeType", x: int, y: int) -> None:
        ...


class TreeType(BaseModel):
    """Intrinsic state shared between trees."""
    model_config = ConfigDict(frozen=True)

    name: str
    color: str
    texture: str

    def draw(self, canvas: Canvas, x: int, y: int) -> None:
        canvas.draw_tree(self, x, y)


class TreeTypeRegistry:
    """Hands out one ``TreeType`` per distinct (name, color, texture)."""

    def __init__(self):
        self._tree_types: Dict[Tuple[str, str, str], TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        tree_type = self._tree_types.get(key)
        if tree_type is None:
            tree_type = TreeType(name=name, color=color, texture=texture)
            self._tree_types[key] = tree_type
            logger.debug("Created tree type", name=name, color=color, texture=texture)
        return tree_type

    def __len__(self) -> int:
        return len(self._tree_types)


class Tree:
    __slots__ = ("x", "y", "type")

    def __init__(self, x: int, y: int, tree_type: TreeType):
        self.x = x
        self.y = y
        self.type = tree_type

    def draw(self, canvas: Canvas) -> None:
        self.type.draw(canvas, self.x, self.y)


class Forest:
    def __init__(self, registry: TreeTypeRegistry):
        self.registry = registry
        self.trees: List[Tree] = []

    def plant_tree(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self.registry.get_tree_type(name, color, texture))
        self.trees.append(tree)
        return tree

    def draw(self, canvas: Canvas) -> None:
        for tree in self.trees:
            tree.draw(canvas)


class ConsoleCanvas:
    """Canvas that describes each drawing call as a line of text."""

    def __init__(self, output: Callable[[str], None] = print):
        self._output = output

    def draw_tree(self, tree_type: TreeType, x: int, y: int) -> None:
        self._output(f"Draw {tree_type.color} {tree_type.name} ({tree_type.texture}) at {x},{y}")


def run_demo(output: Callable[[str], None] = print) -> None:
    registry = TreeTypeRegistry()
    forest = Forest(registry)
    for i in range(1, 6):
        forest.plant_tree(i, i + 1, "oak", "green", "rough bark")
    forest.plant_tree(10, 3, "birch", "white", "smooth bark")
    forest.plant_tree(11, 4, "birch", "white", "smooth bark")

    forest.draw(ConsoleCanvas(output))
    output(f"{len(forest.trees)} trees share {len(registry)} tree types")
