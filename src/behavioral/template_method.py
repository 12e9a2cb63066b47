"""Template Method - fix an algorithm's skeleton, let subclasses fill in steps.

Problem:
    Every game AI takes a turn the same way: gather resources, build
    structures, train units, attack. Races differ only in some of those
    steps, yet each AI class repeats the whole sequence.

Solution:
    Put the sequence in a base-class template method that calls one method
    per step. Steps get default implementations where sensible; subclasses
    override only what differs and must supply the abstract steps.

Structure:
    - ``GameAI.turn`` is the template method.
    - ``collect_resources``, ``build_structures`` and ``attack`` are optional
      hooks; ``build_units`` is abstract.
    - ``OrcsAI`` and ``MonstersAI`` override the steps they need.

Usage:
    - Clients should extend particular steps of an algorithm, not the whole
      algorithm or its structure.
    - Several classes contain almost identical algorithms with minor differences.

Advantages:
    - Clients override only parts of a large algorithm.
    - Duplicate code is pulled into the superclass.

Disadvantages:
    - The fixed skeleton can limit some clients.
    - Suppressing a default step through a subclass may break substitutability.
    - Template methods get harder to maintain the more steps they have.
"""
from abc import ABC, abstractmethod
from typing import Callable, List


class GameAI(ABC):
    race = "unknown"

    def turn(self) -> List[str]:
        """Take one turn and return the actions performed, in order."""
        steps = (
            self.collect_resources,
            self.build_structures,
            self.build_units,
            self.attack,
        )
        actions = []
        for step in steps:
            action = step()
            if action:
                actions.append(action)
        return actions

    def collect_resources(self) -> str:
        return ""

    def build_structures(self) -> str:
        return ""

    @abstractmethod
    def build_units(self) -> str:
        pass

    def attack(self) -> str:
        return ""


class OrcsAI(GameAI):
    """Orcs do not collect resources."""
    race = "orcs"

    def build_structures(self) -> str:
        return "Orcs build structures"

    def build_units(self) -> str:
        return "Orcs build units"

    def attack(self) -> str:
        return "Orcs attack"


class MonstersAI(GameAI):
    """Monsters do not build structures."""
    race = "monsters"

    def collect_resources(self) -> str:
        return "Monsters collect resources"

    def build_units(self) -> str:
        return "Monsters build units"

    def attack(self) -> str:
        return "Monsters attack"


def run_demo(output: Callable[[str], None] = print) -> None:
    for ai in (OrcsAI(), MonstersAI()):
        output(f"{ai.race} turn:")
        for action in ai.turn():
            output(f"  {action}")
