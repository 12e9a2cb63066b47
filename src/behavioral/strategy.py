"""Strategy - make a family of algorithms interchangeable at runtime.

Problem:
    A calculator context must apply one of several operations. Branching on
    the operation inside the context makes it grow with every new operation
    and mixes the algorithms with the code that uses them.

Solution:
    Extract each algorithm into its own strategy class behind a common
    interface. The context holds a reference to a strategy and delegates to
    it; clients swap strategies without touching the context.

Structure:
    - ``Strategy`` declares ``execute(a, b)``.
    - ``Add``, ``Subtract``, ``Multiply`` and ``Divide`` are concrete strategies.
    - ``Context`` holds the current strategy.
    - ``strategy_for`` picks a strategy by operation name.

Usage:
    - Different variants of an algorithm are needed and must be switched at runtime.
    - Many similar classes differ only in how they perform one behaviour.
    - Business logic should be isolated from algorithm details.

Advantages:
    - Algorithms are swapped at runtime.
    - Implementation details are isolated from the code using them.
    - Composition replaces inheritance; new strategies need no context changes (open/closed).

Disadvantages:
    - Clients must know the differences between strategies to pick one.
    - A plain function often does the same job with less ceremony.
"""
from typing import Callable, Dict, Protocol, Type

from src.domain.core.exceptions import UnsupportedOperationError


class Strategy(Protocol):
    def execute(self, a: float, b: float) -> float:
        ...


class Add:
    def execute(self, a: float, b: float) -> float:
        return a + b


class Subtract:
    def execute(self, a: float, b: float) -> float:
        return a - b


class Multiply:
    def execute(self, a: float, b: float) -> float:
        return a * b


class Divide:
    def execute(self, a: float, b: float) -> float:
        # ZeroDivisionError propagates to the caller
        return a / b


STRATEGIES: Dict[str, Type[Strategy]] = {
    "add": Add,
    "subtract": Subtract,
    "multiply": Multiply,
    "divide": Divide,
}


def strategy_for(operation: str) -> Strategy:
    """Return a new strategy for an operation name such as ``"add"``."""
    strategy_class = STRATEGIES.get(operation.lower())
    if strategy_class is None:
        raise UnsupportedOperationError(operation, sorted(STRATEGIES))
    return strategy_class()


class Context:
    def __init__(self, strategy: Strategy):
        self.strategy = strategy

    def set_strategy(self, strategy: Strategy) -> None:
        self.strategy = strategy

    def execute_strategy(self, a: float, b: float) -> float:
        return self.strategy.execute(a, b)


def run_demo(output: Callable[[str], None] = print) -> None:
    a, b = 12, 4
    context = Context(strategy_for("add"))
    output(f"add: {a} and {b} -> {context.execute_strategy(a, b)}")

    for operation in ("subtract", "multiply", "divide"):
        context.set_strategy(strategy_for(operation))
        output(f"{operation}: {a} and {b} -> {context.execute_strategy(a, b)}")
