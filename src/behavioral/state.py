"""State - change an object's behaviour when its internal state changes.

Problem:
    An audio player reacts differently to the same buttons depending on whether
    it is playing, paused or stopped. Encoding that with conditionals in every
    method grows into a tangle as states are added.

Solution:
    Represent each state as its own class implementing every action. The
    player delegates to its current state object, and states switch the
    player to another state when a transition happens.

Structure:
    - ``AudioPlayer`` is the context holding the current state.
    - ``State`` declares the state-specific actions.
    - ``PlayingState``, ``PausedState`` and ``StoppedState`` implement them and
      trigger transitions.

Usage:
    - Behaviour depends on the current state and there are many states.
    - A class is polluted with large conditionals on its own fields.
    - Similar states share a lot of duplicate code.

Advantages:
    - State-specific code lives in separate classes (single responsibility).
    - New states are introduced without changing existing ones (open/closed).
    - The context loses its state conditionals.

Disadvantages:
    - Overkill when there are only a few states that rarely change.
"""
from abc import ABC, abstractmethod
from typing import Callable


class State(ABC):
    name = "state"

    def __init__(self, player: "AudioPlayer"):
        self.player = player

    @abstractmethod
    def play(self) -> str:
        pass

    @abstractmethod
    def pause(self) -> str:
        pass

    @abstractmethod
    def stop(self) -> str:
        pass


class PlayingState(State):
    name = "playing"

    def play(self) -> str:
        return "Already playing..."

    def pause(self) -> str:
        self.player.change_state(PausedState(self.player))
        return "Paused..."

    def stop(self) -> str:
        self.player.change_state(StoppedState(self.player))
        return "Stopped..."


class PausedState(State):
    name = "paused"

    def play(self) -> str:
        self.player.change_state(PlayingState(self.player))
        return "Playing..."

    def pause(self) -> str:
        return "Already paused..."

    def stop(self) -> str:
        self.player.change_state(StoppedState(self.player))
        return "Stopped..."


class StoppedState(State):
    name = "stopped"

    def play(self) -> str:
        self.player.change_state(PlayingState(self.player))
        return "Playing..."

    def pause(self) -> str:
        self.player.change_state(PausedState(self.player))
        return "Paused..."

    def stop(self) -> str:
        return "Already stopped..."


class AudioPlayer:
    """Context: delegates every button to the current state."""

    def __init__(self,
                 output: Callable[[str], None] = print,
                 initial_state: Callable[["AudioPlayer"], State] = StoppedState):
        self._output = output
        self.state: State = initial_state(self)

    def change_state(self, state: State) -> None:
        self.state = state

    def play(self) -> str:
        return self._emit(self.state.play())

    def pause(self) -> str:
        return self._emit(self.state.pause())

    def stop(self) -> str:
        return self._emit(self.state.stop())

    def _emit(self, message: str) -> str:
        self._output(message)
        return message


def run_demo(output: Callable[[str], None] = print) -> None:
    player = AudioPlayer(output)
    player.pause()
    player.play()
    player.play()
    player.pause()
    player.play()
    player.stop()
    player.stop()
    output(f"Final state: {player.state.name}")
