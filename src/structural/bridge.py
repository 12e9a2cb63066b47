"""Bridge - split an abstraction from its implementation so both can vary.

Problem:
    Remote controls come in basic and advanced flavours, devices come as TVs
    and radios. Subclassing every combination (basic TV remote, advanced
    radio remote, ...) multiplies classes with each new remote or device.

Solution:
    Separate the two dimensions into two hierarchies. Remotes (the
    abstraction) hold a reference to a device (the implementation) and only
    use the device interface, so any remote works with any device.

Structure:
    - ``RemoteControl`` is the abstraction; ``AdvancedRemoteControl`` refines it.
    - ``Device`` is the implementation interface.
    - ``TV`` and ``Radio`` are concrete implementations.

Usage:
    - A monolithic class has several variants of some functionality.
    - A class must be extended in several orthogonal dimensions.
    - Implementations must be switchable at runtime.

Advantages:
    - Platform-independent abstractions and implementations.
    - Client code works with high-level abstractions only.
    - Abstractions and implementations evolve independently (open/closed).

Disadvantages:
    - A highly cohesive class can become harder to follow once split.
"""
from abc import ABC, abstractmethod
from typing import Callable

MIN_VOLUME = 0
MAX_VOLUME = 100
MIN_CHANNEL = 1


class Device(ABC):
    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def enable(self) -> None:
        pass

    @abstractmethod
    def disable(self) -> None:
        pass

    @abstractmethod
    def get_volume(self) -> int:
        pass

    @abstractmethod
    def set_volume(self, percent: int) -> None:
        pass

    @abstractmethod
    def get_channel(self) -> int:
        pass

    @abstractmethod
    def set_channel(self, channel: int) -> None:
        pass


class _BaseDevice(Device):
    """State shared by the concrete devices below."""

    def __init__(self):
        self._enabled = False
        self._volume = 30
        self._channel = 1

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, percent: int) -> None:
        self._volume = max(MIN_VOLUME, min(MAX_VOLUME, percent))

    def get_channel(self) -> int:
        return self._channel

    def set_channel(self, channel: int) -> None:
        self._channel = max(MIN_CHANNEL, channel)

    def status(self) -> str:
        power = "on" if self._enabled else "off"
        return f"{type(self).__name__}: power={power} volume={self._volume} channel={self._channel}"


class TV(_BaseDevice):
    pass


class Radio(_BaseDevice):
    def set_channel(self, channel: int) -> None:
        # radio presets wrap around 1..10
        self._channel = (channel - 1) % 10 + 1


class RemoteControl:
    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> None:
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

    def volume_down(self) -> None:
        self.device.set_volume(self.device.get_volume() - 10)

    def volume_up(self) -> None:
        self.device.set_volume(self.device.get_volume() + 10)

    def channel_down(self) -> None:
        self.device.set_channel(self.device.get_channel() - 1)

    def channel_up(self) -> None:
        self.device.set_channel(self.device.get_channel() + 1)


class AdvancedRemoteControl(RemoteControl):
    def mute(self) -> None:
        self.device.set_volume(MIN_VOLUME)


def run_demo(output: Callable[[str], None] = print) -> None:
    tv = TV()
    remote = RemoteControl(tv)
    remote.toggle_power()
    remote.volume_up()
    remote.channel_up()
    output(tv.status())

    radio = Radio()
    advanced = AdvancedRemoteControl(radio)
    advanced.toggle_power()
    advanced.channel_down()
    advanced.mute()
    output(radio.status())
