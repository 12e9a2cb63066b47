"""Decorator - attach behaviour to an object by wrapping it.

Problem:
    A data source writes and reads text. Some callers want the data encrypted,
    some compressed, some both. A subclass per combination does not scale,
    and inheritance cannot add behaviour to an existing object at runtime.

Solution:
    Wrap the source in decorators implementing the same interface. Each
    decorator transforms the data and delegates to the object it wraps, so
    decorators stack in any order and any number.

Structure:
    - ``DataSource`` is the component interface.
    - ``FileDataSource`` is the concrete component (an in-memory buffer named
      after a file).
    - ``DataSourceDecorator`` is the base decorator holding the wrappee.
    - ``EncryptionDecorator`` and ``CompressionDecorator`` are concrete decorators.

Usage:
    - Extra behaviour must be assigned to objects at runtime without breaking
      the code that uses them.
    - Extending behaviour through inheritance is awkward or impossible.

Advantages:
    - Behaviour is extended without new subclasses.
    - Responsibilities are added or removed at runtime.
    - Several behaviours combine by stacking wrappers.
    - A monolithic class splits into small ones (single responsibility).

Disadvantages:
    - A specific wrapper is hard to remove from the middle of a stack.
    - Behaviour can depend on the order of the stack.
"""
import base64
import zlib
from abc import ABC, abstractmethod
from typing import Callable


class DataSource(ABC):
    @abstractmethod
    def write_data(self, data: str) -> None:
        pass

    @abstractmethod
    def read_data(self) -> str:
        pass


class FileDataSource(DataSource):
    def __init__(self, filename: str):
        self.filename = filename
        self._contents = ""

    def write_data(self, data: str) -> None:
        self._contents = data

    def read_data(self) -> str:
        return self._contents


class DataSourceDecorator(DataSource):
    """Delegates everything to the wrapped source."""

    def __init__(self, source: DataSource):
        self.wrappee = source

    def write_data(self, data: str) -> None:
        self.wrappee.write_data(data)

    def read_data(self) -> str:
        return self.wrappee.read_data()


class EncryptionDecorator(DataSourceDecorator):
    """Repeating-key XOR encoded as base64. A teaching cipher, not a secure one."""

    def __init__(self, source: DataSource, key: str = "secret"):
        super().__init__(source)
        if not key:
            raise ValueError("Encryption key must not be empty")
        self._key = key.encode("utf-8")

    def _xor(self, payload: bytes) -> bytes:
        return bytes(b ^ self._key[i % len(self._key)] for i, b in enumerate(payload))

    def write_data(self, data: str) -> None:
        super().write_data(self.encrypt(data))

    def read_data(self) -> str:
        return self.decrypt(super().read_data())

    def encrypt(self, data: str) -> str:
        return base64.b64encode(self._xor(data.encode("utf-8"))).decode("ascii")

    def decrypt(self, data: str) -> str:
        if not data:
            return ""
        return self._xor(base64.b64decode(data)).decode("utf-8")


class CompressionDecorator(DataSourceDecorator):
    def __init__(self, source: DataSource, level: int = 6):
        super().__init__(source)
        self.level = level

    def write_data(self, data: str) -> None:
        super().write_data(self.compress(data))

    def read_data(self) -> str:
        return self.decompress(super().read_data())

    def compress(self, data: str) -> str:
        return base64.b64encode(zlib.compress(data.encode("utf-8"), self.level)).decode("ascii")

    def decompress(self, data: str) -> str:
        if not data:
            return ""
        return zlib.decompress(base64.b64decode(data)).decode("utf-8")


def run_demo(output: Callable[[str], None] = print) -> None:
    salary_records = "Name,Salary\nJohn Smith,100000\nSteven Jobs,912000"

    source = FileDataSource("salary.dat")
    encoded = CompressionDecorator(EncryptionDecorator(source))
    encoded.write_data(salary_records)

    output("- Stored in the file:")
    output(source.read_data())
    output("- Read through the decorators:")
    for line in encoded.read_data().splitlines():
        output(line)
