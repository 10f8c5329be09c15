"""Different record types used through one common interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


def _format_float(value: float) -> str:
    return str(int(value)) if value.is_integer() else repr(value)


class Addable(ABC):
    """Anything that can report itself through ``add``."""

    @abstractmethod
    def add(self) -> str:
        """Print this record's line and return it."""


@dataclass
class AStruct(Addable):
    amount: int
    name: str

    def add(self) -> str:
        line = f"{self.amount} ~ {self.name}"
        print(line)
        return line


@dataclass
class BStruct(Addable):
    string1: str
    float64: float

    def add(self) -> str:
        line = f"{self.string1} ! {_format_float(self.float64)}"
        print(line)
        return line


@dataclass
class CStruct(Addable):
    num1: int
    num2: int

    def add(self) -> str:
        line = f"{self.num1} @ {self.num2}"
        print(line)
        return line


def trait_object() -> list[str]:
    """Call ``add`` on one record of each kind; return the printed lines."""
    records: list[Addable] = [
        AStruct(amount=2, name="Bob"),
        BStruct(string1="Alice", float64=3.14),
        CStruct(num1=3, num2=5),
    ]
    return [record.add() for record in records]