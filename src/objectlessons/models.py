# src/objectlessons/models.py
"""
Small value objects the lessons construct and mutate.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class Employee:
    """Employee record with a copy constructor."""
    id: str
    name: str
    age: int

    @classmethod
    def from_employee(cls, employee: "Employee") -> "Employee":
        """Copy constructor: a new Employee with the same field values."""
        return cls(employee.id, employee.name, employee.age)


class House:
    def __init__(self, colour: str):
        self.colour = colour

    def __repr__(self):
        return f"House(colour={self.colour!r})"


class SharedNameDog:
    """Dog whose name lives on the class, so every instance shares it."""

    name: Optional[str] = None

    def __init__(self, name: str):
        SharedNameDog.name = name

    def print_name(self) -> str:
        print(self.name)
        return self.name


class InstanceNameDog:
    """Dog whose name lives on the instance."""

    def __init__(self, name: str):
        self.name = name

    def print_name(self) -> str:
        print(self.name)
        return self.name


class TrickDog:
    """Dog with a class-level mutable list of tricks."""

    tricks: List[str] = []

    def __init__(self, name: str):
        self.name = name

    def learn(self, trick: str):
        # Mutates the class list unless this instance rebound `tricks`
        self.tricks.append(trick)


class Animal(ABC):
    """Base animal with a private age only Animal's own code can see."""

    def __init__(self, kind: str, weight: float):
        self.__age = 1
        self.kind = kind
        self.weight = weight

    @property
    def base_age(self) -> int:
        """Age as seen from Animal's code (``_Animal__age``)."""
        return self.__age

    @abstractmethod
    def make_noise(self) -> str:
        pass


class Dog(Animal):
    def __init__(self, age: int, kind: str, weight: float):
        super().__init__(kind, weight)
        self.__age = age

    @property
    def age(self) -> int:
        return self.__age

    def make_noise(self) -> str:
        print("Lol!")
        return "Lol!"
