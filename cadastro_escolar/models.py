"""Records kept by the school registry: people, students and teachers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class BirthDate:
    """A day/month/year triple; zero means an unset part."""

    day: int = 0
    month: int = 0
    year: int = 0

    def __str__(self) -> str:
        return f"{self.day}/{self.month}/{self.year}"


class Title(str, Enum):
    """Academic titles a teacher may hold."""

    SPECIALIST = "Especialista"
    MASTER = "Mestre"
    DOCTOR = "Doutor"

    @classmethod
    def from_choice(cls, choice: int) -> Title:
        """Return the title for a menu choice from 1 to 3."""
        choices = {1: cls.SPECIALIST, 2: cls.MASTER, 3: cls.DOCTOR}
        try:
            return choices[choice]
        except KeyError:
            raise ValueError("Somente números de 1 a 3") from None


@dataclass
class Person:
    """Someone registered with a name, a CPF and a birth date."""

    name: str = ""
    cpf: str = ""
    birth_date: BirthDate = field(default_factory=BirthDate)

    @property
    def day(self) -> int:
        return self.birth_date.day

    @property
    def month(self) -> int:
        return self.birth_date.month

    @property
    def year(self) -> int:
        return self.birth_date.year


@dataclass
class Student(Person):
    """A person with an enrollment number."""

    enrollment: str = ""


@dataclass
class Teacher(Person):
    """A person with an academic title."""

    title: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.title, Title):
            self.title = self.title.value