"""Person records — the nodes of the friend graph.

Persons come from an external loader and are treated as read-only input.
Names are the identity: every friend reference is a name, and the graph
relies on names being unique within one collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from loguru import logger


class Gender(str, Enum):
    """The two gender values a person record can carry."""
    MALE = "male"
    FEMALE = "female"


MALE = Gender.MALE.value
FEMALE = Gender.FEMALE.value


class DuplicateNameError(ValueError):
    """Raised when two person records share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate person name: {name!r}")
        self.name = name


# ── Dataclasses ───────────────────────────────────────────


@dataclass(frozen=True)
class Person:
    """A person in the friend graph."""
    name: str
    gender: str
    best: bool = False                             # Seed of circle 1
    friends: tuple[str, ...] = field(default=())   # Names, may be dangling

    def __post_init__(self) -> None:
        Gender(self.gender)  # ValueError on anything but male/female
        if not isinstance(self.best, bool):
            raise TypeError(f"best must be a bool, got {self.best!r}")

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "gender": self.gender,
            "best": self.best,
            "friends": list(self.friends),
        }

    @classmethod
    def from_dict(cls, d: dict) -> Person:
        return cls(
            name=d["name"],
            gender=Gender(d["gender"]).value,
            best=d.get("best", False),
            friends=tuple(d.get("friends", ())),
        )


@dataclass(frozen=True)
class LeveledPerson:
    """A person paired with the circle they were reached in."""
    person: Person
    level: int


# ── Helpers ───────────────────────────────────────────────


def index_by_name(
    friends: Iterable[Person],
    reject_duplicates: bool = True,
) -> dict[str, Person]:
    """Build a name -> Person lookup.

    Graphs with repeated names are not supported. By default a repeat
    raises DuplicateNameError; with reject_duplicates=False the first
    record wins and the repeat is logged.
    """
    index: dict[str, Person] = {}
    for person in friends:
        if person.name in index:
            if reject_duplicates:
                raise DuplicateNameError(person.name)
            logger.warning(f"Ignoring duplicate person record '{person.name}'")
            continue
        index[person.name] = person
    return index
