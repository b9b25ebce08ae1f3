"""Friend filters — predicates applied to the ranked sequence."""

from __future__ import annotations

from typing import Iterable

from friendcircles.person import FEMALE, MALE, Person


class Filter:
    """Base filter: accepts every person."""

    def accepts(self, person: Person) -> bool:
        return True

    def __call__(self, person: Person) -> bool:
        return self.accepts(person)

    def filter(self, friends: Iterable[Person]) -> list[Person]:
        """Keep accepted persons, preserving order."""
        return [p for p in friends if self.accepts(p)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class GenderFilter(Filter):
    """Accepts persons of one gender."""

    def __init__(self, gender: str) -> None:
        self.gender = gender

    def accepts(self, person: Person) -> bool:
        return person.gender == self.gender

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.gender!r})"


class MaleFilter(GenderFilter):
    """Accepts male friends only."""

    def __init__(self) -> None:
        super().__init__(MALE)


class FemaleFilter(GenderFilter):
    """Accepts female friends only."""

    def __init__(self) -> None:
        super().__init__(FEMALE)
