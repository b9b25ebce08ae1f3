"""Friends iterator — one-shot, forward-only walk over ranked friends.

All graph work happens in the constructor; next() and done() only read
and advance a cursor over the materialized sequence.
"""

from __future__ import annotations

from typing import Sequence

from friendcircles.config import CirclesConfig
from friendcircles.filters import Filter
from friendcircles.person import Person
from friendcircles.ranking import collect_circles


class FriendsIterator:
    """Iterates friends by circle, then by name, through a Filter.

    Args:
        friends: The full person collection.
        filter: A Filter instance; anything else raises TypeError.
        max_level: Highest circle to include. None includes every circle.
        config: Optional CirclesConfig.
    """

    def __init__(
        self,
        friends: Sequence[Person],
        filter: Filter,
        max_level: int | None = None,
        *,
        config: CirclesConfig | None = None,
    ) -> None:
        if not isinstance(filter, Filter):
            raise TypeError("Object for filtration must be a Filter")

        if max_level is None:
            # Circles never exceed the number of people
            max_level = len(friends)

        self.max_level = max_level
        self._friends = tuple(filter.filter(collect_circles(friends, max_level, config)))
        self._cursor = 0

    def next(self) -> Person | None:
        """Return the next friend, or None once exhausted."""
        if self._cursor < len(self._friends):
            person = self._friends[self._cursor]
            self._cursor += 1
            return person
        return None

    def done(self) -> bool:
        return self._cursor >= len(self._friends)

    @property
    def remaining(self) -> int:
        return len(self._friends) - self._cursor

    def __len__(self) -> int:
        return len(self._friends)

    def __iter__(self) -> FriendsIterator:
        return self

    def __next__(self) -> Person:
        if self.done():
            raise StopIteration
        return self.next()


def LimitedIterator(
    friends: Sequence[Person],
    filter: Filter,
    max_level: int,
    *,
    config: CirclesConfig | None = None,
) -> FriendsIterator:
    """FriendsIterator restricted to circles 1..max_level."""
    return FriendsIterator(friends, filter, max_level, config=config)
