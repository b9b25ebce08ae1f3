"""Friend graph — name index, undirected adjacency, connected components.

Edges come from each person's `friends` list and are treated as
undirected: if A lists B, then A and B are neighbours of each other.
Names that do not resolve to a person in the collection are skipped.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable

from loguru import logger

from friendcircles.config import CirclesConfig
from friendcircles.person import Person, index_by_name


class FriendGraph:
    """Undirected view over a collection of Person records.

    The name index and adjacency lists are built once at construction.
    Person records are referenced, never copied.
    """

    def __init__(
        self,
        friends: Iterable[Person],
        config: CirclesConfig | None = None,
    ) -> None:
        config = config or CirclesConfig()
        self._people = index_by_name(friends, config.reject_duplicate_names)
        self._adjacency: dict[str, list[str]] = {name: [] for name in self._people}

        dangling = 0
        for person in self._people.values():
            for friend_name in person.friends:
                if friend_name not in self._people:
                    dangling += 1
                    continue
                self._link(person.name, friend_name)
                self._link(friend_name, person.name)

        if dangling:
            logger.debug(f"Friend graph: skipped {dangling} unknown friend reference(s)")

    def _link(self, a: str, b: str) -> None:
        neighbours = self._adjacency[a]
        if b != a and b not in neighbours:
            neighbours.append(b)

    def __len__(self) -> int:
        return len(self._people)

    def __contains__(self, name: object) -> bool:
        return name in self._people

    def get(self, name: str) -> Person | None:
        return self._people.get(name)

    def neighbours(self, name: str) -> list[Person]:
        """Direct neighbours of a person, own `friends` order first."""
        return [self._people[n] for n in self._adjacency.get(name, [])]

    def bfs(self, root: Person) -> list[Person]:
        """All persons reachable from root, in breadth-first visiting order."""
        visited = {root.name}
        order = [root]
        queue: deque[Person] = deque([root])

        while queue:
            current = queue.popleft()
            for neighbour in self.neighbours(current.name):
                if neighbour.name not in visited:
                    visited.add(neighbour.name)
                    order.append(neighbour)
                    queue.append(neighbour)

        return order

    def find_components(self) -> list[list[Person]]:
        """Partition the graph into connected components.

        Components are discovered in input order of their first member;
        each component lists its members in BFS order from that member.
        """
        visited: set[str] = set()
        components: list[list[Person]] = []

        for person in self._people.values():
            if person.name in visited:
                continue
            component = self.bfs(person)
            visited.update(p.name for p in component)
            components.append(component)

        return components


def find_connected_components(
    friends: Iterable[Person],
    config: CirclesConfig | None = None,
) -> list[list[Person]]:
    """Shortcut for FriendGraph(friends).find_components()."""
    return FriendGraph(friends, config).find_components()
